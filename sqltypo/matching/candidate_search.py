# sqltypo Matching - Candidate Search
# ===================================
"""
Closest-match and ranked-suggestion search over a list of candidate names.

Both searches score every candidate with ``levenshtein``; candidate lists
are expected to stay in the tens-to-hundreds range (no index structure).
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .edit_distance import levenshtein, similarity


@dataclass(frozen=True)
class MatchResult:
    """A candidate and how far it is from the input."""
    value: str          # The candidate that matched
    distance: int       # Levenshtein distance to the input
    similarity: float   # 1 - distance / max length

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "value": self.value,
            "distance": self.distance,
            "similarity": self.similarity,
        }


def find_closest_match(input: str,
                       candidates: Iterable[str],
                       max_distance: int = 2) -> Optional[MatchResult]:
    """
    Find the candidate closest to ``input`` within ``max_distance`` edits.

    When several candidates share the smallest distance, the first one
    encountered wins.

    Args:
        input: The string the user typed
        candidates: Known names to compare against
        max_distance: Largest distance that still counts as a match

    Returns:
        MatchResult for the best candidate, or None if nothing is close enough
    """
    if not input:
        return None

    best: Optional[MatchResult] = None

    for candidate in candidates:
        distance = levenshtein(input, candidate)
        if distance > max_distance:
            continue

        if best is None or distance < best.distance:
            best = MatchResult(
                value=candidate,
                distance=distance,
                similarity=similarity(input, candidate, distance)
            )

    return best


def get_suggestions(input: str,
                    candidates: Iterable[str],
                    max_results: int = 3,
                    max_distance: int = 3) -> List[MatchResult]:
    """
    Rank candidates that differ from ``input`` by at most ``max_distance``.

    Exact (case-insensitive) matches are left out. Results are ordered by
    distance; candidates at the same distance keep their original order.

    Args:
        input: The string the user typed
        candidates: Known names to compare against
        max_results: Maximum number of suggestions
        max_distance: Largest distance to include

    Returns:
        List of MatchResult, closest first
    """
    if not input:
        return []

    matches: List[MatchResult] = []

    for candidate in candidates:
        distance = levenshtein(input, candidate)
        if 0 < distance <= max_distance:
            matches.append(MatchResult(
                value=candidate,
                distance=distance,
                similarity=similarity(input, candidate, distance)
            ))

    # list.sort is stable, so equal distances keep encounter order
    matches.sort(key=lambda m: m.distance)

    return matches[:max_results]
