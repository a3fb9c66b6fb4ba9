# sqltypo Matching - Edit Distance
# ================================
"""
Case-insensitive Levenshtein distance and normalized similarity.

Distances are computed with RapidFuzz; every edit (insert, delete,
substitute) costs 1.
"""

from typing import Optional

from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str) -> int:
    """
    Edit distance between two strings, ignoring case.

    Args:
        a: First string
        b: Second string

    Returns:
        Number of single-character edits turning ``a`` into ``b``
    """
    a_lower = a.lower()
    b_lower = b.lower()

    if a_lower == b_lower:
        return 0
    if not a_lower:
        return len(b_lower)
    if not b_lower:
        return len(a_lower)

    return Levenshtein.distance(a_lower, b_lower)


def similarity(a: str, b: str, distance: Optional[int] = None) -> float:
    """
    Normalized similarity in [0, 1]: ``1 - distance / max(len(a), len(b))``.

    Args:
        a: First string
        b: Second string
        distance: Precomputed ``levenshtein(a, b)``, if the caller has it

    Returns:
        1.0 for identical (or both empty) strings, 0.0 for nothing in common
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0

    if distance is None:
        distance = levenshtein(a, b)
    return 1 - distance / max_len
