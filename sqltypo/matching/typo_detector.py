# sqltypo Matching - Typo Detector
# ================================
"""
Finds likely misspelled schema identifiers in query text.

The detector is not a parser. It scans identifier-shaped tokens (``name`` or
``name.name``) with a regular expression, skips reserved words and numeric
tokens, and compares each remaining token against the schema:

- dotted tokens against ``table.column`` identifiers
- bare tokens against table names

Only tokens with a candidate within ``max_distance`` edits are reported;
unknown tokens with no close candidate are left alone.

Example:
    detector = create_sql_detector(tables)
    for typo in detector.detect_typos("SELECT * FROM usrs"):
        print(typo.word, "->", typo.suggestion)
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .candidate_search import find_closest_match
from .identifiers import SchemaTable, dotted_identifiers, table_names
from .reserved_words import Dialect

logger = logging.getLogger(__name__)


DEFAULT_TYPO_MAX_DISTANCE = 2

# Bare or one-level dotted identifier, ASCII word boundaries
IDENTIFIER_PATTERN = re.compile(
    r'\b([A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)?)\b',
    re.ASCII
)


@dataclass(frozen=True)
class TypoInfo:
    """A token that looks like a misspelled schema identifier."""
    word: str                   # Token as it appears in the query
    start_index: int            # Offset of the first character
    end_index: int              # Offset just past the last character
    suggestion: Optional[str]   # Closest known identifier
    distance: int               # Edit distance to the suggestion

    @property
    def message(self) -> str:
        """Diagnostic text for an editor marker."""
        if self.suggestion:
            return f'Did you mean "{self.suggestion}"?'
        return f"Unknown identifier: {self.word}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "word": self.word,
            "start_index": self.start_index,
            "end_index": self.end_index,
            "suggestion": self.suggestion,
            "distance": self.distance,
            "message": self.message,
        }


@dataclass
class DetectorConfig:
    """What a detector compares tokens against."""
    reserved_words: Iterable[str] = field(default_factory=frozenset)
    table_names: Sequence[str] = field(default_factory=list)
    dotted_identifiers: Sequence[str] = field(default_factory=list)


class TypoDetector:
    """
    Reports near-miss schema identifiers in query text.

    Built once per schema and reused for every scan; nothing about it
    changes after construction. Instances are callable as a shorthand for
    ``detect_typos``.
    """

    def __init__(self,
                 config: DetectorConfig,
                 max_distance: int = DEFAULT_TYPO_MAX_DISTANCE):
        self.reserved_words: FrozenSet[str] = frozenset(
            word.lower() for word in config.reserved_words
        )
        self.table_names: Tuple[str, ...] = tuple(config.table_names)
        self.dotted_identifiers: Tuple[str, ...] = tuple(config.dotted_identifiers)
        self.max_distance = max_distance

        self._table_name_set = frozenset(self.table_names)
        self._dotted_set = frozenset(self.dotted_identifiers)

    def detect_typos(self, query: str) -> List[TypoInfo]:
        """
        Scan ``query`` and report likely typos in order of appearance.

        Args:
            query: Raw query text (SQL, builder chain, or ORM call)

        Returns:
            List of TypoInfo; empty when nothing looks misspelled
        """
        typos: List[TypoInfo] = []
        if not query:
            return typos

        for match in IDENTIFIER_PATTERN.finditer(query):
            word = match.group(1)

            if word.lower() in self.reserved_words:
                continue
            if word[0].isdigit():
                continue

            if '.' in word:
                candidates, known = self.dotted_identifiers, self._dotted_set
            else:
                candidates, known = self.table_names, self._table_name_set

            if word in known or not candidates:
                continue

            closest = find_closest_match(word, candidates, self.max_distance)
            if closest is None:
                continue

            typos.append(TypoInfo(
                word=word,
                start_index=match.start(1),
                end_index=match.end(1),
                suggestion=closest.value,
                distance=closest.distance
            ))

        if typos:
            logger.debug(f"Detected {len(typos)} typo(s) in query of length {len(query)}")
        return typos

    __call__ = detect_typos

    def __repr__(self) -> str:
        return (
            f"TypoDetector(reserved={len(self.reserved_words)}, "
            f"tables={len(self.table_names)}, "
            f"identifiers={len(self.dotted_identifiers)}, "
            f"max_distance={self.max_distance})"
        )


def create_detector(config: Optional[DetectorConfig] = None,
                    *,
                    reserved_words: Iterable[str] = (),
                    table_names: Sequence[str] = (),
                    dotted_identifiers: Sequence[str] = (),
                    max_distance: int = DEFAULT_TYPO_MAX_DISTANCE) -> TypoDetector:
    """
    Create a detector from a DetectorConfig or from its fields as keywords.

    Args:
        config: Complete detector configuration
        reserved_words: Words never reported, any case
        table_names: Candidates for bare tokens
        dotted_identifiers: Candidates for ``table.column`` tokens
        max_distance: Largest edit distance reported as a typo

    Returns:
        TypoDetector

    Raises:
        TypeError: If both config and any of its fields are given
    """
    if config is not None and (reserved_words or table_names or dotted_identifiers):
        raise TypeError("create_detector() takes either config or its fields, not both")
    if config is None:
        config = DetectorConfig(
            reserved_words=reserved_words,
            table_names=table_names,
            dotted_identifiers=dotted_identifiers
        )
    return TypoDetector(config, max_distance=max_distance)


def create_dialect_detector(dialect: Dialect,
                            tables: Sequence[SchemaTable],
                            max_distance: int = DEFAULT_TYPO_MAX_DISTANCE) -> TypoDetector:
    """Create a detector for ``tables`` using the dialect's reserved words."""
    detector = create_detector(DetectorConfig(
        reserved_words=dialect.reserved_words(),
        table_names=table_names(tables),
        dotted_identifiers=dotted_identifiers(tables)
    ), max_distance=max_distance)
    logger.info(f"Built {dialect.value} typo detector: {detector!r}")
    return detector


def create_sql_detector(tables: Sequence[SchemaTable],
                        max_distance: int = DEFAULT_TYPO_MAX_DISTANCE) -> TypoDetector:
    """Detector for plain SQL text."""
    return create_dialect_detector(Dialect.SQL, tables, max_distance)


def create_query_builder_detector(tables: Sequence[SchemaTable],
                                  max_distance: int = DEFAULT_TYPO_MAX_DISTANCE) -> TypoDetector:
    """Detector for fluent query-builder chains."""
    return create_dialect_detector(Dialect.QUERY_BUILDER, tables, max_distance)


def create_model_access_detector(models: Sequence[SchemaTable],
                                 max_distance: int = DEFAULT_TYPO_MAX_DISTANCE) -> TypoDetector:
    """Detector for ORM model-access calls."""
    return create_dialect_detector(Dialect.MODEL_ACCESS, models, max_distance)
