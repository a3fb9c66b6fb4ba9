# sqltypo Matching - Detector Cache
# =================================
"""
Memoizes typo detectors by schema shape.

Editors re-run detection on every keystroke while the schema rarely
changes. The cache keys detectors by a signature of table and column names
so candidate lists are only rebuilt when the schema does.

Example:
    cache = DetectorCache(dialect=Dialect.SQL)
    detector = cache.get_or_create(tables)   # miss - builds detector
    detector = cache.get_or_create(tables)   # hit - same instance
"""

import logging
from threading import Lock
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from .identifiers import SchemaInput, SchemaTable, as_tables
from .reserved_words import Dialect
from .typo_detector import (
    DEFAULT_TYPO_MAX_DISTANCE,
    TypoDetector,
    TypoInfo,
    create_dialect_detector,
)

if TYPE_CHECKING:
    from sqltypo.settings import MatchingSettings

logger = logging.getLogger(__name__)


def signature(tables: Sequence[SchemaTable]) -> str:
    """
    Deterministic key for a schema's shape.

    Example:
        users(id, email), posts(id) -> "users:id,email|posts:id"
    """
    return "|".join(
        f"{table.name}:{','.join(col.name for col in table.columns)}"
        for table in tables
    )


class DetectorCache:
    """
    Signature-keyed store of TypoDetector instances for one dialect.

    Features:
    - Unbounded; schemas are few and signatures small
    - Thread-safe operations
    - Hit/miss statistics
    """

    def __init__(self,
                 dialect: Dialect = Dialect.QUERY_BUILDER,
                 max_distance: int = DEFAULT_TYPO_MAX_DISTANCE):
        """
        Initialize the cache.

        Args:
            dialect: Reserved-word preset used for every detector built here
            max_distance: Largest edit distance reported as a typo
        """
        self.dialect = dialect
        self.max_distance = max_distance
        self._detectors: Dict[str, TypoDetector] = {}
        self._lock = Lock()
        self.stats = {
            'hits': 0,
            'misses': 0,
        }

    @classmethod
    def from_settings(cls, settings: "MatchingSettings") -> "DetectorCache":
        """Create a cache configured from MatchingSettings."""
        return cls(
            dialect=Dialect.from_name(settings.default_dialect),
            max_distance=settings.typo_max_distance
        )

    def get_or_create(self, tables: Sequence[SchemaTable]) -> TypoDetector:
        """
        Return the detector for this schema shape, building it on first use.

        Args:
            tables: Schema tables (or models)

        Returns:
            TypoDetector shared by every caller with the same schema shape
        """
        key = signature(tables)

        with self._lock:
            detector = self._detectors.get(key)
            if detector is not None:
                self.stats['hits'] += 1
                return detector

            self.stats['misses'] += 1
            detector = create_dialect_detector(self.dialect, tables, self.max_distance)
            self._detectors[key] = detector
            logger.debug(f"Cache MISS for schema ({len(tables)} tables), {len(self._detectors)} cached")
            return detector

    def invalidate(self, tables: Sequence[SchemaTable]) -> bool:
        """
        Drop the detector cached for this schema shape.

        Returns:
            True if an entry was found and removed
        """
        key = signature(tables)
        with self._lock:
            if key in self._detectors:
                del self._detectors[key]
                logger.info(f"Cache INVALIDATE for schema ({len(tables)} tables)")
                return True
            return False

    def clear(self) -> int:
        """
        Remove every cached detector.

        Returns:
            Number of entries removed
        """
        with self._lock:
            count = len(self._detectors)
            self._detectors.clear()
        logger.info(f"Cleared {count} cached detectors")
        return count

    def get_statistics(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            total = self.stats['hits'] + self.stats['misses']
            return {
                'dialect': self.dialect.value,
                'size': len(self._detectors),
                'hits': self.stats['hits'],
                'misses': self.stats['misses'],
                'hit_rate': self.stats['hits'] / total if total else 0.0,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._detectors)

    def __contains__(self, tables: Sequence[SchemaTable]) -> bool:
        key = signature(tables)
        with self._lock:
            return key in self._detectors


_default_cache: Optional[DetectorCache] = None


def get_default_cache() -> DetectorCache:
    """Get or create the shared query-builder detector cache."""
    global _default_cache
    if _default_cache is None:
        _default_cache = DetectorCache(dialect=Dialect.QUERY_BUILDER)
    return _default_cache


def detect_typos_in_query(query: str,
                          tables: SchemaInput,
                          cache: Optional[DetectorCache] = None) -> List[TypoInfo]:
    """
    One-call typo detection for query-builder text.

    Args:
        query: Query text
        tables: Schema tables, or a {table: [columns]} mapping
        cache: Cache to use; the shared default cache if omitted

    Returns:
        List of TypoInfo in order of appearance
    """
    if cache is None:
        cache = get_default_cache()
    return cache.get_or_create(as_tables(tables)).detect_typos(query)
