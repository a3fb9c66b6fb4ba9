# sqltypo Matching Module
# =======================
"""
Typo-aware identifier matching for query text.

Components:
- levenshtein / similarity: case-insensitive edit distance
- find_closest_match / get_suggestions: search over candidate names
- SchemaTable and candidate extraction (table names, table.column)
- TypoDetector: flags near-miss identifiers in SQL, query-builder chains,
  and ORM model-access calls
- DetectorCache: reuses detectors while the schema shape is unchanged
- Schema loaders for JSON documents and DuckDB databases
"""

from .edit_distance import (
    levenshtein,
    similarity,
)

from .candidate_search import (
    MatchResult,
    find_closest_match,
    get_suggestions,
)

from .identifiers import (
    SchemaColumn,
    SchemaTable,
    as_tables,
    column_names,
    dotted_identifiers,
    table_names,
    tables_from_mapping,
)

from .reserved_words import (
    Dialect,
    SQL_RESERVED_WORDS,
    QUERY_BUILDER_RESERVED_WORDS,
    MODEL_ACCESS_RESERVED_WORDS,
)

from .typo_detector import (
    DEFAULT_TYPO_MAX_DISTANCE,
    DetectorConfig,
    TypoDetector,
    TypoInfo,
    create_detector,
    create_dialect_detector,
    create_sql_detector,
    create_query_builder_detector,
    create_model_access_detector,
)

from .detector_cache import (
    DetectorCache,
    signature,
    get_default_cache,
    detect_typos_in_query,
)

from .schema_loader import (
    SchemaFormatError,
    parse_schema,
    load_schema_json,
    load_schema_duckdb,
)


__all__ = [
    # Edit Distance
    "levenshtein",
    "similarity",

    # Candidate Search
    "MatchResult",
    "find_closest_match",
    "get_suggestions",

    # Identifiers
    "SchemaColumn",
    "SchemaTable",
    "as_tables",
    "column_names",
    "dotted_identifiers",
    "table_names",
    "tables_from_mapping",

    # Reserved Words
    "Dialect",
    "SQL_RESERVED_WORDS",
    "QUERY_BUILDER_RESERVED_WORDS",
    "MODEL_ACCESS_RESERVED_WORDS",

    # Typo Detector
    "DEFAULT_TYPO_MAX_DISTANCE",
    "DetectorConfig",
    "TypoDetector",
    "TypoInfo",
    "create_detector",
    "create_dialect_detector",
    "create_sql_detector",
    "create_query_builder_detector",
    "create_model_access_detector",

    # Detector Cache
    "DetectorCache",
    "signature",
    "get_default_cache",
    "detect_typos_in_query",

    # Schema Loader
    "SchemaFormatError",
    "parse_schema",
    "load_schema_json",
    "load_schema_duckdb",
]
