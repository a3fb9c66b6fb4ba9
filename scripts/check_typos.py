#!/usr/bin/env python
# sqltypo - Query Typo Checker
# ============================
# Reports misspelled schema identifiers in a query
"""
Query Typo Checker

Loads a schema (JSON document or DuckDB database), scans a query for
identifiers that look like misspelled table or table.column names, and
prints one diagnostic per typo.

Usage:
    python scripts/check_typos.py --schema schema.json "SELECT * FROM usrs"
    python scripts/check_typos.py --db-path data/app.duckdb --dialect sql query.sql
    echo "db.select().from(usrs)" | python scripts/check_typos.py --schema schema.json
    python scripts/check_typos.py --schema schema.json --suggest ordrs
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqltypo.matching import (
    DetectorCache,
    Dialect,
    SchemaTable,
    TypoInfo,
    get_suggestions,
    load_schema_duckdb,
    load_schema_json,
    table_names,
)
from sqltypo.settings import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def line_and_column(text: str, offset: int) -> Tuple[int, int]:
    """1-based line and column of a character offset."""
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def read_query(source: Optional[str]) -> str:
    """Read the query from an argument, a file path, or stdin."""
    if source is None or source == "-":
        return sys.stdin.read()
    path = Path(source)
    if path.suffix in (".sql", ".ts", ".js", ".txt") and path.is_file():
        return path.read_text()
    return source


def load_tables(args: argparse.Namespace) -> List[SchemaTable]:
    """Load the schema named on the command line."""
    if args.db_path:
        return load_schema_duckdb(args.db_path)
    return load_schema_json(args.schema)


def format_typo(query: str, typo: TypoInfo) -> str:
    line, column = line_and_column(query, typo.start_index)
    return f"{line}:{column}: {typo.word}: {typo.message} (distance {typo.distance})"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Report misspelled schema identifiers in a query",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/check_typos.py --schema schema.json "SELECT * FROM usrs"
  python scripts/check_typos.py --db-path app.duckdb --dialect sql query.sql
  python scripts/check_typos.py --schema schema.json --suggest ordrs
        """
    )

    parser.add_argument(
        "query",
        nargs="?",
        help="Query text, a .sql/.ts/.js/.txt file, or '-' for stdin (default)"
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--schema",
        help="Path to a JSON schema document"
    )
    source.add_argument(
        "--db-path",
        help="Path to a DuckDB database to read the schema from"
    )

    parser.add_argument(
        "--dialect",
        choices=[d.value for d in Dialect],
        help="Reserved-word preset (default from SQLTYPO_DEFAULT_DIALECT)"
    )

    parser.add_argument(
        "--suggest",
        metavar="WORD",
        help="Print ranked table-name suggestions for WORD instead of scanning"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        settings = get_settings()
        tables = load_tables(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.suggest:
        matches = get_suggestions(
            args.suggest,
            table_names(tables),
            max_results=settings.suggestion_max_results,
            max_distance=settings.suggestion_max_distance
        )
        if args.json:
            print(json.dumps([m.to_dict() for m in matches], indent=2))
        else:
            for m in matches:
                print(f"{m.value} (distance {m.distance}, similarity {m.similarity:.2f})")
        return 0

    dialect = Dialect.from_name(args.dialect or settings.default_dialect)
    logger.debug(f"Checking query against {len(tables)} tables ({dialect.value})")
    cache = DetectorCache(dialect=dialect, max_distance=settings.typo_max_distance)
    query = read_query(args.query)
    typos = cache.get_or_create(tables).detect_typos(query)

    if args.json:
        print(json.dumps([t.to_dict() for t in typos], indent=2))
    else:
        for typo in typos:
            print(format_typo(query, typo))

    # Exit 2 when typos were found
    return 2 if typos else 0


if __name__ == "__main__":
    sys.exit(main())
