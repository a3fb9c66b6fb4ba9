# sqltypo Matching - Schema Loader
# ================================
"""
Loads schema descriptions (tables and columns) for the typo detector.

Sources:
- JSON documents: a list of ``{"name", "columns"}`` objects, a
  ``{table: [columns]}`` mapping, or a schema map with a ``"tables"`` key
- DuckDB databases, introspected with SHOW TABLES / DESCRIBE
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

import duckdb

from .identifiers import SchemaColumn, SchemaTable

logger = logging.getLogger(__name__)


class SchemaFormatError(ValueError):
    """Raised when a schema document has none of the accepted shapes."""
    pass


def _check_columns(table_name: Any, columns: Any) -> None:
    """Columns must be a list of names or ``{"name": ...}`` objects."""
    if not isinstance(columns, (list, tuple)):
        raise SchemaFormatError(
            f"Columns of table {table_name!r} must be a list, got {type(columns).__name__}"
        )
    for col in columns:
        if isinstance(col, Mapping):
            col = col.get("name")
        if not isinstance(col, str):
            raise SchemaFormatError(
                f"Invalid column in table {table_name!r}: {col!r}"
            )


def _table_from_columns(name: Any, columns: Any) -> SchemaTable:
    _check_columns(name, columns)
    return SchemaTable.from_dict({"name": name, "columns": columns})


def _table_from_object(item: Any) -> SchemaTable:
    if not isinstance(item, Mapping) or not isinstance(item.get("name"), str):
        raise SchemaFormatError(f"Table entry needs a string \"name\": {item!r}")
    return _table_from_columns(item["name"], item.get("columns", []))


def parse_schema(data: Any) -> List[SchemaTable]:
    """
    Build a schema from already-decoded JSON data.

    Args:
        data: List of table objects, ``{table: [columns]}``, or a schema map

    Returns:
        List of SchemaTable in document order

    Raises:
        SchemaFormatError: If the data matches none of the accepted shapes
    """
    try:
        if isinstance(data, list):
            return [_table_from_object(item) for item in data]

        if isinstance(data, Mapping):
            # Schema map: {"tables": {"USERS": {"columns": [...]}, ...}}
            tables = data.get("tables")
            if isinstance(tables, Mapping):
                result = []
                for name, info in tables.items():
                    if not isinstance(info, Mapping):
                        raise SchemaFormatError(
                            f"Table {name!r} must be an object, got {type(info).__name__}"
                        )
                    result.append(_table_from_columns(name, info.get("columns", [])))
                return result
            if isinstance(tables, list):
                return [_table_from_object(item) for item in tables]
            return [_table_from_columns(name, cols) for name, cols in data.items()]
    except (KeyError, TypeError, AttributeError) as e:
        raise SchemaFormatError(f"Malformed schema document: {e}") from e

    raise SchemaFormatError(
        f"Unsupported schema document type: {type(data).__name__}"
    )


def load_schema_json(path: Union[str, Path]) -> List[SchemaTable]:
    """
    Load a schema from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        SchemaFormatError: If the JSON is invalid or has an unknown shape
    """
    path = Path(path)
    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaFormatError(f"Invalid JSON in {path}: {e}") from e

    tables = parse_schema(data)
    logger.info(f"Loaded schema with {len(tables)} tables from {path}")
    return tables


def load_schema_duckdb(db_path: Union[str, Path]) -> List[SchemaTable]:
    """
    Read table and column names from a DuckDB database.

    Tables come back in SHOW TABLES order; columns in declaration order.

    Raises:
        FileNotFoundError: If the database file does not exist
    """
    db_path = Path(db_path)
    if not db_path.exists():
        raise FileNotFoundError(f"Database not found: {db_path}")

    conn = duckdb.connect(str(db_path), read_only=True)
    try:
        table_rows = conn.execute("SHOW TABLES").fetchall()
        tables = []
        for (table_name,) in table_rows:
            described = conn.execute(f'DESCRIBE "{table_name}"').fetchall()
            tables.append(SchemaTable(
                name=table_name,
                columns=tuple(SchemaColumn(name=row[0]) for row in described)
            ))
    finally:
        conn.close()

    logger.info(f"Loaded schema with {len(tables)} tables from {db_path}")
    return tables
