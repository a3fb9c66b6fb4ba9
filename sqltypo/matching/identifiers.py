# sqltypo Matching - Identifiers
# ==============================
"""
Schema description types and the candidate lists derived from them.

A schema is an ordered list of SchemaTable. Two flat candidate lists are
built from it: bare table names and dotted ``table.column`` identifiers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union


@dataclass(frozen=True)
class SchemaColumn:
    """A column of a schema table."""
    name: str


@dataclass(frozen=True)
class SchemaTable:
    """A table (or model) and its columns, in declaration order."""
    name: str
    columns: Tuple[SchemaColumn, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SchemaTable":
        """
        Build from ``{"name": ..., "columns": [...]}``.

        Columns may be given as ``{"name": "id"}`` objects or plain strings.
        """
        columns = []
        for col in data.get("columns", []):
            if isinstance(col, Mapping):
                columns.append(SchemaColumn(name=str(col["name"])))
            else:
                columns.append(SchemaColumn(name=str(col)))
        return cls(name=str(data["name"]), columns=tuple(columns))

    @property
    def column_names(self) -> List[str]:
        return [col.name for col in self.columns]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "columns": [{"name": col.name} for col in self.columns],
        }


def tables_from_mapping(available_tables: Mapping[str, Sequence[str]]) -> List[SchemaTable]:
    """
    Build a schema from a ``{table_name: [column, ...]}`` mapping.

    Table order follows the mapping's iteration order.
    """
    tables = []
    for name, cols in available_tables.items():
        if isinstance(cols, str):
            raise TypeError(f"Columns of table {name!r} must be a sequence of names, not a string")
        tables.append(SchemaTable(name=name, columns=tuple(SchemaColumn(name=c) for c in cols)))
    return tables


def table_names(tables: Sequence[SchemaTable]) -> List[str]:
    """Each table's name, in input order."""
    return [table.name for table in tables]


def dotted_identifiers(tables: Sequence[SchemaTable]) -> List[str]:
    """``table.column`` for every column of every table, in input order."""
    identifiers = []
    for table in tables:
        for column in table.columns:
            identifiers.append(f"{table.name}.{column.name}")
    return identifiers


def column_names(tables: Sequence[SchemaTable], table_name: str) -> List[str]:
    """
    Column names of the first table named exactly ``table_name``.

    Returns:
        List of column names, empty if no such table exists
    """
    for table in tables:
        if table.name == table_name:
            return table.column_names
    return []


SchemaInput = Union[Sequence[SchemaTable], Mapping[str, Sequence[str]]]


def as_tables(schema: SchemaInput) -> List[SchemaTable]:
    """Accept either a list of SchemaTable or a ``{table: [columns]}`` mapping."""
    if isinstance(schema, Mapping):
        return tables_from_mapping(schema)
    return list(schema)
