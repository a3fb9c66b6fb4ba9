# sqltypo Matching - Reserved Words
# =================================
"""
Reserved-word presets for the three supported query dialects.

Tokens in these sets are never reported as typos. Matching is
case-insensitive; the detector lowercases each set once.
"""

from enum import Enum
from typing import FrozenSet


SQL_RESERVED_WORDS: FrozenSet[str] = frozenset({
    'SELECT', 'FROM', 'WHERE', 'INSERT', 'UPDATE', 'DELETE', 'INTO',
    'VALUES', 'SET', 'JOIN', 'LEFT', 'RIGHT', 'INNER', 'OUTER', 'FULL',
    'ON', 'AND', 'OR', 'NOT', 'IN', 'LIKE', 'BETWEEN', 'IS', 'NULL',
    'ORDER', 'BY', 'ASC', 'DESC', 'GROUP', 'HAVING', 'LIMIT', 'OFFSET',
    'UNION', 'INTERSECT', 'EXCEPT', 'AS', 'DISTINCT', 'COUNT', 'SUM',
    'AVG', 'MIN', 'MAX', 'CREATE', 'TABLE', 'ALTER', 'DROP', 'INDEX',
    'PRIMARY', 'KEY', 'FOREIGN', 'REFERENCES', 'CONSTRAINT', 'CASCADE',
    'RETURNING', 'WITH', 'RECURSIVE', 'CASE', 'WHEN', 'THEN', 'ELSE', 'END',
})

# Host-language keywords that show up around builder/ORM calls
_SCRIPT_KEYWORDS = {
    'true', 'false', 'null', 'new', 'Date', 'const', 'let', 'var',
    'function', 'async', 'await', 'return', 'if', 'else', 'for', 'while',
}

# Fluent query-builder surface (db.select().from(users).where(eq(...)))
QUERY_BUILDER_RESERVED_WORDS: FrozenSet[str] = frozenset({
    'db', 'tx', 'select', 'insert', 'update', 'delete', 'from', 'where',
    'orderBy', 'groupBy', 'limit', 'offset', 'leftJoin', 'innerJoin',
    'rightJoin', 'fullJoin', 'values', 'set', 'returning', 'execute',
    'eq', 'ne', 'gt', 'gte', 'lt', 'lte', 'like', 'ilike', 'inArray',
    'notInArray', 'isNull', 'isNotNull', 'and', 'or', 'not', 'asc', 'desc',
    'count', 'sum', 'avg', 'min', 'max', 'param',
    'break', 'continue', 'batch', 'transaction', 'having', 'union',
    'unionAll', 'intersect', 'except', 'sql', 'raw',
} | _SCRIPT_KEYWORDS)

# ORM model-access surface (prisma.user.findMany({ where: {...} }))
MODEL_ACCESS_RESERVED_WORDS: FrozenSet[str] = frozenset({
    'prisma', 'findMany', 'findUnique', 'findFirst', 'findFirstOrThrow',
    'findUniqueOrThrow', 'create', 'createMany', 'update', 'updateMany',
    'upsert', 'delete', 'deleteMany', 'aggregate', 'groupBy', 'count',
    'where', 'select', 'include', 'orderBy', 'skip', 'take', 'cursor',
    'distinct', 'data', 'contains', 'startsWith', 'endsWith', 'equals',
    'not', 'in', 'notIn', 'lt', 'lte', 'gt', 'gte', 'AND', 'OR', 'NOT',
    'connect', 'disconnect', 'set', 'push', 'unset', 'increment',
    'decrement', 'multiply', 'divide', 'createManyAndReturn', 'stream',
} | _SCRIPT_KEYWORDS)


class Dialect(Enum):
    """Query dialects with a reserved-word preset."""
    SQL = "sql"
    QUERY_BUILDER = "query_builder"
    MODEL_ACCESS = "model_access"

    def reserved_words(self) -> FrozenSet[str]:
        """Get the reserved-word preset for this dialect."""
        presets = {
            Dialect.SQL: SQL_RESERVED_WORDS,
            Dialect.QUERY_BUILDER: QUERY_BUILDER_RESERVED_WORDS,
            Dialect.MODEL_ACCESS: MODEL_ACCESS_RESERVED_WORDS,
        }
        return presets[self]

    @classmethod
    def from_name(cls, name: str) -> "Dialect":
        """
        Look up a dialect by value or member name, ignoring case.

        Raises:
            ValueError: If the name matches no dialect
        """
        key = name.strip().lower().replace("-", "_")
        for dialect in cls:
            if key in (dialect.value, dialect.name.lower()):
                return dialect
        valid = ", ".join(d.value for d in cls)
        raise ValueError(f"Unknown dialect '{name}'. Expected one of: {valid}")
