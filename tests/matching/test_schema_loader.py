# Tests for Schema Loader
# =======================

import json
import os
import tempfile

import duckdb
import pytest

from sqltypo.matching.identifiers import dotted_identifiers, table_names
from sqltypo.matching.schema_loader import (
    SchemaFormatError,
    load_schema_duckdb,
    load_schema_json,
    parse_schema,
)


class TestParseSchema:
    """Test accepted JSON shapes."""

    def test_list_of_tables(self):
        """Test a list of {"name", "columns"} objects."""
        tables = parse_schema([
            {"name": "users", "columns": [{"name": "id"}, {"name": "email"}]},
            {"name": "posts", "columns": ["id", "title"]},
        ])
        assert table_names(tables) == ["users", "posts"]
        assert dotted_identifiers(tables) == ["users.id", "users.email", "posts.id", "posts.title"]

    def test_mapping(self):
        """Test a {table: [columns]} mapping."""
        tables = parse_schema({"users": ["id", "email"]})
        assert dotted_identifiers(tables) == ["users.id", "users.email"]

    def test_schema_map_document(self):
        """Test a schema map with a "tables" section."""
        tables = parse_schema({
            "tables": {
                "DM": {"name": "DM", "columns": ["USUBJID", "AGE"], "row_count": 2},
                "AE": {"name": "AE", "columns": ["USUBJID", "AETERM"], "row_count": 2},
            },
            "generated_at": "2025-01-01T00:00:00",
            "version": "1.0",
        })
        assert table_names(tables) == ["DM", "AE"]
        assert dotted_identifiers(tables)[0] == "DM.USUBJID"

    def test_tables_list_document(self):
        """Test a document whose "tables" key holds a list."""
        tables = parse_schema({"tables": [{"name": "users", "columns": ["id"]}]})
        assert dotted_identifiers(tables) == ["users.id"]

    def test_missing_name(self):
        """Test a table object without a name is rejected."""
        with pytest.raises(SchemaFormatError):
            parse_schema([{"columns": ["id"]}])

    def test_single_table_object_rejected(self):
        """Test one table object is not mistaken for a {table: [columns]} mapping."""
        with pytest.raises(SchemaFormatError):
            parse_schema({"name": "users", "columns": [{"name": "id"}, {"name": "email"}]})

    def test_string_columns_rejected(self):
        """Test a string column list is rejected instead of split into characters."""
        with pytest.raises(SchemaFormatError):
            parse_schema({"users": "id"})

    @pytest.mark.parametrize("data", [
        {"users": [{"name": "id"}, {"type": "int"}]},
        {"users": ["id", 7]},
        [{"name": "users", "columns": "id"}],
        [{"name": 5, "columns": ["id"]}],
        ["users"],
        {"tables": {"users": ["id"]}},
    ])
    def test_malformed_entries_rejected(self, data):
        """Test column and table entries of the wrong type."""
        with pytest.raises(SchemaFormatError):
            parse_schema(data)

    def test_unsupported_type(self):
        """Test a scalar document is rejected."""
        with pytest.raises(SchemaFormatError):
            parse_schema(42)

    def test_error_is_value_error(self):
        """Test SchemaFormatError can be handled as ValueError."""
        with pytest.raises(ValueError):
            parse_schema("users")


class TestLoadSchemaJson:
    """Test loading JSON files."""

    def test_load(self, tmp_path):
        """Test loading a schema file."""
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"users": ["id", "email"], "posts": ["id"]}))
        tables = load_schema_json(path)
        assert table_names(tables) == ["users", "posts"]

    def test_invalid_json(self, tmp_path):
        """Test a file that is not JSON."""
        path = tmp_path / "schema.json"
        path.write_text("{not json")
        with pytest.raises(SchemaFormatError):
            load_schema_json(path)

    def test_missing_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(FileNotFoundError):
            load_schema_json(tmp_path / "missing.json")


class TestLoadSchemaDuckdb:
    """Test reading a schema from DuckDB."""

    @pytest.fixture
    def temp_db(self):
        """Create a temporary DuckDB database with test tables."""
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = os.path.join(tmpdir, "test.duckdb")
            conn = duckdb.connect(db_path)

            conn.execute("""
                CREATE TABLE users (
                    id INTEGER,
                    email VARCHAR
                )
            """)
            conn.execute("""
                CREATE TABLE posts (
                    id INTEGER,
                    userId INTEGER,
                    title VARCHAR
                )
            """)

            conn.close()
            yield db_path

    def test_load_tables(self, temp_db):
        """Test tables and columns are read in declaration order."""
        tables = {t.name: t.column_names for t in load_schema_duckdb(temp_db)}
        assert tables == {
            "users": ["id", "email"],
            "posts": ["id", "userId", "title"],
        }

    def test_missing_database(self):
        """Test a missing database file."""
        with pytest.raises(FileNotFoundError):
            load_schema_duckdb("/nonexistent/path.duckdb")
