# Tests for check_typos script
# ============================

import io
import json
import pytest
import sys
from pathlib import Path

# Add project root and scripts to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "scripts"))

import check_typos
from sqltypo.settings import SETTING_DEFINITIONS, reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Clear SQLTYPO_* variables and the loaded settings around each test."""
    for definition in SETTING_DEFINITIONS:
        monkeypatch.delenv(definition.env_var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def schema_file(tmp_path):
    """Write a small JSON schema."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps([
        {"name": "users", "columns": [{"name": "id"}, {"name": "email"}]},
        {"name": "orders", "columns": [{"name": "id"}, {"name": "total"}]},
    ]))
    return str(path)


class TestCheckTypos:
    """Test the command-line checker."""

    def test_reports_typo(self, schema_file, capsys):
        """Test a typo is printed with its position and exit code 2."""
        code = check_typos.main(["--schema", schema_file, "--dialect", "sql", "SELECT * FROM usrs"])
        out = capsys.readouterr().out
        assert code == 2
        assert '1:15: usrs: Did you mean "users"? (distance 1)' in out

    def test_clean_query(self, schema_file, capsys):
        """Test a clean query prints nothing and exits 0."""
        code = check_typos.main(["--schema", schema_file, "--dialect", "sql", "SELECT id FROM users"])
        assert code == 0
        assert capsys.readouterr().out == ""

    def test_json_output(self, schema_file, capsys):
        """Test JSON output."""
        check_typos.main(["--schema", schema_file, "--json", "db.select().from(ordrs)"])
        data = json.loads(capsys.readouterr().out)
        assert data == [{
            "word": "ordrs",
            "start_index": 17,
            "end_index": 22,
            "suggestion": "orders",
            "distance": 1,
            "message": 'Did you mean "orders"?',
        }]

    def test_query_from_stdin(self, schema_file, capsys, monkeypatch):
        """Test the query is read from stdin when not given."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("SELECT *\nFROM usrs"))
        code = check_typos.main(["--schema", schema_file, "--dialect", "sql"])
        assert code == 2
        assert capsys.readouterr().out.startswith("2:6: usrs")

    def test_query_from_file(self, schema_file, tmp_path, capsys):
        """Test the query is read from a .sql file."""
        query_path = tmp_path / "query.sql"
        query_path.write_text("SELECT users.emial FROM users")
        code = check_typos.main(["--schema", schema_file, "--dialect", "sql", str(query_path)])
        assert code == 2
        assert "users.email" in capsys.readouterr().out

    def test_dialect_from_environment(self, schema_file, capsys, monkeypatch):
        """Test the default dialect comes from settings."""
        monkeypatch.setenv("SQLTYPO_DEFAULT_DIALECT", "model_access")
        code = check_typos.main(["--schema", schema_file, "--json", "prisma.users.findMany()"])
        assert code == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_suggest(self, schema_file, capsys):
        """Test ranked suggestions for a single word."""
        code = check_typos.main(["--schema", schema_file, "--suggest", "ordrs"])
        assert code == 0
        assert capsys.readouterr().out.startswith("orders (distance 1")

    def test_missing_schema(self, tmp_path, capsys):
        """Test a missing schema file exits 1 with an error."""
        code = check_typos.main(["--schema", str(tmp_path / "missing.json"), "SELECT 1"])
        assert code == 1
        assert "error:" in capsys.readouterr().err

    def test_invalid_settings(self, schema_file, capsys, monkeypatch):
        """Test invalid settings exit 1 with an error."""
        monkeypatch.setenv("SQLTYPO_TYPO_MAX_DISTANCE", "-3")
        code = check_typos.main(["--schema", schema_file, "SELECT 1"])
        assert code == 1
        assert "error:" in capsys.readouterr().err

    def test_setting_above_maximum(self, schema_file, capsys, monkeypatch):
        """Test an override above its declared maximum exits 1."""
        monkeypatch.setenv("SQLTYPO_SUGGESTION_MAX_RESULTS", "500")
        code = check_typos.main(["--schema", schema_file, "--suggest", "ordrs"])
        assert code == 1
        assert "must be at most" in capsys.readouterr().err

    def test_single_table_schema_object(self, tmp_path, capsys):
        """Test a schema file holding one table object exits 1."""
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"name": "users", "columns": [{"name": "id"}]}))
        code = check_typos.main(["--schema", str(path), "--dialect", "sql", "SELECT * FROM usrs"])
        assert code == 1
        assert "error:" in capsys.readouterr().err


class TestLineAndColumn:
    """Test offset to position conversion."""

    def test_first_line(self):
        assert check_typos.line_and_column("SELECT * FROM usrs", 14) == (1, 15)

    def test_later_line(self):
        assert check_typos.line_and_column("SELECT *\nFROM usrs", 14) == (2, 6)
