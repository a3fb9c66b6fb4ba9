# Pytest configuration for matching tests
"""
Fixtures for matching tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables from .env file
from dotenv import load_dotenv
env_path = project_root / '.env'
if env_path.exists():
    load_dotenv(env_path)

from sqltypo.matching import SchemaTable, tables_from_mapping


@pytest.fixture
def blog_schema():
    """Two-table schema used by most detector tests."""
    return [
        SchemaTable.from_dict({"name": "users", "columns": [{"name": "id"}, {"name": "email"}]}),
        SchemaTable.from_dict({"name": "posts", "columns": [{"name": "id"}, {"name": "userId"}, {"name": "title"}]}),
    ]


@pytest.fixture
def users_only_schema():
    """Single table schema: users(id, email)."""
    return tables_from_mapping({"users": ["id", "email"]})


@pytest.fixture
def shop_tables():
    """Plain table-name candidates."""
    return ["users", "products", "orders", "order_items"]
