"""
Pytest fixtures for API tests.

Points the app at a throwaway SQLite file before anything imports the engine.
Each test gets a fresh database: the app lifespan creates the tables on
startup and disposes the engine on shutdown, then the file is removed.
"""
import os
import tempfile
from pathlib import Path

_DB_FILE = Path(tempfile.mkdtemp(prefix="ship-registry-")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_FILE}"

import pytest
from fastapi.testclient import TestClient

from ship_registry.main import app


@pytest.fixture
def client():
    """Test client backed by an empty ship registry."""
    with TestClient(app) as test_client:
        yield test_client
    _DB_FILE.unlink(missing_ok=True)


@pytest.fixture
def base_url():
    return "/rest/ships"
