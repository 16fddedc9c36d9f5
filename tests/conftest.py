import os
import tempfile

import pytest

# Point the app at a throwaway SQLite database before it is imported
_db_dir = tempfile.mkdtemp(prefix="smart-travel-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["SEED_CATALOG"] = "true"

from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def user_id(request):
    # A fresh owner per test keeps ledger assertions independent
    return abs(hash(request.node.nodeid)) % 10_000_000 + 1
