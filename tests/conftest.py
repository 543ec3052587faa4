import os
import sys

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from app.database.sheets import RowStore


@pytest.fixture
def store(tmp_path):
    return RowStore(tmp_path / "inventory.xlsx")


@pytest.fixture
def client(store):
    from fastapi.testclient import TestClient

    from app.database.config import get_store
    from app.main import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
