import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from album_store_api.app.main import create_app
from album_store_api.app.services.album_store import AlbumStore


@pytest.fixture
def store() -> AlbumStore:
    return AlbumStore.with_seed_albums()


@pytest.fixture
def client(store: AlbumStore) -> TestClient:
    return TestClient(create_app(store))
