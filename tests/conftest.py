"""
pytest configuration and fixtures for the business backend tests
"""
import pytest
from fastapi.testclient import TestClient

from app.core import config
from app.core.store import DataStore, get_store
from main import app

TEST_PROFILE = {
    "business_name": "Master Code",
    "owner": "Yair",
    "phone": "052-209-1733",
    "email": "office@mastercode.test",
    "website": "https://mastercode.test",
}


@pytest.fixture
def data_file(tmp_path):
    """Path of a data file that does not exist yet"""
    return tmp_path / "data" / "business_data.json"


@pytest.fixture
def store(data_file):
    return DataStore(str(data_file), settings=TEST_PROFILE)


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(config, "UPLOAD_DIR", str(path))
    return path


@pytest.fixture
def client(store, upload_dir):
    """Test client wired to a temporary data file and upload directory"""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_quote_payload():
    return {
        "client_name": "Dana Levi",
        "client_email": "dana@example.com",
        "client_phone": "050-1234567",
        "items": [
            {"name": "Design", "description": "Landing page", "quantity": 2, "price": 500, "discount": 0},
            {"name": "Hosting", "quantity": 1, "price": 300, "discount": 50},
        ],
        "notes": "Payment within 30 days",
        "validity_days": 14,
    }
