import pytest
from faker import Faker
from fastapi.testclient import TestClient

from main import create_app


fake = Faker()


@pytest.fixture
def client(tmp_path):
    """A test client over a fresh app, with its database in a temp dir."""
    app = create_app(str(tmp_path / "students.db"))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_student():
    return {"name": "Ann", "age": 20, "email": "a@b.com"}


@pytest.fixture
def fake_student():
    """Build random valid student payloads."""
    def make():
        return {
            "name": fake.name(),
            "age": fake.random_int(min=14, max=18),
            "email": fake.unique.email(),
        }
    return make
