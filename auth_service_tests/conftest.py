import pytest
from fastapi.testclient import TestClient

from auth_service.config import Settings
from auth_service.main import create_app

TEST_SECRET = "test-token-secret-with-enough-length-0123"
TEST_KEY = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def test_settings(tmp_path):
    # Fresh SQLite file per test keeps tests independent
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        TOKEN_SECRET=TEST_SECRET,
        TOKEN_EXPIRED_TIME=600,
        CRYPTO_KEY=TEST_KEY,
        REDIS_URL="",
    )


@pytest.fixture
def client(test_settings):
    with TestClient(create_app(test_settings)) as c:
        yield c


@pytest.fixture
def db_session(client):
    session = client.app.state.database.session()
    yield session
    session.close()
