import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.delenv("HASH_ADDRESS_FIELDS", raising=False)
    monkeypatch.delenv("DEFAULT_COUNTRY_CODE", raising=False)

    from matchkey.core.settings import get_settings

    get_settings.cache_clear()

    from matchkey.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    get_settings.cache_clear()
