import httpx
import pytest

from helpers import FakeGet


@pytest.fixture()
def fake_get(monkeypatch):
    def install(status_code=200, text="", error=None):
        fake = FakeGet(status_code=status_code, text=text, error=error)
        monkeypatch.setattr(httpx, "get", fake)
        return fake

    return install


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("GOOGLE_BOOKS_URL", "CONNECT_TIMEOUT", "READ_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
