import pytest
from pydantic import ValidationError

from booklisting.apis import google_books
from booklisting.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.google_books_url == "https://www.googleapis.com/books/v1/volumes"
    assert settings.connect_timeout == 15.0
    assert settings.read_timeout == 10.0
    assert settings.log_level == "WARNING"


def test_fetch_defaults_follow_settings():
    settings = Settings()
    assert google_books.fetch.__defaults__ == (settings.connect_timeout, settings.read_timeout)


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()
