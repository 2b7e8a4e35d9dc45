from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

GOOGLE_BOOKS_URL = "https://www.googleapis.com/books/v1/volumes"
CONNECT_TIMEOUT = 15.0
READ_TIMEOUT = 10.0

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    google_books_url: str = GOOGLE_BOOKS_URL
    connect_timeout: float = CONNECT_TIMEOUT
    read_timeout: float = READ_TIMEOUT
    log_level: LogLevel = "WARNING"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    return Settings()
