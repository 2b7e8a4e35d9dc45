from __future__ import annotations

from pydantic import BaseModel, ConfigDict

UNKNOWN_AUTHOR = "Unknown author"
NO_DATE = "No date"


class Book(BaseModel):
    """A single book from a Google Books search."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    url: str
    date: str

    def __init__(
        self,
        title: str | None = None,
        author: str | None = None,
        url: str | None = None,
        date: str | None = None,
        **data,
    ) -> None:
        """Accept the four fields positionally as well as by keyword.

        A positional ``None`` counts as not given and is reported as missing.
        """
        positional = {"title": title, "author": author, "url": url, "date": date}
        data.update({k: v for k, v in positional.items() if v is not None})
        super().__init__(**data)


class BookRow(BaseModel):
    """One rendered line of the book list."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
    year: str
