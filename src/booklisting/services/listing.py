from __future__ import annotations

from booklisting.models import Book, BookRow


def display_year(date: str) -> str:
    """Year part of a publication date: '2007-03-15' -> '2007'."""
    return date.split("-")[0]


def to_rows(books: list[Book] | None) -> list[BookRow]:
    return [
        BookRow(title=book.title, author=book.author, year=display_year(book.date))
        for book in books or []
    ]
