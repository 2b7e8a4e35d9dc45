from __future__ import annotations

import json
import logging
from typing import Any

from booklisting.models import NO_DATE, UNKNOWN_AUTHOR, Book

AUTHOR_SEPARATOR = ", "

logger = logging.getLogger(__name__)


class MalformedResponseError(ValueError):
    """The response or one of its items lacks a field every book needs."""


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _require(obj: dict, key: str, kind: type) -> Any:
    value = obj.get(key)
    if not isinstance(value, kind):
        raise MalformedResponseError(f"{key!r} is missing or not a {kind.__name__}")
    return value


def _resolve_author(info: dict) -> str:
    if "authors" not in info:
        return UNKNOWN_AUTHOR

    authors = info["authors"]
    if not isinstance(authors, list):
        logger.error("Problem parsing authors: expected a list, got %r", authors)
        return ""

    if len(authors) > 1:
        # Every name keeps its separator, the last one included.
        author = ""
        for i, name in enumerate(authors):
            if name is None:
                logger.warning("Problem parsing many authors: entry %d is null", i)
                continue
            author += _text(name) + AUTHOR_SEPARATOR
        return author

    if not authors or authors[0] is None:
        logger.warning("Problem parsing one author: %r", authors)
        return ""
    return _text(authors[0])


def _resolve_date(info: dict) -> str:
    if "publishedDate" not in info:
        return NO_DATE
    published = info["publishedDate"]
    return _text(published)


def _book_from_item(item: Any) -> Book:
    if not isinstance(item, dict):
        raise MalformedResponseError(f"item is not an object: {item!r}")
    info = _require(item, "volumeInfo", dict)
    title = _require(info, "title", str)
    url = _require(info, "previewLink", str)
    return Book(title, _resolve_author(info), url, _resolve_date(info))


def extract_books(raw_json: str | None) -> list[Book] | None:
    """Build the list of books described by a Google Books search response.

    ``None`` means there was nothing to parse (the fetch came back empty).
    Otherwise a list is returned, never an exception: a document that is not
    JSON or has no ``items`` array yields ``[]``, and the first item missing
    its title or preview link stops extraction, keeping the books already
    built from the items before it.
    """
    if not raw_json:
        logger.debug("Empty response, nothing to extract")
        return None

    books: list[Book] = []
    try:
        data = json.loads(raw_json)
        if not isinstance(data, dict):
            raise MalformedResponseError("top-level value is not an object")
        items = _require(data, "items", list)
        for item in items:
            books.append(_book_from_item(item))
    except (ValueError, RecursionError):
        logger.exception("Problem parsing the JSON results")

    return books
