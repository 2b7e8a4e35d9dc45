from __future__ import annotations

import logging

from booklisting.apis import google_books
from booklisting.config import Settings, get_settings
from booklisting.models import Book
from booklisting.services.extraction import extract_books

logger = logging.getLogger(__name__)


def search_books(term: str, settings: Settings | None = None) -> list[Book] | None:
    """Query Google Books for ``term`` and return the books found.

    Fails quietly: an empty list or ``None`` stands for both "no matches" and
    "the query went wrong", with the cause in the logs.
    """
    if not term.strip():
        logger.info("Blank search term, skipping query")
        return None

    settings = settings or get_settings()
    url = google_books.build_query_url(term, base_url=settings.google_books_url)
    logger.debug("Querying %s", url)

    raw = google_books.fetch(
        url,
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
    )
    return extract_books(raw)
