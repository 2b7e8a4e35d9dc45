from __future__ import annotations

import logging

import httpx

from booklisting.config import CONNECT_TIMEOUT, GOOGLE_BOOKS_URL, READ_TIMEOUT

logger = logging.getLogger(__name__)


def build_query_url(term: str, base_url: str = GOOGLE_BOOKS_URL) -> str:
    """Append the search term to the volumes endpoint as the ``q`` parameter."""
    return str(httpx.URL(base_url, params={"q": term}))


def fetch(
    url: str,
    connect_timeout: float = CONNECT_TIMEOUT,
    read_timeout: float = READ_TIMEOUT,
) -> str:
    """GET ``url`` and return the response body.

    Returns an empty string on any non-200 status or transport failure.
    """
    timeout = httpx.Timeout(read_timeout, connect=connect_timeout)
    try:
        resp = httpx.get(url, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL):
        logger.exception("Problem retrieving the JSON results from %s", url)
        return ""

    if resp.status_code != httpx.codes.OK:
        logger.error("Error response code: %s", resp.status_code)
        return ""
    return resp.text
