import json

import httpx


def volume(title="Title", link="https://books.google.com/books?id=x", **extra):
    info = {"title": title, "previewLink": link}
    info.update(extra)
    return {"volumeInfo": info}


def search_response(*items) -> str:
    return json.dumps({"kind": "books#volumes", "totalItems": len(items), "items": list(items)})


class FakeGet:
    """Stands in for ``httpx.get``, replaying one canned response."""

    def __init__(self, status_code=200, text="", error=None):
        self.status_code = status_code
        self.text = text
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.text, request=httpx.Request("GET", url))
