"""Exceptions for HTTP errors from the chat and forecast endpoints."""

from __future__ import annotations

from typing import Any


class APIError(Exception):
    """Raised when a remote endpoint returns a non-success HTTP status.

    ``body`` is the decoded JSON error document when the endpoint sent one,
    otherwise the raw response text.
    """

    def __init__(self, status_code: int, body: dict[str, Any] | str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")
