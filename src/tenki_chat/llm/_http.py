"""Thin HTTP helpers around ``requests``.

Each helper sends exactly one request. Failures are raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from tenki_chat.llm._exceptions import APIError

logger = logging.getLogger(__name__)


def _raise_for_status(r: requests.Response) -> None:
    if not r.ok:
        try:
            body: dict[str, Any] | str = r.json()
        except ValueError:
            body = r.text
        raise APIError(r.status_code, body)


def post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float | None = None,
) -> dict[str, Any]:
    """POST JSON and return the parsed response, raising on HTTP errors.

    ``timeout=None`` leaves the transport default (wait indefinitely).
    """
    logger.debug("POST %s", url)
    r = requests.post(url, headers=headers, json=payload, timeout=timeout)
    _raise_for_status(r)
    return r.json()


def get_text(url: str, timeout: float | None = None) -> str:
    """GET a URL and return the body as text, raising on HTTP errors."""
    logger.debug("GET %s", url)
    r = requests.get(url, timeout=timeout)
    _raise_for_status(r)
    return r.text
