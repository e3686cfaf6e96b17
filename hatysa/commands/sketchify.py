"""Turn a link into a much sketchier looking one via https://verylegit.link."""
from __future__ import annotations

import http.client
import logging
import urllib.parse
import urllib.request
from typing import Callable

from ..errors import InvalidUrlError, MissingArgumentError, RequestError, WhitespaceError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://verylegit.link/sketchify"

Fetcher = Callable[[str], str]


def _is_web_url(candidate: str) -> bool:
    try:
        parts = urllib.parse.urlsplit(candidate)
    except ValueError:
        return False
    return parts.scheme in {"http", "https"} and bool(parts.netloc)


def validate_url(raw: str) -> str:
    """Return ``raw`` if it is a single absolute http(s) URL."""

    if not raw:
        raise MissingArgumentError("sketchify")
    if any(char.isspace() for char in raw):
        raise WhitespaceError("sketchify", raw)
    if not _is_web_url(raw):
        raise InvalidUrlError("sketchify", raw)
    return raw


class SketchifyClient:
    """Posts long URLs to the sketchify service and returns its reply."""

    def __init__(self, endpoint: str = DEFAULT_ENDPOINT, timeout: float = 10.0) -> None:
        self._endpoint = endpoint
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __call__(self, long_url: str) -> str:
        data = urllib.parse.urlencode({"long_url": long_url}).encode("utf-8")
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        request = urllib.request.Request(self._endpoint, data=data, headers=headers)
        try:
            with urllib.request.urlopen(request, timeout=self._timeout) as response:
                return response.read().decode("utf-8")
        except (OSError, http.client.HTTPException, UnicodeDecodeError) as exc:
            logger.warning("Sketchify request to %s failed: %s", self._endpoint, exc)
            raise RequestError(f"sketchify request failed: {exc}") from exc


def sketchify(url: str, fetch: Fetcher) -> str:
    """Validate ``url``, sketchify it with ``fetch`` and return the new URL."""

    long_url = validate_url(url)
    body = fetch(long_url).strip()
    if not body:
        raise RequestError("sketchify service returned an empty response")
    sketchy = body if body.startswith("http") else f"http://{body}"
    if not _is_web_url(sketchy):
        logger.error("Sketchify service returned an unusable URL: %r", body)
        raise RequestError(f"sketchify service returned an invalid URL: {body!r}")
    return sketchy


__all__ = ["DEFAULT_ENDPOINT", "Fetcher", "SketchifyClient", "sketchify", "validate_url"]
