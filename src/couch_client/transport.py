"""Blocking HTTP primitives returning decoded JSON values."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit, urlunsplit

import httpx

from couch_client.errors import TransportError

if TYPE_CHECKING:
    from types import TracebackType

    from couch_client.config import CouchConfig

logger = logging.getLogger(__name__)


class Transport:
    """Issues single requests over a pooled ``httpx.Client``.

    Error statuses are not raised here; the database reports them in the body.
    """

    def __init__(self, config: CouchConfig, *, client: httpx.Client | None = None) -> None:
        self._client = client or httpx.Client(timeout=config.timeout)

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{method} {redact(url)} failed: {exc}") from exc
        logger.debug("%s %s -> %s", method, redact(url), response.status_code)
        return response

    def _json(self, method: str, url: str, **kwargs: Any) -> Any:
        response = self._send(method, url, **kwargs)
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise TransportError(
                f"{method} {redact(url)} returned a non-JSON body (status {response.status_code})"
            ) from exc

    def get(self, url: str) -> Any:
        return self._json("GET", url)

    def head(self, url: str) -> dict[str, str]:
        """Return the response headers that decode as text, keyed by lower-case name."""
        response = self._send("HEAD", url)
        headers: dict[str, str] = {}
        for raw_key, raw_value in response.headers.raw:
            try:
                key = raw_key.decode("ascii").lower()
                value = raw_value.decode("ascii")
            except UnicodeDecodeError:
                logger.debug("Dropping undecodable header from %s", redact(url))
                continue
            headers[key] = value
        return headers

    def put(self, url: str) -> Any:
        return self._json("PUT", url)

    def delete(self, url: str, *, params: dict[str, str] | None = None) -> Any:
        return self._json("DELETE", url, params=params)

    def put_json(self, url: str, body: Any) -> Any:
        return self._json("PUT", url, json=body)

    def post_json(self, url: str, body: Any) -> Any:
        return self._json("POST", url, json=body)


def redact(url: str) -> str:
    """Strip embedded credentials so URLs are safe to log."""
    parsed = urlsplit(url)
    if "@" not in parsed.netloc:
        return url
    return urlunsplit(parsed._replace(netloc=parsed.netloc.rpartition("@")[2]))
