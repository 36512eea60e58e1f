"""Single-attempt JSON GET bounded by a total deadline."""

import json
import logging
import time
from typing import Any
from urllib.parse import urlparse

import httpx

from cityweather.config.defaults import DEFAULT_TIMEOUT_MS
from cityweather.errors import NetworkError, RequestTimeoutError, UpstreamError

logger = logging.getLogger(__name__)


def fetch_json(
    url: str,
    error_message: str,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    params: dict[str, Any] | None = None,
) -> Any:
    """GET ``url`` and return the decoded JSON body.

    No retries. ``timeout_ms`` bounds the whole request, body included: the
    body is streamed and checked against a monotonic deadline so a server
    trickling bytes is cut off too. On expiry the stream is closed and
    RequestTimeoutError is raised. Every other failure (transport error,
    non-2xx status, bad JSON) is reported with ``error_message`` so callers
    control what the user sees.
    """
    _validate(url, timeout_ms)

    timeout = timeout_ms / 1000
    deadline = time.monotonic() + timeout
    logger.debug("GET %s params=%s timeout=%dms", url, params, timeout_ms)
    try:
        with httpx.Client(timeout=timeout) as client, client.stream(
            "GET", url, params=params
        ) as resp:
            if not resp.is_success:
                logger.warning("%s returned HTTP %d", url, resp.status_code)
                raise UpstreamError(error_message, resp.status_code)
            body = _read_until(resp, deadline, url, timeout_ms)
    except httpx.TimeoutException as e:
        logger.warning("Request to %s timed out after %dms: %s", url, timeout_ms, e)
        raise RequestTimeoutError() from e
    except httpx.RequestError as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise NetworkError(error_message) from e

    try:
        return json.loads(body)
    except ValueError as e:
        logger.warning("Invalid JSON from %s: %s", url, e)
        raise UpstreamError(error_message, resp.status_code) from e


def _read_until(resp: httpx.Response, deadline: float, url: str, timeout_ms: int) -> bytes:
    body = bytearray()
    if time.monotonic() > deadline:
        raise _expired(url, timeout_ms)
    for chunk in resp.iter_bytes():
        body += chunk
        if time.monotonic() > deadline:
            raise _expired(url, timeout_ms)
    return bytes(body)


def _expired(url: str, timeout_ms: int) -> RequestTimeoutError:
    logger.warning("Request to %s exceeded its %dms deadline", url, timeout_ms)
    return RequestTimeoutError()


def _validate(url: str, timeout_ms: int) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Not an absolute http(s) URL: {url!r}")
    if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int) or timeout_ms <= 0:
        raise ValueError(f"timeout_ms must be a positive integer, got {timeout_ms!r}")
