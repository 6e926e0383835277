"""Blocking one-shot HTTP transport used by translation providers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Union

import httpx

logger = logging.getLogger(__name__)

# The filter runs on the input method's thread, so requests must stay short.
DEFAULT_TIMEOUT = 0.5


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """A single outgoing request built by a provider."""

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    data: str | None = None


Transport = Callable[[Union[str, HttpRequest]], Optional[str]]


class HttpxTransport:
    """Perform a request and return the body text, or ``None`` on any failure.

    Connection errors, timeouts and non-2xx statuses are indistinguishable to
    callers; they are only logged here.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    def __call__(self, request: str | HttpRequest) -> str | None:
        if isinstance(request, str):
            request = HttpRequest(url=request)
        content = request.data.encode("utf-8") if request.data is not None else None
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.request(
                    request.method,
                    request.url,
                    headers=dict(request.headers),
                    content=content,
                )
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            # ValueError covers UnicodeEncodeError from non-ASCII header values.
            logger.warning("HTTP 请求失败 %s %s: %s", request.method, _safe_url(request.url), exc)
            return None
        if response.status_code >= 400:
            logger.warning(
                "HTTP 请求返回错误状态 %s %s: %s",
                request.method,
                _safe_url(request.url),
                response.status_code,
            )
            return None
        return response.text


def _safe_url(url: str) -> str:
    """Drop the query string, which may carry user text."""

    return url.split("?", 1)[0]
