"""Async HTTP form-posting client."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from utilkit.config import settings

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpResponse(BaseModel):
    """Status code and decoded body of a completed request."""

    status_code: int
    content: str


class HttpError(Exception):
    """Base exception for non-2xx HTTP responses."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP error {status_code}: {message}")


class HttpClientError(HttpError):
    """4xx Client Error."""


class HttpNotFoundError(HttpClientError):
    """404 Not Found."""


class HttpServerError(HttpError):
    """5xx Server Error."""


def _raise_for_status(response: httpx.Response) -> None:
    """Raise a typed exception for non-2xx responses."""
    if response.is_success:
        return

    code = response.status_code
    text = response.text

    if code == 404:
        raise HttpNotFoundError(code, text)
    if 400 <= code < 500:
        raise HttpClientError(code, text)
    if code >= 500:
        raise HttpServerError(code, text)

    raise HttpError(code, text)


class HttpClient:
    """Async client posting url-encoded forms."""

    def __init__(
        self,
        *,
        user_agent: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            headers={"User-Agent": user_agent or settings.http_user_agent},
            timeout=timeout if timeout is not None else settings.http_timeout,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _post(self, url: str, data: dict[str, str]) -> httpx.Response:
        logger.debug("POST %s (%d fields)", url, len(data))
        return await self._client.post(
            url,
            data=data,
            headers={"Content-Type": FORM_CONTENT_TYPE, "Cache-Control": "max-age=0"},
        )

    async def post_form(self, url: str, data: dict[str, str]) -> HttpResponse:
        """POST *data* as a form and return the response, whatever its status."""
        response = await self._post(url, data)
        return HttpResponse(status_code=response.status_code, content=response.text)

    async def post_form_content(self, url: str, data: dict[str, str]) -> bytes:
        """POST *data* as a form and return the raw body.

        Raises:
            HttpError: If the server answers with a non-2xx status.
        """
        response = await self._post(url, data)
        _raise_for_status(response)
        return response.content
