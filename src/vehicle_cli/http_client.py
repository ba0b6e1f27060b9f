"""Thin wrapper around :class:`httpx.Client` bound to one base URL."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from .config import DEFAULT_HEADERS, DEFAULT_TIMEOUT
from .logging import get_logger


class HttpClient:
    """Issue JSON requests against a configured base URL.

    Failures are raised unchanged: ``httpx.HTTPStatusError`` for non-2xx
    responses, ``httpx.RequestError`` subclasses for transport problems. Turning
    them into something readable is the job of :mod:`vehicle_cli.errors`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url
        self._logger = get_logger("vehicle_cli.http")
        request_headers = dict(headers if headers is not None else DEFAULT_HEADERS)
        self._client = httpx.Client(
            base_url=base_url,
            headers=request_headers,
            timeout=timeout,
            transport=transport,
        )
        self._logger.debug(
            "HTTP client created",
            extra={"base_url": base_url, "timeout": timeout, "headers": request_headers},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_base_url(self) -> str:
        return self._base_url

    def get(self, path: str) -> Any:
        return self._request("GET", path)

    def post(self, path: str, body: Any = None) -> Any:
        return self._request("POST", path, body)

    def put(self, path: str, body: Any = None) -> Any:
        return self._request("PUT", path, body)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def _request(self, method: str, path: str, body: Any = None) -> Any:
        if body is None:
            response = self._client.request(method, path)
        else:
            response = self._client.request(method, path, json=body)
        self._logger.debug(
            "HTTP request completed",
            extra={"method": method, "path": path, "status": response.status_code},
        )
        response.raise_for_status()
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
