"""Menu source base class and shared request behavior."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Any

import aiohttp

from ..exceptions import ConfigError, MalformedResponse, SourceUnreachable
from ..models import MenuDay

_DEFAULT_TIMEOUT = aiohttp.ClientTimeout(total=30)
_LOGGER = logging.getLogger(__name__)


class BaseMenuSource(ABC):
    """Base class for menu sources."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        *,
        timeout: aiohttp.ClientTimeout | None = None,
        retry_count: int = 0,
    ) -> None:
        if session is None:
            raise ConfigError("Session is required.")
        self._session = session
        self._base_url = self._normalize_base_url(base_url)
        self._timeout = timeout or _DEFAULT_TIMEOUT
        self._retry_count = max(0, retry_count)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _build_url(self, path: str) -> str:
        if not isinstance(path, str) or not path:
            raise ConfigError("Path must be a non-empty string.")
        if path.startswith("http://") or path.startswith("https://"):
            raise ConfigError("Use relative paths when building source requests.")
        normalized_path = path if path.startswith("/") else f"/{path}"
        return f"{self._base_url}{normalized_path}"

    async def _request_json(self, path: str, *, operation: str, **kwargs: Any) -> Any:
        url = self._build_url(path)
        return await self._request("GET", url, operation=operation, **kwargs)

    async def _request(self, method: str, url: str, *, operation: str, **kwargs: Any) -> Any:
        retries = self._retry_count if method.upper() == "GET" else 0
        attempts = retries + 1
        last_error: Exception | None = None
        for attempt in range(attempts):
            try:
                timeout = kwargs.pop("timeout", self._timeout)
                if timeout is None:
                    timeout = self._timeout
                async with self._session.request(
                    method,
                    url,
                    timeout=timeout,
                    **kwargs,
                ) as response:
                    self._raise_for_status(response, operation)
                    try:
                        return await response.json()
                    except (aiohttp.ContentTypeError, ValueError) as exc:
                        raise MalformedResponse(
                            f"Response to {operation} did not contain valid JSON."
                        ) from exc
            except (aiohttp.ClientError, TimeoutError) as exc:
                last_error = exc
                if attempt >= attempts - 1:
                    raise SourceUnreachable(f"Failed to {operation}.") from exc
                _LOGGER.debug("Request to %s failed, retrying (%s)", url, exc)
        if last_error is not None:
            raise SourceUnreachable(f"Failed to {operation}.") from last_error
        raise SourceUnreachable(f"Failed to {operation}.")

    def _raise_for_status(self, response: aiohttp.ClientResponse, operation: str) -> None:
        if 200 <= response.status < 300:
            return
        raise SourceUnreachable(
            f"Failed to {operation}: source responded with status {response.status}."
        )

    def _normalize_base_url(self, base_url: str) -> str:
        if not isinstance(base_url, str) or not base_url.strip():
            raise ConfigError("base_url must be a non-empty string.")
        return base_url.strip().rstrip("/")

    @abstractmethod
    async def list_available_dates(self) -> list[date]:
        """Return the dates the source has published menus for."""

    @abstractmethod
    async def fetch_menu(self, day: date) -> list[MenuDay]:
        """Return the menus of all canteens for one date."""
