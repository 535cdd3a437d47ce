"""HTTP menu source for the KIT canteen API."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import aiohttp

from ..exceptions import MalformedResponse
from ..models import Canteen, Classifier, Line, Meal, MenuDay
from ..util import format_api_date, parse_api_date
from .base import BaseMenuSource
from .const import DEFAULT_HEADERS, PLAN_ENDPOINT, PLANS_ENDPOINT

_LOGGER = logging.getLogger(__name__)


class MensaApi(BaseMenuSource):
    """Menu source backed by the canteen plan API."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        *,
        timeout: aiohttp.ClientTimeout | None = None,
        retry_count: int = 0,
    ) -> None:
        super().__init__(session, base_url, timeout=timeout, retry_count=retry_count)

    async def list_available_dates(self) -> list[date]:
        """Return the dates the API has published plans for."""
        _LOGGER.debug("Source %s list_available_dates started", self.base_url)
        payload = await self._request_json(
            PLANS_ENDPOINT,
            operation="fetch available plans",
            headers=DEFAULT_HEADERS,
        )
        data = self._unwrap(payload, "available plans")
        dates = [self._map_plan_date(item) for item in data]
        _LOGGER.debug(
            "Source %s list_available_dates completed with %d dates",
            self.base_url,
            len(dates),
        )
        return dates

    async def fetch_menu(self, day: date) -> list[MenuDay]:
        """Return the menus of all canteens for ``day``."""
        _LOGGER.debug("Source %s fetch_menu started for %s", self.base_url, day)
        payload = await self._request_json(
            PLAN_ENDPOINT.format(day=format_api_date(day)),
            operation="fetch canteen data",
            headers=DEFAULT_HEADERS,
        )
        data = self._unwrap(payload, "canteen data")
        menus = [self._map_menu_day(item) for item in data]
        _LOGGER.debug("Source %s fetch_menu completed for %s", self.base_url, day)
        return menus

    def _unwrap(self, payload: Any, what: str) -> list[Any]:
        if not isinstance(payload, dict):
            raise MalformedResponse(f"Response for {what} must be an object.")
        if payload.get("success") is not True:
            raise MalformedResponse(f"Source did not report success for {what}.")
        data = payload.get("data")
        if not isinstance(data, list):
            raise MalformedResponse(f"Response for {what} is missing a data list.")
        return data

    def _map_plan_date(self, item: Any) -> date:
        if not isinstance(item, dict):
            raise MalformedResponse("Plan entry must be an object.")
        return parse_api_date(item.get("date"))

    def _map_menu_day(self, item: Any) -> MenuDay:
        if not isinstance(item, dict):
            raise MalformedResponse("Canteen data must be an object.")
        return MenuDay(
            date=parse_api_date(item.get("date")),
            canteen=self._map_canteen(item.get("canteen")),
            lines=tuple(self._map_line(line) for line in self._require_list(item, "lines")),
        )

    def _map_canteen(self, raw: Any) -> Canteen:
        if not isinstance(raw, dict):
            raise MalformedResponse("Canteen must be an object.")
        return Canteen(
            id=self._require_str(raw, "id"),
            name=self._require_str(raw, "name"),
        )

    def _map_line(self, raw: Any) -> Line:
        if not isinstance(raw, dict):
            raise MalformedResponse("Line must be an object.")
        line_id = raw.get("id")
        if line_id is not None and not isinstance(line_id, str):
            raise MalformedResponse("Line id must be a string.")
        return Line(
            id=line_id,
            name=self._require_str(raw, "name"),
            meals=tuple(self._map_meal(meal) for meal in self._require_list(raw, "meals")),
        )

    def _map_meal(self, raw: Any) -> Meal:
        if not isinstance(raw, dict):
            raise MalformedResponse("Meal must be an object.")
        classifiers = tuple(
            self._map_classifier(code) for code in self._require_list(raw, "classifiers")
        )
        additives = self._require_list(raw, "additives")
        if not all(isinstance(additive, str) for additive in additives):
            raise MalformedResponse("Meal additives must be strings.")
        return Meal(
            name=self._require_str(raw, "name"),
            price=self._require_str(raw, "price"),
            classifiers=classifiers,
            additives=tuple(additives),
        )

    def _map_classifier(self, code: Any) -> Classifier:
        try:
            return Classifier(code)
        except ValueError as exc:
            raise MalformedResponse(f"Unknown meal classifier {code!r}.") from exc

    def _require_str(self, raw: dict[str, Any], key: str) -> str:
        value = raw.get(key)
        if not isinstance(value, str):
            raise MalformedResponse(f"Field {key!r} must be a string.")
        return value

    def _require_list(self, raw: dict[str, Any], key: str) -> list[Any]:
        value = raw.get(key)
        if not isinstance(value, list):
            raise MalformedResponse(f"Field {key!r} must be a list.")
        return value
