"""Slash command handling and menu presentation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime, time

from .const import (
    CANTEEN_OPTION,
    CLASSIFIER_EMOJI,
    COMMAND_NAME,
    CORRECTION_NOTICES,
    DAY_OPTION,
    EMBED_COLOR,
    EMBED_FOOTER,
    NO_MENU_MESSAGE,
    TITLE_TEMPLATE,
    UNKNOWN_WEEKDAY,
    WEEKDAY_NAMES,
)
from .context import AppContext
from .dates import parse_day, resolve_date
from .exceptions import MalformedResponse, UnknownCommand
from .models import (
    Classifier,
    CommandOption,
    Line,
    MenuDay,
    MenuEmbed,
    MenuField,
    MenuResponse,
)
from .source.base import BaseMenuSource
from .util import local_clock

_LOGGER = logging.getLogger(__name__)


class CommandPipeline:
    """Turn one slash command into one response."""

    def __init__(
        self,
        source: BaseMenuSource,
        rollover: time,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._source = source
        self._rollover = rollover
        self._clock = clock or local_clock()

    @classmethod
    def from_context(cls, context: AppContext) -> CommandPipeline:
        return cls(context.source, context.rollover, clock=context.clock)

    async def handle(self, name: str, options: Iterable[CommandOption] = ()) -> MenuResponse:
        if name != COMMAND_NAME:
            raise UnknownCommand(name)
        return await self._handle_mensa(list(options))

    async def _handle_mensa(self, options: list[CommandOption]) -> MenuResponse:
        now = self._clock()
        token = _option_value(options, DAY_OPTION)
        canteen_filter = _option_value(options, CANTEEN_OPTION)
        if canteen_filter is not None:
            # Only the first canteen of the response is rendered.
            _LOGGER.debug("Ignoring canteen filter %s", canteen_filter)

        requested = parse_day(token, now) if token is not None else None
        available = await self._source.list_available_dates()
        resolution = resolve_date(requested, now, self._rollover, available)
        if resolution.date is None:
            _LOGGER.info("No menu available on or after %s", requested or now.date())
            return MenuResponse(content=NO_MENU_MESSAGE)

        menus = await self._source.fetch_menu(resolution.date)
        if not menus:
            raise MalformedResponse(f"Source returned no canteen data for {resolution.date}.")
        # TODO: render every canteen or honor the kantine option once the API supports filtering.
        menu = menus[0]
        return MenuResponse(
            content=CORRECTION_NOTICES.get(resolution.correction),
            embed=build_embed(menu),
        )


def _option_value(options: Iterable[CommandOption], name: str) -> str | None:
    for option in options:
        if option.name == name:
            return option.value
    return None


def build_embed(menu: MenuDay) -> MenuEmbed:
    title = TITLE_TEMPLATE.format(canteen=menu.canteen.name, weekday=weekday_name(menu.date))
    fields = tuple(
        MenuField(name=line.name, value=value)
        for line in menu.lines
        if line.meals and (value := format_line(line))
    )
    return MenuEmbed(title=title, fields=fields, color=EMBED_COLOR, footer=EMBED_FOOTER)


def format_line(line: Line) -> str:
    return "\n".join(
        f"{classifier_emoji(meal.classifiers)}{meal.name} ({meal.price})"
        for meal in line.meals
        if meal.price
    )


def classifier_emoji(classifiers: Iterable[Classifier]) -> str:
    """Emoji of the lowest-ordered classifier, or an empty string."""
    ordered = sorted(classifiers, key=lambda classifier: classifier.order)
    if not ordered:
        return ""
    return CLASSIFIER_EMOJI.get(ordered[0], "")


def weekday_name(day: date) -> str:
    index = day.weekday()
    if index < len(WEEKDAY_NAMES):
        return WEEKDAY_NAMES[index]
    return UNKNOWN_WEEKDAY
