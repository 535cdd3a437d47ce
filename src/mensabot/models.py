"""Data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum, StrEnum


class DayToken(StrEnum):
    TODAY = "today"
    TOMORROW = "tomorrow"
    DAY_AFTER_TOMORROW = "dayaftertomorrow"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"


class CorrectionKind(Enum):
    """Why the shown date differs from the requested one."""

    NONE = "none"
    ROLLED_OVER = "rolled_over"
    DAYS_SKIPPED = "days_skipped"


class Classifier(Enum):
    """Meal classifier as published by the menu source.

    Member order is significant: it decides which classifier is shown
    first for a meal.
    """

    PORK = "S"
    ORGANIC_PORK = "SAT"
    BEEF = "R"
    ORGANIC_BEEF = "RAT"
    GELATINE = "GEL"
    FISH = "MSC"
    ANIMAL_RENNET = "LAB"
    VEGETARIAN = "VEG"
    VEGAN = "VG"
    MENSA_VITAL = "MV"

    @property
    def order(self) -> int:
        return _CLASSIFIER_ORDER[self]


_CLASSIFIER_ORDER = {classifier: index for index, classifier in enumerate(Classifier)}


@dataclass(frozen=True, slots=True)
class Resolution:
    date: date | None
    correction: CorrectionKind


@dataclass(frozen=True, slots=True)
class Canteen:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Meal:
    name: str
    price: str
    classifiers: tuple[Classifier, ...] = ()
    additives: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Line:
    id: str | None
    name: str
    meals: tuple[Meal, ...] = ()


@dataclass(frozen=True, slots=True)
class MenuDay:
    date: date
    canteen: Canteen
    lines: tuple[Line, ...] = ()


@dataclass(frozen=True, slots=True)
class CommandOption:
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class MenuField:
    name: str
    value: str
    inline: bool = True


@dataclass(frozen=True, slots=True)
class MenuEmbed:
    title: str
    fields: tuple[MenuField, ...] = ()
    color: int = 0x6F00FF
    footer: str | None = None


@dataclass(frozen=True, slots=True)
class MenuResponse:
    content: str | None = None
    embed: MenuEmbed | None = None
