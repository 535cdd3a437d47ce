"""mensabot package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import Client
from .dates import parse_day, resolve_date
from .exceptions import (
    ConfigError,
    InvalidDayArgument,
    MalformedResponse,
    MensaBotError,
    RegistrationError,
    SourceUnreachable,
    UnknownCommand,
)
from .models import (
    Canteen,
    Classifier,
    CorrectionKind,
    DayToken,
    Line,
    Meal,
    MenuDay,
    MenuResponse,
    Resolution,
)
from .pipeline import CommandPipeline
from .registrar import ExponentialBackoff, RegistrationGate, RetryingRegistrar

try:
    __version__ = version("mensabot")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "Canteen",
    "Classifier",
    "Client",
    "CommandPipeline",
    "ConfigError",
    "CorrectionKind",
    "DayToken",
    "ExponentialBackoff",
    "InvalidDayArgument",
    "Line",
    "MalformedResponse",
    "Meal",
    "MensaBotError",
    "MenuDay",
    "MenuResponse",
    "RegistrationError",
    "RegistrationGate",
    "Resolution",
    "RetryingRegistrar",
    "SourceUnreachable",
    "UnknownCommand",
    "__version__",
    "parse_day",
    "resolve_date",
]
