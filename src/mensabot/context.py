"""Process-wide application context."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, time

from .source.base import BaseMenuSource
from .util import local_clock


@dataclass(frozen=True, slots=True)
class AppContext:
    """Dependencies shared by every handler, built once at startup."""

    source: BaseMenuSource
    rollover: time
    cancel: asyncio.Event = field(default_factory=asyncio.Event)
    clock: Callable[[], datetime] = field(default_factory=local_clock)
