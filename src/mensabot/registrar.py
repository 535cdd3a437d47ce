"""One-shot command registration with cancellable exponential backoff."""

from __future__ import annotations

import asyncio
import logging
import random
import threading
from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass
from typing import Any

from .exceptions import RegistrationError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExponentialBackoff:
    """Delay policy between registration attempts.

    ``max_attempts`` of ``None`` retries until cancelled.
    """

    min_delay: float = 1.0
    factor: float = 2.0
    max_delay: float = 60.0
    max_attempts: int | None = None
    jitter: bool = False

    def delays(self) -> Iterator[float]:
        """Yield the delay before each retry."""
        delay = self.min_delay
        retries = 0
        while self.max_attempts is None or retries < self.max_attempts - 1:
            retries += 1
            current = min(delay, self.max_delay)
            if self.jitter:
                current += random.uniform(0, current)
            yield current
            delay *= self.factor


class RegistrationGate:
    """Single-shot gate: only the first caller of ``try_acquire`` wins."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._open = True

    def try_acquire(self) -> bool:
        with self._lock:
            if not self._open:
                return False
            self._open = False
            return True

    @property
    def acquired(self) -> bool:
        return not self._open


class RetryingRegistrar:
    """Publish the command schema until it succeeds or ``cancel`` is set."""

    def __init__(
        self,
        publish: Callable[[], Awaitable[Any]],
        cancel: asyncio.Event,
        *,
        backoff: ExponentialBackoff | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._publish = publish
        self._cancel = cancel
        self._backoff = backoff or ExponentialBackoff()
        self._sleep = sleep
        self.attempts = 0

    def start(self) -> asyncio.Task[bool]:
        """Run registration in the background."""
        return asyncio.create_task(self.run(), name="mensabot-register-commands")

    async def run(self) -> bool:
        cancelled = asyncio.create_task(self._cancel.wait())
        registered = asyncio.create_task(self._retry())
        done, pending = await asyncio.wait(
            {cancelled, registered},
            return_when=asyncio.FIRST_COMPLETED,
        )
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        if registered in done:
            try:
                success = registered.result()
            except RegistrationError as exc:
                _LOGGER.error("Slash command registration failed: %s", exc)
                return False
            if success:
                _LOGGER.info(
                    "Successfully registered slash commands after %d attempt(s).",
                    self.attempts,
                )
                return True
        _LOGGER.warning("Slash command registration cancelled.")
        return False

    async def _retry(self) -> bool:
        delays = self._backoff.delays()
        while True:
            if self._cancel.is_set():
                return False
            self.attempts += 1
            try:
                await self._publish()
            except Exception as exc:  # noqa: BLE001
                delay = next(delays, None)
                if delay is None:
                    raise RegistrationError(
                        f"Giving up after {self.attempts} attempt(s)."
                    ) from exc
                _LOGGER.warning(
                    "Slash command registration attempt %d failed, retrying in %.1fs: %s",
                    self.attempts,
                    delay,
                    exc,
                )
                await self._sleep(delay)
            else:
                return True
