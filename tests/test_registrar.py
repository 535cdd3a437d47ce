from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from mensabot.registrar import ExponentialBackoff, RegistrationGate, RetryingRegistrar


class _FlakyPublish:
    def __init__(self, failures: int | None) -> None:
        self._failures = failures
        self.calls = 0

    async def __call__(self) -> None:
        self.calls += 1
        if self._failures is None or self.calls <= self._failures:
            raise RuntimeError(f"publish failed ({self.calls})")


class _RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def test_backoff_delays_grow_and_cap() -> None:
    backoff = ExponentialBackoff(min_delay=1.0, factor=2.0, max_delay=5.0, max_attempts=6)
    assert list(backoff.delays()) == [1.0, 2.0, 4.0, 5.0, 5.0]


def test_backoff_unbounded_by_default() -> None:
    delays = ExponentialBackoff().delays()
    values = [next(delays) for _ in range(10)]
    assert values[:3] == [1.0, 2.0, 4.0]
    assert values[-1] == 60.0


def test_backoff_jitter_stays_within_double_delay() -> None:
    delays = list(ExponentialBackoff(max_attempts=4, jitter=True).delays())
    for base, value in zip([1.0, 2.0, 4.0], delays, strict=True):
        assert base <= value <= base * 2


def test_registration_gate_single_shot() -> None:
    gate = RegistrationGate()
    assert gate.acquired is False
    assert gate.try_acquire() is True
    assert gate.try_acquire() is False
    assert gate.acquired is True


def test_registration_gate_concurrent_acquire() -> None:
    gate = RegistrationGate()
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: gate.try_acquire(), range(32)))
    assert results.count(True) == 1


@pytest.mark.asyncio
async def test_registrar_retries_until_success(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="mensabot.registrar")
    publish = _FlakyPublish(failures=2)
    sleep = _RecordingSleep()
    registrar = RetryingRegistrar(publish, asyncio.Event(), sleep=sleep)

    assert await registrar.run() is True

    assert publish.calls == 3
    assert registrar.attempts == 3
    assert sleep.delays == [1.0, 2.0]
    assert "Successfully registered slash commands" in caplog.text
    assert caplog.text.count("attempt 1 failed") == 1
    assert caplog.text.count("attempt 2 failed") == 1

    await asyncio.sleep(0)
    assert publish.calls == 3


@pytest.mark.asyncio
async def test_registrar_cancelled_before_start(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="mensabot.registrar")
    publish = _FlakyPublish(failures=0)
    cancel = asyncio.Event()
    cancel.set()

    assert await RetryingRegistrar(publish, cancel).run() is False

    assert publish.calls == 0
    assert "Successfully registered" not in caplog.text
    assert "registration cancelled" in caplog.text


@pytest.mark.asyncio
async def test_registrar_cancel_during_backoff_stops_attempts(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG, logger="mensabot.registrar")
    publish = _FlakyPublish(failures=None)
    cancel = asyncio.Event()
    registrar = RetryingRegistrar(
        publish,
        cancel,
        backoff=ExponentialBackoff(min_delay=0.01, max_delay=0.01),
    )

    task = registrar.start()
    await asyncio.sleep(0.05)
    cancel.set()

    assert await task is False
    calls = publish.calls
    assert calls >= 1
    await asyncio.sleep(0.05)
    assert publish.calls == calls
    assert "Successfully registered" not in caplog.text


@pytest.mark.asyncio
async def test_registrar_bounded_backoff_gives_up(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="mensabot.registrar")
    publish = _FlakyPublish(failures=None)
    registrar = RetryingRegistrar(
        publish,
        asyncio.Event(),
        backoff=ExponentialBackoff(max_attempts=2),
        sleep=_RecordingSleep(),
    )

    assert await registrar.run() is False

    assert publish.calls == 2
    assert "Giving up after 2 attempt(s)" in caplog.text
