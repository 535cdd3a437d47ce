"""Run the bot: ``python -m mensabot``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys

import aiohttp

from .bot import MensaBot
from .client import Client
from .config import Settings
from .context import AppContext
from .exceptions import ConfigError
from .util import local_clock

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Discord bot for the canteen menu.")
    parser.add_argument("--api-url", help="Menu API base URL (default: API_URL).")
    parser.add_argument("--next-day", help="Rollover time HH:MM (default: NEXT_DAY).")
    parser.add_argument("--timezone", help="IANA timezone for 'now' (default: TIMEZONE).")
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or INFO).")
    return parser.parse_args(argv)


async def run(settings: Settings) -> int:
    cancel = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, cancel.set)
        except NotImplementedError:  # pragma: no cover - Windows
            pass

    timeout = aiohttp.ClientTimeout(total=settings.request_timeout)
    async with Client(base_url=settings.api_url, timeout=timeout) as client:
        context = AppContext(
            source=client.menu_source(),
            rollover=settings.next_day,
            cancel=cancel,
            clock=local_clock(settings.timezone),
        )
        async with MensaBot(context) as bot:
            bot_task = asyncio.create_task(bot.start(settings.bot_token))
            cancel_task = asyncio.create_task(cancel.wait())
            done, _ = await asyncio.wait(
                {bot_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
            exit_code = 0
            if bot_task in done:
                exc = bot_task.exception()
                if exc is None:
                    _LOGGER.info("Discord client stopped.")
                else:
                    _LOGGER.warning("Discord client stopped with error: %s", exc)
                    exit_code = 1
                _LOGGER.info("Sending cancellation signal.")
            else:
                _LOGGER.info("Application cancelled.")
            cancel.set()
            cancel_task.cancel()
            bot_task.cancel()
            await asyncio.gather(bot_task, cancel_task, return_exceptions=True)
            if bot.registration_task is not None:
                await asyncio.gather(bot.registration_task, return_exceptions=True)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = Settings.from_env(
            api_url=args.api_url,
            next_day=args.next_day,
            timezone=args.timezone,
            log_level=args.log_level,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    logging.basicConfig(level=settings.log_level)
    return asyncio.run(run(settings))


if __name__ == "__main__":
    raise SystemExit(main())
