"""Manual live check for the menu API.

Run from the repository root with:
  PYTHONPATH=src API_URL=... NEXT_DAY=14:30 python scripts/menu_live_check.py [day]

Optional environment variables:
  TIMEZONE

Prints the available dates and the response ``/mensa`` would send.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from mensabot import Client, CommandPipeline
from mensabot.exceptions import MensaBotError
from mensabot.models import CommandOption, MenuResponse
from mensabot.util import load_timezone, local_clock, parse_rollover_time


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        print(f"Missing required environment variable: {name}", file=sys.stderr)
        raise SystemExit(2)
    return value


def _format_response(response: MenuResponse) -> str:
    lines: list[str] = []
    if response.content:
        lines.append(response.content)
    if response.embed is not None:
        lines.append(f"# {response.embed.title}")
        for field in response.embed.fields:
            lines.append(f"## {field.name}")
            lines.append(field.value)
    return "\n".join(lines)


async def main() -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    base_url = _require_env("API_URL")
    rollover = parse_rollover_time(_require_env("NEXT_DAY"))
    clock = local_clock(load_timezone(os.getenv("TIMEZONE")))
    options = [CommandOption(name="tag", value=sys.argv[1])] if len(sys.argv) > 1 else []

    try:
        async with Client(base_url=base_url) as client:
            source = client.menu_source()
            available = sorted(await source.list_available_dates())
            pipeline = CommandPipeline(source, rollover, clock=clock)
            response = await pipeline.handle("mensa", options)
    except MensaBotError as exc:
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1

    print(f"Available dates: {', '.join(day.isoformat() for day in available) or '-'}")
    print(_format_response(response))
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
