"""Discord adapter for the menu command."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import discord

from .const import (
    CANTEEN_LIST,
    CANTEEN_OPTION,
    CANTEEN_OPTION_DESCRIPTION,
    COMMAND_DESCRIPTION,
    COMMAND_NAME,
    DAY_CHOICES,
    DAY_OPTION,
    DAY_OPTION_DESCRIPTION,
    FAILURE_MESSAGE,
)
from .context import AppContext
from .exceptions import MensaBotError, RegistrationError
from .models import CommandOption, MenuEmbed, MenuResponse
from .pipeline import CommandPipeline
from .registrar import RegistrationGate, RetryingRegistrar

_LOGGER = logging.getLogger(__name__)

# Discord API enum values.
_CHAT_INPUT_COMMAND = 1
_STRING_OPTION = 3


def build_command_schema() -> dict[str, Any]:
    """Return the global application command payload for ``/mensa``."""
    return {
        "name": COMMAND_NAME,
        "description": COMMAND_DESCRIPTION,
        "type": _CHAT_INPUT_COMMAND,
        "dm_permission": True,
        "options": [
            {
                "name": DAY_OPTION,
                "description": DAY_OPTION_DESCRIPTION,
                "type": _STRING_OPTION,
                "required": False,
                "choices": [
                    {"name": label, "value": str(token)} for label, token in DAY_CHOICES
                ],
            },
            {
                "name": CANTEEN_OPTION,
                "description": CANTEEN_OPTION_DESCRIPTION,
                "type": _STRING_OPTION,
                "required": False,
                "choices": [{"name": label, "value": value} for label, value in CANTEEN_LIST],
            },
        ],
    }


def parse_command_options(data: Any) -> list[CommandOption]:
    if not isinstance(data, dict):
        return []
    options: list[CommandOption] = []
    for raw in data.get("options") or []:
        if not isinstance(raw, dict):
            continue
        name = raw.get("name")
        value = raw.get("value")
        if isinstance(name, str) and isinstance(value, str):
            options.append(CommandOption(name=name, value=value))
    return options


def to_discord_embed(embed: MenuEmbed) -> discord.Embed:
    result = discord.Embed(title=embed.title, color=embed.color)
    for menu_field in embed.fields:
        result.add_field(name=menu_field.name, value=menu_field.value, inline=menu_field.inline)
    if embed.footer:
        result.set_footer(text=embed.footer)
    return result


class MensaBot(discord.Client):
    """Discord client answering ``/mensa``."""

    def __init__(self, app_context: AppContext, **kwargs: Any) -> None:
        kwargs.setdefault("intents", discord.Intents.none())
        super().__init__(**kwargs)
        self.app_context = app_context
        self.pipeline = CommandPipeline.from_context(app_context)
        self._registration_gate = RegistrationGate()
        self.registration_task: asyncio.Task[bool] | None = None

    async def on_ready(self) -> None:
        _LOGGER.info("Connected as '%s' serving %d guilds.", self.user, len(self.guilds))
        if self._registration_gate.try_acquire():
            registrar = RetryingRegistrar(self._publish_commands, self.app_context.cancel)
            self.registration_task = registrar.start()

    async def _publish_commands(self) -> None:
        if self.application_id is None:
            raise RegistrationError("Application id is not known yet.")
        await self.http.bulk_upsert_global_commands(
            self.application_id,
            [build_command_schema()],
        )

    async def on_interaction(self, interaction: discord.Interaction) -> None:
        if interaction.type is not discord.InteractionType.application_command:
            _LOGGER.warning("Received interaction that is not an application command.")
            return
        data = interaction.data or {}
        name = str(data.get("name", ""))
        try:
            response = await self.pipeline.handle(name, parse_command_options(data))
            await self._send(interaction, response)
        except MensaBotError as exc:
            _LOGGER.warning(
                "Failed to handle application command %s for %s: %s",
                name,
                interaction.user,
                exc,
            )
            await self._send_failure(interaction)
        except Exception:  # noqa: BLE001
            _LOGGER.exception(
                "Unexpected error handling application command %s for %s",
                name,
                interaction.user,
            )
            await self._send_failure(interaction)

    async def _send_failure(self, interaction: discord.Interaction) -> None:
        if interaction.response.is_done():
            return
        await interaction.response.send_message(FAILURE_MESSAGE, ephemeral=True)

    async def _send(self, interaction: discord.Interaction, response: MenuResponse) -> None:
        kwargs: dict[str, Any] = {}
        if response.content is not None:
            kwargs["content"] = response.content
        if response.embed is not None:
            kwargs["embed"] = to_discord_embed(response.embed)
        await interaction.response.send_message(**kwargs)
