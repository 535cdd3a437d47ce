"""Bot exceptions."""

from __future__ import annotations


class MensaBotError(Exception):
    """Base exception for the bot."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        text = message if message is not None else detail
        super().__init__(text or "")
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.detail = detail if detail is not None else text
        self.user_message = user_message


class InvalidDayArgument(MensaBotError):
    """Raised when a day token is not recognized."""

    error_type = "command"
    default_error_code = "invalid_day_argument"

    def __init__(self, token: str, **kwargs: str | None) -> None:
        super().__init__(f"Invalid day argument: {token!r}.", **kwargs)
        self.token = token


class UnknownCommand(MensaBotError):
    """Raised when no handler exists for a command name."""

    error_type = "command"
    default_error_code = "unknown_command"

    def __init__(self, name: str, **kwargs: str | None) -> None:
        super().__init__(f"Unknown command: {name!r}.", **kwargs)
        self.name = name


class SourceUnreachable(MensaBotError):
    """Raised when the menu source cannot be reached."""

    error_type = "network"
    default_error_code = "source_unreachable"


class MalformedResponse(MensaBotError):
    """Raised when the menu source returns data that cannot be mapped."""

    error_type = "source"
    default_error_code = "malformed_response"


class RegistrationError(MensaBotError):
    """Raised when command registration gives up."""

    error_type = "registration"
    default_error_code = "registration_error"


class ConfigError(MensaBotError):
    """Raised when configuration is missing or invalid."""

    error_type = "config"
    default_error_code = "config_error"
