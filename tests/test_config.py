from datetime import time
from zoneinfo import ZoneInfo

import pytest

from mensabot.config import DEFAULT_REQUEST_TIMEOUT, Settings
from mensabot.exceptions import ConfigError

BASE_ENV = {
    "BOT_TOKEN": "token",
    "API_URL": "https://mensa.example/api/",
    "NEXT_DAY": "14:30",
}


def test_settings_from_env() -> None:
    settings = Settings.from_env(BASE_ENV)
    assert settings.bot_token == "token"
    assert settings.api_url == "https://mensa.example/api/"
    assert settings.next_day == time(14, 30)
    assert settings.timezone is None
    assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert settings.log_level == "INFO"


def test_settings_optional_values() -> None:
    env = dict(BASE_ENV, TIMEZONE="Europe/Berlin", REQUEST_TIMEOUT="5", LOG_LEVEL="debug")
    settings = Settings.from_env(env)
    assert settings.timezone == ZoneInfo("Europe/Berlin")
    assert settings.request_timeout == 5.0
    assert settings.log_level == "DEBUG"


def test_settings_overrides_win() -> None:
    settings = Settings.from_env(BASE_ENV, next_day="20:00", api_url=None)
    assert settings.next_day == time(20, 0)
    assert settings.api_url == BASE_ENV["API_URL"]


@pytest.mark.parametrize("missing", ["BOT_TOKEN", "API_URL", "NEXT_DAY"])
def test_settings_missing_required(missing: str) -> None:
    env = {key: value for key, value in BASE_ENV.items() if key != missing}
    with pytest.raises(ConfigError) as info:
        Settings.from_env(env)
    assert missing in str(info.value)


@pytest.mark.parametrize(
    "extra",
    [{"NEXT_DAY": "late"}, {"REQUEST_TIMEOUT": "soon"}, {"REQUEST_TIMEOUT": "0"}],
)
def test_settings_invalid_values(extra: dict[str, str]) -> None:
    with pytest.raises(ConfigError):
        Settings.from_env(dict(BASE_ENV, **extra))
