from pathlib import Path

import pytest

from chatwo.config import ChatwoSettings, load_settings
from chatwo.errors import ChatwoConfigurationError


def test_defaults_when_environment_is_empty() -> None:
    settings = load_settings({})

    assert settings == ChatwoSettings()
    assert settings.reply_max_chars == 2000
    assert settings.think_start == "<think>"
    assert settings.think_end == "</think>"


def test_environment_values_are_converted() -> None:
    settings = load_settings(
        {
            "DISCORD_REPLY_MAX_CHARS": "1500",
            "CHATWO_REPLY_DELAY": "0",
            "CHATWO_THINKING_NOTICE": "*hmm*",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.reply_max_chars == 1500
    assert settings.reply_delay_seconds == 0
    assert settings.thinking_notice == "*hmm*"
    assert settings.log_level == "debug"


def test_blank_values_fall_back_to_defaults() -> None:
    settings = load_settings({"DISCORD_REPLY_MAX_CHARS": "", "CHATWO_THINK_END": None})

    assert settings.reply_max_chars == 2000
    assert settings.think_end == "</think>"


@pytest.mark.parametrize(
    "env",
    [
        {"DISCORD_REPLY_MAX_CHARS": "lots"},
        {"DISCORD_REPLY_MAX_CHARS": "3"},
        {"DISCORD_REPLY_MAX_CHARS": "-20"},
        {"CHATWO_REPLY_DELAY": "-1"},
    ],
)
def test_out_of_range_values_fail_fast(env: dict[str, str]) -> None:
    with pytest.raises(ChatwoConfigurationError):
        load_settings(env)


def test_dotenv_file_is_read_under_process_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("DISCORD_REPLY_MAX_CHARS=900\nCHATWO_THINK_START=<reason>\n")
    monkeypatch.delenv("DISCORD_REPLY_MAX_CHARS", raising=False)
    monkeypatch.setenv("CHATWO_THINK_START", "<plan>")

    settings = load_settings(dotenv_path=str(dotenv_file))

    assert settings.reply_max_chars == 900
    assert settings.think_start == "<plan>"
