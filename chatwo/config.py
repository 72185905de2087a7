"""Process configuration, read from the environment once and passed explicitly."""

import os
from typing import Annotated, Mapping

from dotenv import dotenv_values, find_dotenv
from msgspec import Meta, ValidationError, convert

from chatwo.errors import ChatwoConfigurationError
from chatwo.interface import Record

DEFAULT_REPLY_MAX_CHARS = 2000


class ChatwoSettings(Record):
    """Settings shared by the segmentation, streaming and delivery layers."""

    reply_max_chars: Annotated[int, Meta(gt=3)] = DEFAULT_REPLY_MAX_CHARS
    """Ceiling for a single outgoing chat message, in characters."""

    think_start: Annotated[str, Meta(min_length=1)] = "<think>"
    """Sentinel token that opens the model's thinking sub-stream."""

    think_end: Annotated[str, Meta(min_length=1)] = "</think>"
    """Sentinel token that closes the thinking sub-stream."""

    thinking_notice: str = "*thinking...*"
    """Text sent once each time the model starts thinking."""

    reply_delay_seconds: Annotated[float, Meta(ge=0)] = 0.5
    """Pause between the messages of a multi-part reply."""

    log_level: str = "INFO"


ENV_VARS: dict[str, str] = {
    "reply_max_chars": "DISCORD_REPLY_MAX_CHARS",
    "think_start": "CHATWO_THINK_START",
    "think_end": "CHATWO_THINK_END",
    "thinking_notice": "CHATWO_THINKING_NOTICE",
    "reply_delay_seconds": "CHATWO_REPLY_DELAY",
    "log_level": "LOG_LEVEL",
}


def load_settings(
    env: Mapping[str, str | None] | None = None,
    *,
    dotenv_path: str | None = None,
) -> ChatwoSettings:
    """Build settings from an environment mapping.

    When ``env`` is omitted, values from a ``.env`` file are layered under the
    process environment. Unset variables fall back to the field defaults.
    """
    if env is None:
        dotenv_path = dotenv_path or find_dotenv(usecwd=True)
        env = {**dotenv_values(dotenv_path), **os.environ}

    raw = {
        field: env[var]
        for field, var in ENV_VARS.items()
        if env.get(var) not in (None, "")
    }
    try:
        return convert(raw, ChatwoSettings, strict=False)
    except ValidationError as exc:
        raise ChatwoConfigurationError(f"Invalid chatwo settings: {exc}") from exc
