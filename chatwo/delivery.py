"""Delivery of complete model replies that may exceed one chat message."""

import asyncio
from typing import Any, Awaitable, Callable, TypeAlias

from opentelemetry import trace
from opentelemetry.trace import SpanKind

from chatwo.config import ChatwoSettings
from chatwo.errors import ChatwoConfigurationError
from chatwo.interface import ILogger
from chatwo.log import get_logger
from chatwo.segmentation import TRUNCATION_MARKER, segment_text

SendFn: TypeAlias = Callable[[str], Awaitable[Any]]

DEFAULT_FAILURE_NOTICE = (
    "The reply was too long and could not be sent. Please try again later."
)


class ReplyDispatcher:
    """Sends a reply as a direct response plus follow-up channel messages.

    The first chunk answers the triggering message through ``reply``; later
    chunks go to the channel through ``send``, spaced by ``delay_seconds`` to
    stay clear of rate limits.
    """

    def __init__(
        self,
        max_length: int,
        *,
        delay_seconds: float = 0.5,
        failure_notice: str = DEFAULT_FAILURE_NOTICE,
        logger: ILogger | None = None,
        tracer: trace.Tracer | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        if max_length <= len(TRUNCATION_MARKER):
            raise ChatwoConfigurationError(
                f"max_length must exceed the truncation marker length "
                f"({len(TRUNCATION_MARKER)}), got {max_length}"
            )
        self._max_length = max_length
        self._delay_seconds = delay_seconds
        self._failure_notice = failure_notice
        self._logger = logger or get_logger("delivery")
        self._tracer = tracer or trace.get_tracer("chatwo.delivery")
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls, settings: ChatwoSettings, **kwargs: Any
    ) -> "ReplyDispatcher":
        return cls(
            settings.reply_max_chars,
            delay_seconds=settings.reply_delay_seconds,
            **kwargs,
        )

    async def deliver(self, text: str, reply: SendFn, send: SendFn) -> int:
        """Send ``text`` and return how many messages went out."""
        if not text.strip():
            self._logger.debug("Skipping blank reply")
            return 0

        with self._tracer.start_as_current_span(
            "chatwo.deliver",
            kind=SpanKind.INTERNAL,
            attributes={"chatwo.reply.length": len(text)},
        ) as span:
            if len(text) <= self._max_length:
                await reply(text)
                span.set_attribute("chatwo.reply.chunks", 1)
                return 1

            chunks = segment_text(text, self._max_length, logger=self._logger)
            span.set_attribute("chatwo.reply.chunks", len(chunks))
            self._logger.info(f"Long reply split into {len(chunks)} messages")

            sent = 0
            try:
                await reply(chunks[0])
                sent += 1
                for index, chunk in enumerate(chunks[1:], start=2):
                    await self._sleep(self._delay_seconds)
                    await send(chunk)
                    sent += 1
                    self._logger.debug(f"Sent message {index}/{len(chunks)}")
            except Exception as exc:
                span.record_exception(exc)
                self._logger.exception(
                    f"Failed to send long reply after {sent}/{len(chunks)} messages"
                )
                try:
                    await reply(self._failure_notice)
                except Exception:
                    self._logger.exception("Failed to send the failure notice")
                return sent

            self._logger.success(f"Long reply delivered in {sent} messages")
            return sent
