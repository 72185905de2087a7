import inspect

from opentelemetry import trace
from opentelemetry.trace import SpanKind

from chatwo.config import ChatwoSettings
from chatwo.interface import ILogger, Sink, TokenSource
from chatwo.log import get_logger

from .buffer import OnlineTokenBuffer


async def _deliver(sink: Sink, text: str) -> None:
    result = sink(text)
    if inspect.isawaitable(result):
        await result


async def run_online_buffer(
    token_source: TokenSource,
    max_length: int,
    sink: Sink,
    *,
    settings: ChatwoSettings | None = None,
    logger: ILogger | None = None,
    tracer: trace.Tracer | None = None,
) -> int:
    """Stream ``token_source`` into ``sink`` as ceiling-bounded messages.

    Returns once the source is exhausted and the final flush has been
    delivered. If the source raises, whatever is pending is flushed on a
    best-effort basis and the source's exception is re-raised.

    Returns the number of messages handed to ``sink``.
    """
    settings = settings or ChatwoSettings()
    logger = logger or get_logger("stream")
    tracer = tracer or trace.get_tracer("chatwo.stream")

    buffer = OnlineTokenBuffer(
        max_length,
        think_start=settings.think_start,
        think_end=settings.think_end,
        thinking_notice=settings.thinking_notice,
    )
    tokens = 0
    delivered = 0

    with tracer.start_as_current_span(
        "chatwo.stream",
        kind=SpanKind.INTERNAL,
        attributes={"chatwo.max_length": max_length},
    ) as span:
        iterator = aiter(token_source)
        try:
            while True:
                try:
                    token = await anext(iterator)
                except StopAsyncIteration:
                    break
                except Exception:
                    logger.exception(
                        f"Token source failed after {tokens} tokens, "
                        f"flushing {buffer.pending_length} pending chars"
                    )
                    try:
                        for part in buffer.flush():
                            await _deliver(sink, part)
                            delivered += 1
                    except Exception:
                        logger.exception("Flush after token source failure failed")
                    raise

                tokens += 1
                for part in buffer.push(token):
                    await _deliver(sink, part)
                    delivered += 1

            for part in buffer.flush():
                await _deliver(sink, part)
                delivered += 1
        finally:
            span.set_attribute("chatwo.tokens", tokens)
            span.set_attribute("chatwo.delivered", delivered)
            span.set_attribute("chatwo.dropped_tokens", buffer.dropped_tokens)

    logger.debug(
        f"Stream finished: {tokens} tokens, {delivered} messages, "
        f"{buffer.dropped_tokens} thinking tokens dropped"
    )
    return delivered
