"""Token sources backed by OpenAI-compatible chat completion streams."""

from typing import Any, AsyncIterator

from openai import AsyncOpenAI


async def openai_tokens(
    client: AsyncOpenAI,
    *,
    model: str,
    messages: list[dict[str, Any]],
    think_start: str = "<think>",
    think_end: str = "</think>",
    **params: Any,
) -> AsyncIterator[str]:
    """Yield the text deltas of a streamed chat completion.

    Servers that report reasoning out of band (``reasoning_content`` or
    ``reasoning`` on the delta) get it wrapped in the thinking sentinels, so
    downstream buffers treat it like inline ``<think>`` output.
    """
    stream = await client.chat.completions.create(
        model=model,
        messages=messages,
        stream=True,
        **params,
    )
    thinking = False
    async for chunk in stream:
        if not chunk.choices:
            continue
        delta = chunk.choices[0].delta
        reasoning = getattr(delta, "reasoning_content", None) or getattr(
            delta, "reasoning", None
        )
        if reasoning:
            if not thinking:
                thinking = True
                yield think_start
            yield reasoning
        if delta.content:
            if thinking:
                thinking = False
                yield think_end
            yield delta.content
    if thinking:
        yield think_end
