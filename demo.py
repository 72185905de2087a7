import argparse
import os
from pathlib import Path
from typing import cast

from dotenv import load_dotenv
from openai import AsyncOpenAI
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from chatwo import load_settings, segment_text
from chatwo.log import configure_logging
from chatwo.prompt import HistoryEntry, build_question_prompt
from chatwo.streaming import openai_tokens
from term_ui import show_chunks, stream_with_terminal_ui

SAMPLE_HISTORY = [
    HistoryEntry(author="mira", content="anyone tried the new build?", guild="lab"),
    HistoryEntry(author="tomas", content="yes, startup is faster now", guild="lab"),
]


def build_console_tracer() -> trace.Tracer:
    otel_provider = TracerProvider(
        resource=Resource.create({"service.name": "chatwo-demo"})
    )
    otel_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(otel_provider)
    return trace.get_tracer("chatwo.demo")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Split model replies into chat-sized messages"
    )
    parser.add_argument("question", nargs="*", help="Question to stream")
    parser.add_argument(
        "--offline",
        type=Path,
        default=None,
        help="Split the contents of a file instead of streaming a model reply",
    )
    parser.add_argument("--model", default=os.environ.get("OPENAI_MODEL", "qwen3:8b"))
    parser.add_argument(
        "--trace", action="store_true", help="Print OpenTelemetry spans on exit"
    )
    return parser.parse_args()


async def main() -> None:
    load_dotenv(".env")
    args = parse_args()
    settings = load_settings()
    configure_logging(settings.log_level)
    if args.trace:
        build_console_tracer()

    try:
        if args.offline is not None:
            text = args.offline.read_text(encoding="utf-8")
            chunks = segment_text(text, settings.reply_max_chars)
            show_chunks(
                chunks, title=str(args.offline), max_length=settings.reply_max_chars
            )
            return

        question = " ".join(args.question) or "Explain how tides work."
        client = AsyncOpenAI(
            api_key=os.environ.get("OPENAI_API_KEY", "ollama"),
            base_url=os.environ.get("OPENAI_BASE_URL"),
        )
        tokens = openai_tokens(
            client,
            model=args.model,
            messages=[
                {
                    "role": "user",
                    "content": build_question_prompt(question, SAMPLE_HISTORY),
                }
            ],
            think_start=settings.think_start,
            think_end=settings.think_end,
        )
        await stream_with_terminal_ui(tokens, question, settings)
    finally:
        if args.trace:
            provider = cast(TracerProvider, trace.get_tracer_provider())
            provider.force_flush()
            provider.shutdown()


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
