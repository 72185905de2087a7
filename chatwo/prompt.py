from typing import Iterable

from chatwo.interface import Record

QUESTION_TEMPLATE = "Chat channel history:\n{history}\nQuestion: {question}\n"


class HistoryEntry(Record):
    author: str
    content: str
    guild: str | None = None


def format_history(entries: Iterable[HistoryEntry]) -> str:
    """Render recent channel messages oldest first, one line each."""
    return "\n".join(
        f" - [{entry.guild or 'DM'}][{entry.author}]: {entry.content}"
        for entry in entries
    )


def strip_mention(content: str, app_id: str) -> str:
    return content.replace(f"<@{app_id}>", "").strip()


def build_question_prompt(question: str, history: Iterable[HistoryEntry]) -> str:
    return QUESTION_TEMPLATE.format(
        history=format_history(history), question=question
    )
