from chatwo.prompt import (
    HistoryEntry,
    build_question_prompt,
    format_history,
    strip_mention,
)


def test_format_history_labels_guild_and_author() -> None:
    entries = [
        HistoryEntry(author="mira", content="hi", guild="lab"),
        HistoryEntry(author="tomas", content="hello"),
    ]

    assert format_history(entries) == " - [lab][mira]: hi\n - [DM][tomas]: hello"


def test_strip_mention_removes_bot_mention() -> None:
    assert strip_mention("<@42> what time is it?", "42") == "what time is it?"
    assert strip_mention("hey <@7>", "42") == "hey <@7>"


def test_question_prompt_includes_history_and_question() -> None:
    prompt = build_question_prompt(
        "why?", [HistoryEntry(author="a", content="b", guild="g")]
    )

    assert prompt == "Chat channel history:\n - [g][a]: b\nQuestion: why?\n"
