from types import SimpleNamespace

import pytest

from chatwo.streaming.sources import openai_tokens


def chunk(content=None, reasoning=None, *, empty: bool = False):
    if empty:
        return SimpleNamespace(choices=[])
    delta = SimpleNamespace(content=content, reasoning_content=reasoning)
    return SimpleNamespace(choices=[SimpleNamespace(delta=delta)])


class FakeCompletions:
    def __init__(self, chunks):
        self._chunks = chunks
        self.requests: list[dict] = []

    async def create(self, **request):
        self.requests.append(request)

        async def iterator():
            for item in self._chunks:
                yield item

        return iterator()


class FakeClient:
    def __init__(self, chunks):
        self.completions = FakeCompletions(chunks)
        self.chat = SimpleNamespace(completions=self.completions)


async def collect(client, **kwargs) -> list[str]:
    return [
        token
        async for token in openai_tokens(
            client,
            model="qwen3:8b",
            messages=[{"role": "user", "content": "hi"}],
            **kwargs,
        )
    ]


@pytest.mark.anyio
async def test_content_deltas_are_yielded_in_order() -> None:
    client = FakeClient([chunk("Hel"), chunk(""), chunk("lo"), chunk(empty=True)])

    tokens = await collect(client, temperature=0.2)

    assert tokens == ["Hel", "lo"]
    request = client.completions.requests[0]
    assert request["stream"] is True
    assert request["model"] == "qwen3:8b"
    assert request["temperature"] == 0.2


@pytest.mark.anyio
async def test_inline_think_tags_pass_through_untouched() -> None:
    client = FakeClient([chunk("<think>"), chunk("plan"), chunk("</think>"), chunk("ok")])

    assert await collect(client) == ["<think>", "plan", "</think>", "ok"]


@pytest.mark.anyio
async def test_out_of_band_reasoning_is_wrapped_in_sentinels() -> None:
    client = FakeClient(
        [chunk(reasoning="step 1"), chunk(reasoning=" step 2"), chunk("answer")]
    )

    tokens = await collect(client, think_start="<r>", think_end="</r>")

    assert tokens == ["<r>", "step 1", " step 2", "</r>", "answer"]


@pytest.mark.anyio
async def test_unterminated_reasoning_is_closed_at_stream_end() -> None:
    client = FakeClient([chunk(reasoning="only thoughts")])

    assert await collect(client) == ["<think>", "only thoughts", "</think>"]
