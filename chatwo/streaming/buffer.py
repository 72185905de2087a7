from enum import Enum

from chatwo.errors import ChatwoConfigurationError


class ThinkingState(Enum):
    NORMAL = "normal"
    THINKING = "thinking"


class OnlineTokenBuffer:
    """Accumulates streamed model tokens into ceiling-bounded chat messages.

    Tokens between the ``think_start`` and ``think_end`` sentinels are
    dropped; entering thinking mode yields ``thinking_notice`` once.
    Visible text is cut after the last newline that keeps the message within
    ``max_length``, or at exactly ``max_length`` when no such newline exists.
    """

    __slots__ = (
        "_max_length",
        "_think_start",
        "_think_end",
        "_thinking_notice",
        "_state",
        "_buffer",
        "_length",
        "_dropped",
    )

    def __init__(
        self,
        max_length: int,
        *,
        think_start: str = "<think>",
        think_end: str = "</think>",
        thinking_notice: str = "*thinking...*",
    ):
        if max_length <= 0:
            raise ChatwoConfigurationError(
                f"max_length must be positive, got {max_length}"
            )
        if len(thinking_notice) > max_length:
            raise ChatwoConfigurationError(
                f"thinking_notice ({len(thinking_notice)} chars) does not fit "
                f"in max_length {max_length}"
            )
        self._max_length = max_length
        self._think_start = think_start
        self._think_end = think_end
        self._thinking_notice = thinking_notice
        self._state = ThinkingState.NORMAL
        self._buffer: list[str] = []
        self._length = 0
        self._dropped = 0

    @property
    def state(self) -> ThinkingState:
        return self._state

    @property
    def pending_length(self) -> int:
        return self._length

    @property
    def dropped_tokens(self) -> int:
        """Number of tokens suppressed while thinking."""
        return self._dropped

    def push(self, token: str) -> list[str]:
        """Consume one token and return the messages it completes, in order."""
        if token == self._think_start:
            if self._state is ThinkingState.THINKING:
                return []
            # pending text predates the thinking block, so it goes out first
            out = self.flush()
            self._state = ThinkingState.THINKING
            if self._thinking_notice:
                out.append(self._thinking_notice)
            return out
        if token == self._think_end:
            self._state = ThinkingState.NORMAL
            return []
        if self._state is ThinkingState.THINKING:
            self._dropped += 1
            return []
        if not token:
            return []

        self._buffer.append(token)
        self._length += len(token)
        out: list[str] = []
        while self._length > self._max_length:
            chunk = self._cut()
            if chunk.strip():
                out.append(chunk)
        return out

    def flush(self) -> list[str]:
        """Drain all pending text as one final message.

        Whitespace-only text is discarded, a chat channel rejects it.
        """
        drained = self._drain()
        return [drained] if drained.strip() else []

    def _cut(self) -> str:
        text = self._drain()
        newline = text.rfind("\n", 0, self._max_length)
        cut = newline + 1 if newline != -1 else self._max_length
        if not text[:cut].strip():
            cut = self._max_length
        remainder = text[cut:]
        if remainder:
            self._buffer.append(remainder)
            self._length = len(remainder)
        return text[:cut]

    def _drain(self) -> str:
        if not self._buffer:
            return ""
        text = "".join(self._buffer)
        self._buffer.clear()
        self._length = 0
        return text
