from chatwo.errors import ChatwoConfigurationError

TRUNCATION_MARKER = "..."
SAFETY_MARGIN = 10


class ForcedSplitter:
    """Slices text with no usable boundary into fixed-size windows.

    Every window except the last carries the truncation marker, so a reader
    can tell the cut was not a natural break.
    """

    __slots__ = ("_marker", "_window")

    def __init__(
        self,
        max_length: int,
        *,
        marker: str = TRUNCATION_MARKER,
        margin: int = SAFETY_MARGIN,
    ):
        if max_length <= len(marker):
            raise ChatwoConfigurationError(
                f"max_length must exceed the truncation marker length "
                f"({len(marker)}), got {max_length}"
            )
        if margin < len(marker) or max_length - margin < 1:
            margin = len(marker)
        self._marker = marker
        self._window = max_length - margin

    @property
    def window(self) -> int:
        return self._window

    def split(self, text: str) -> list[str]:
        text = text.strip()
        chunks: list[str] = []
        for start in range(0, len(text), self._window):
            end = start + self._window
            piece = text[start:end].strip()
            if not piece:
                continue
            if end < len(text):
                piece += self._marker
            chunks.append(piece)
        return chunks
