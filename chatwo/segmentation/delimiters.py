"""Delimiter cascade: refine text into segments, coarse boundaries first."""

import re
from typing import Iterable

from chatwo.interface import Record


class Segment(Record):
    """A contiguous slice of the source text."""

    text: str
    """Slice content, including the boundary characters that end it."""

    boundary: str | None = None
    """Name of the delimiter that ended the slice, None for an unterminated tail."""


class Delimiter(Record):
    """A boundary pattern and its place in the cascade."""

    name: str
    """Tag given to segments this delimiter terminates."""

    pattern: str
    """Regular expression matching one boundary occurrence."""

    priority: int
    """Lower runs earlier; earlier passes denote stronger separation."""

    def split(self, segment: Segment) -> list[Segment]:
        """Subdivide ``segment`` after every boundary match.

        The matched characters stay with the piece they end, so the pieces
        concatenate back to ``segment.text``. The last piece inherits the
        parent's boundary when the parent had one.
        """
        text = segment.text
        pieces: list[Segment] = []
        start = 0
        for match in re.finditer(self.pattern, text):
            end = match.end()
            if end > start:
                pieces.append(Segment(text=text[start:end], boundary=self.name))
                start = end
        if start < len(text):
            pieces.append(Segment(text=text[start:], boundary=segment.boundary))
        elif pieces and segment.boundary is not None:
            last = pieces[-1]
            pieces[-1] = Segment(text=last.text, boundary=segment.boundary)
        return pieces


DEFAULT_DELIMITERS: tuple[Delimiter, ...] = (
    Delimiter(name="paragraph", pattern=r"\n\n", priority=0),
    Delimiter(name="line", pattern=r"\n", priority=1),
    Delimiter(name="cjk_sentence", pattern=r"[。！？]", priority=2),
    Delimiter(name="sentence", pattern=r"[.!?]", priority=3),
    Delimiter(name="cjk_clause", pattern=r"[，；：、]", priority=4),
    Delimiter(name="clause", pattern=r"[,;:]", priority=5),
    Delimiter(name="space", pattern=r" ", priority=6),
)


def cascade(
    text: str, delimiters: Iterable[Delimiter] = DEFAULT_DELIMITERS
) -> list[Segment]:
    """Split ``text`` into ordered segments, applying delimiters by priority."""
    if not text:
        return []
    segments = [Segment(text=text)]
    for delimiter in sorted(delimiters, key=lambda d: d.priority):
        segments = [
            piece
            for segment in segments
            for piece in delimiter.split(segment)
            if piece.text
        ]
    return segments
