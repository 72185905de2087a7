from typing import Iterable

from chatwo.errors import ChatwoConfigurationError
from chatwo.interface import ILogger
from chatwo.log import get_logger

from .delimiters import DEFAULT_DELIMITERS, Delimiter, Segment, cascade
from .splitter import ForcedSplitter


class ChunkAssembler:
    """Greedily packs segments into chunks no longer than ``max_length``.

    Packing favours natural boundaries over optimal fill: a segment that does
    not fit closes the running chunk. Segments that alone exceed the ceiling
    go through the forced splitter, which is logged as a lossy truncation.
    """

    def __init__(
        self,
        max_length: int,
        *,
        splitter: ForcedSplitter | None = None,
        logger: ILogger | None = None,
    ):
        if max_length <= 0:
            raise ChatwoConfigurationError(
                f"max_length must be positive, got {max_length}"
            )
        self._max_length = max_length
        self._splitter = splitter or ForcedSplitter(max_length)
        self._logger = logger or get_logger("assembler")

    def assemble(self, segments: Iterable[Segment]) -> list[str]:
        chunks: list[str] = []
        current = ""

        for segment in segments:
            text = segment.text
            if len(text) > self._max_length:
                self._emit(chunks, current)
                current = ""
                forced = self._splitter.split(text)
                self._logger.warning(
                    f"Forced split of a {len(text)}-char segment "
                    f"(boundary={segment.boundary}) into {len(forced)} chunks"
                )
                chunks.extend(forced)
            elif len(current) + len(text) > self._max_length:
                self._emit(chunks, current)
                current = text
            else:
                current += text

        self._emit(chunks, current)
        return chunks

    @staticmethod
    def _emit(chunks: list[str], text: str) -> None:
        chunk = text.strip()
        if chunk:
            chunks.append(chunk)


def segment_text(
    text: str,
    max_length: int,
    *,
    delimiters: Iterable[Delimiter] = DEFAULT_DELIMITERS,
    logger: ILogger | None = None,
) -> list[str]:
    """Split ``text`` into chunks of at most ``max_length`` characters.

    Breaks at the strongest available boundary (paragraph, line, sentence,
    clause, word) and falls back to fixed windows with a truncation marker
    only for runs that contain no boundary at all.
    """
    assembler = ChunkAssembler(max_length, logger=logger)
    return assembler.assemble(cascade(text, delimiters))
