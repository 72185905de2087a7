from .assembler import ChunkAssembler as ChunkAssembler
from .assembler import segment_text as segment_text
from .delimiters import DEFAULT_DELIMITERS as DEFAULT_DELIMITERS
from .delimiters import Delimiter as Delimiter
from .delimiters import Segment as Segment
from .delimiters import cascade as cascade
from .splitter import TRUNCATION_MARKER as TRUNCATION_MARKER
from .splitter import ForcedSplitter as ForcedSplitter
