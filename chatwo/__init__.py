"""
chatwo - fit streamed and complete model replies into chat-sized messages.
"""

__version__ = "0.1.0"

from .config import ChatwoSettings as ChatwoSettings
from .config import load_settings as load_settings
from .delivery import ReplyDispatcher as ReplyDispatcher
from .segmentation import segment_text as segment_text
from .streaming import OnlineTokenBuffer as OnlineTokenBuffer
from .streaming import run_online_buffer as run_online_buffer
