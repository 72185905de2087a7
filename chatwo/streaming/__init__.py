from .buffer import OnlineTokenBuffer as OnlineTokenBuffer
from .buffer import ThinkingState as ThinkingState
from .runner import run_online_buffer as run_online_buffer
from .sources import openai_tokens as openai_tokens
