class ChatwoError(Exception):
    """Base exception class for chatwo errors."""


class ChatwoConfigurationError(ChatwoError):
    """Raised when chatwo is misconfigured, e.g. a ceiling out of range."""


__all__ = [
    "ChatwoError",
    "ChatwoConfigurationError",
]
