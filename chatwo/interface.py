from typing import Any, AsyncIterable, Awaitable, Callable, Protocol, TypeAlias

from msgspec import Struct
from msgspec.structs import asdict
from typing_extensions import dataclass_transform


@dataclass_transform(frozen_default=True)
class Record(Struct, frozen=True, kw_only=True):
    def asdict(self) -> dict[str, Any]:
        return asdict(self)


class ILogger(Protocol):
    def debug(self, msg: str, /, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, /, *args: Any, **kwargs: Any) -> None: ...

    def success(self, msg: str, /, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, /, *args: Any, **kwargs: Any) -> None: ...

    def exception(self, msg: str, /, *args: Any, **kwargs: Any) -> None: ...


Sink: TypeAlias = Callable[[str], Awaitable[None] | None]
"""Receives one finished chunk of text per call, in delivery order."""

TokenSource: TypeAlias = AsyncIterable[str]
