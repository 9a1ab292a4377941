"""Port: the raw configuration payload handed to processors."""
from __future__ import annotations

from typing import AsyncIterator, Protocol


class ConfigStream(Protocol):
    """Readable, closable byte stream over the request body.

    The stream is read once. Every processor receives the same stream, so a
    processor that drains it leaves nothing for the processors after it.
    Reads after exhaustion return b""; reads after close() raise ValueError.
    """

    @property
    def closed(self) -> bool: ...

    async def read(self, size: int = -1) -> bytes: ...

    def __aiter__(self) -> AsyncIterator[bytes]: ...

    async def close(self) -> None: ...
