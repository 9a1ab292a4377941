"""ConfigStream adapter over a Starlette request body. Reads lazily, never buffers the whole body."""
from __future__ import annotations

from typing import AsyncIterator

from starlette.requests import ClientDisconnect, Request

DEFAULT_CHUNK_SIZE = 64 * 1024


class RequestBodyStream:
    def __init__(self, request: Request, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._request = request
        self._chunks = request.stream()
        self._chunk_size = chunk_size
        self._pending = b""
        self._exhausted = False
        self._disconnected = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def read(self, size: int = -1) -> bytes:
        if self._closed:
            raise ValueError("read from closed stream")

        while not self._exhausted and (size < 0 or len(self._pending) < size):
            try:
                chunk = await self._chunks.__anext__()
            except StopAsyncIteration:
                self._exhausted = True
                break
            except ClientDisconnect:
                self._disconnected = True
                raise
            self._pending += chunk

        if size < 0:
            data, self._pending = self._pending, b""
        else:
            data, self._pending = self._pending[:size], self._pending[size:]
        return data

    async def __aiter__(self) -> AsyncIterator[bytes]:
        while True:
            chunk = await self.read(self._chunk_size)
            if not chunk:
                return
            yield chunk

    async def is_disconnected(self) -> bool:
        if self._disconnected:
            return True
        # Polling the transport consumes a message; while body chunks are pending that would drop them.
        if not self._exhausted:
            return False
        self._disconnected = await self._request.is_disconnected()
        return self._disconnected

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pending = b""
        await self._chunks.aclose()
