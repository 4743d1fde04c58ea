"""
Request/Response Content
Async byte streams and in-memory buffering.

Buffering reads the whole stream into memory. It is meant for request
bodies that have to be replayed and is not suitable for large payloads.
"""

import inspect
from typing import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable, Optional, Union

ByteChunks = Union[AsyncIterable[bytes], Iterable[bytes]]
Body = Union["Content", bytes, bytearray, memoryview, ByteChunks, None]


class Content:
    """
    Async iterable body.

    Built from bytes the content is replayable. Built from a chunk iterator
    it can be consumed once; ``on_close`` runs when the stream is exhausted
    or closed explicitly, whichever happens first.
    """

    def __init__(
        self,
        source: Union[bytes, bytearray, memoryview, ByteChunks, None] = None,
        on_close: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        if source is None:
            source = b""
        if isinstance(source, (bytearray, memoryview)):
            source = bytes(source)
        self._source = source
        self._on_close = on_close
        self._closed = False

    @property
    def replayable(self) -> bool:
        return isinstance(self._source, bytes)

    async def __aiter__(self) -> AsyncIterator[bytes]:
        try:
            if isinstance(self._source, bytes):
                if self._source:
                    yield self._source
            elif hasattr(self._source, "__aiter__"):
                async for chunk in self._source:
                    yield bytes(chunk)
            else:
                for chunk in self._source:
                    yield bytes(chunk)
        finally:
            if not self.replayable:
                await self.aclose()

    async def read(self) -> bytes:
        """Read all remaining bytes into memory."""
        if isinstance(self._source, bytes):
            return self._source
        chunks = [chunk async for chunk in self]
        return b"".join(chunks)

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._on_close is not None:
            result = self._on_close()
            if inspect.isawaitable(result):
                await result


async def read_bytes(body: Body) -> bytes:
    """Drain any supported body into a single ``bytes`` object."""
    if body is None:
        return b""
    if isinstance(body, bytes):
        return body
    if isinstance(body, (bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, Content):
        return await body.read()
    return await Content(body).read()
