"""
HTTP Response
Status, headers and a streamed body.
"""

from dataclasses import dataclass, field

from .content import Content
from .headers import Headers


@dataclass
class Response:
    """Response returned by a slice."""
    status: int
    headers: Headers = field(default_factory=lambda: Headers.EMPTY)
    body: Content = field(default_factory=Content)

    async def read(self) -> bytes:
        """Read the whole body into memory."""
        return await self.body.read()

    async def aclose(self) -> None:
        """Release the body without reading it."""
        await self.body.aclose()
