"""
Slice Base Classes
Request handling interfaces shared by transports and decorators.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .content import Body
from .headers import Headers
from .response import Response


class Slice(ABC):
    """A unit that accepts a request and produces a response."""

    @abstractmethod
    async def respond(self, line: str, headers: Headers, body: Body = None) -> Response:
        """
        Handle one request.

        Args:
            line: Request line, e.g. ``GET /path?q=1 HTTP/1.1``
            headers: Request headers
            body: Request body

        Returns:
            Response with a streamed body
        """
        raise NotImplementedError


class ClientSlices(ABC):
    """Factory of slices bound to a remote origin."""

    HTTP_PORT = 80
    HTTPS_PORT = 443

    @abstractmethod
    def http(self, host: str, port: Optional[int] = None) -> Slice:
        """Slice sending requests over plain HTTP."""
        raise NotImplementedError

    @abstractmethod
    def https(self, host: str, port: Optional[int] = None) -> Slice:
        """Slice sending requests over HTTPS."""
        raise NotImplementedError
