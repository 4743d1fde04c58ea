"""
Authentication Base Classes
Authenticator interface and trivial implementations.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..http.headers import Headers


class Authenticator(ABC):
    """Abstract base class for authenticators."""

    @abstractmethod
    async def authenticate(self, headers: Headers) -> Headers:
        """
        Produce headers for the next request attempt.

        Args:
            headers: Headers of the previous response, or ``Headers.EMPTY``
                for the pre-emptive attempt

        Returns:
            Headers to add to the request. Empty headers mean no
            further authentication is possible.
        """
        raise NotImplementedError


class AnonymousAuthenticator(Authenticator):
    """Never produces credentials."""

    async def authenticate(self, headers: Headers) -> Headers:
        return Headers.EMPTY

    def __repr__(self) -> str:
        return "AnonymousAuthenticator()"


ANONYMOUS = AnonymousAuthenticator()


class StaticHeadersAuthenticator(Authenticator):
    """Static headers authentication (API keys)."""

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        self._headers = Headers(dict(headers or {}))

    async def authenticate(self, headers: Headers) -> Headers:
        return self._headers
