"""
HTTP Basic Authenticator
RFC 7617 ``Authorization: Basic`` credentials.
"""

import base64

from ..http.headers import Headers
from .auth_base import Authenticator


class BasicAuthenticator(Authenticator):
    """Always sends the configured username and password."""

    def __init__(self, username: str, password: str):
        self.username = str(username)
        self.password = str(password)
        encoded = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8"))
        self._headers = Headers.of("Authorization", f"Basic {encoded.decode('ascii')}")

    async def authenticate(self, headers: Headers) -> Headers:
        return self._headers

    def __repr__(self) -> str:
        return f"BasicAuthenticator(username={self.username!r})"
