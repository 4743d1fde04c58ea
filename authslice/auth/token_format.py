"""
Token Formats
Extract an access token from a token endpoint response body.
"""

import json
from abc import ABC, abstractmethod
from urllib.parse import parse_qs


class TokenFormatError(ValueError):
    """Raised when a token response cannot be parsed."""


class TokenFormat(ABC):
    """Abstract base class for token response formats."""

    @abstractmethod
    def token(self, content: bytes) -> str:
        """Extract the token string from a raw response body."""
        raise NotImplementedError


class OAuthTokenFormat(TokenFormat):
    """
    JSON access token response (RFC 6750 §4).

    Example:
        {"access_token": "mF_9.B5f-4.1JqM", "token_type": "Bearer"}
    """

    def __init__(self, field: str = "access_token"):
        self.field = field

    def token(self, content: bytes) -> str:
        try:
            data = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TokenFormatError(f"Token endpoint returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise TokenFormatError("Token endpoint returned non-JSON object")

        value = data.get(self.field)
        if not isinstance(value, str):
            raise TokenFormatError(f"Response missing {self.field}")
        return value


class FormTokenFormat(TokenFormat):
    """Form encoded token response, e.g. ``access_token=abc&expires_in=60``."""

    def __init__(self, field: str = "access_token"):
        self.field = field

    def token(self, content: bytes) -> str:
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TokenFormatError(f"Token endpoint returned non UTF-8 body: {e}") from e

        values = parse_qs(text.strip(), keep_blank_values=True).get(self.field)
        if not values:
            raise TokenFormatError(f"Response missing {self.field}")
        return values[0]
