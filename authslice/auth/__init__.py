"""
Authentication: authenticators, challenge parsing and the retrying slice.
"""

from .auth_base import ANONYMOUS, AnonymousAuthenticator, Authenticator, StaticHeadersAuthenticator
from .basic_auth import BasicAuthenticator
from .bearer_auth import BearerAuthenticator
from .challenge import (
    Challenge,
    ChallengeParseError,
    RealmTarget,
    find_bearer_challenge,
    parse_challenge,
)
from .token_format import FormTokenFormat, OAuthTokenFormat, TokenFormat, TokenFormatError
from .auth_slice import AuthClientSlice

__all__ = [
    # Authenticators
    "Authenticator",
    "AnonymousAuthenticator",
    "ANONYMOUS",
    "StaticHeadersAuthenticator",
    "BasicAuthenticator",
    "BearerAuthenticator",

    # Challenges
    "Challenge",
    "ChallengeParseError",
    "RealmTarget",
    "parse_challenge",
    "find_bearer_challenge",

    # Token formats
    "TokenFormat",
    "OAuthTokenFormat",
    "FormTokenFormat",
    "TokenFormatError",

    # Slice
    "AuthClientSlice",
]
