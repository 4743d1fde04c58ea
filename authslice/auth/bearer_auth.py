"""
Bearer Token Authenticator
Answers ``WWW-Authenticate: Bearer`` challenges by fetching a token from the realm.

Token exchange:
    1. 401 response carries
       WWW-Authenticate: Bearer realm="https://auth.example.com/token",service="registry"
    2. GET https://auth.example.com/token?service=registry
       → {"access_token": "..."}
    3. Retry carries
       Authorization: Bearer ...

Tokens are fetched for every challenge; nothing is cached.
"""

import logging

from ..http.content import read_bytes
from ..http.headers import Headers
from ..http.slice import ClientSlices
from .auth_base import ANONYMOUS, Authenticator
from .challenge import ChallengeParseError, find_bearer_challenge
from .token_format import TokenFormat

logger = logging.getLogger(__name__)


class BearerAuthenticator(Authenticator):
    """
    Bearer authenticator backed by a token realm.

    Args:
        slices: Client slices used to reach the realm
        token_format: Extracts the token from the realm response body
        fallback: Used when the headers carry no usable Bearer challenge
        realm_authenticator: Authenticates the token request itself
            (e.g. Basic credentials for a registry token service)
    """

    def __init__(
        self,
        slices: ClientSlices,
        token_format: TokenFormat,
        fallback: Authenticator = ANONYMOUS,
        realm_authenticator: Authenticator = ANONYMOUS,
    ):
        self.slices = slices
        self.token_format = token_format
        self.fallback = fallback
        self.realm_authenticator = realm_authenticator

    async def authenticate(self, headers: Headers) -> Headers:
        challenge = find_bearer_challenge(headers)
        if challenge is None:
            return await self.fallback.authenticate(headers)

        try:
            target = challenge.realm_target()
        except ChallengeParseError as e:
            logger.debug(f"Unusable Bearer challenge, using fallback: {e}")
            return await self.fallback.authenticate(headers)

        if target.secure:
            realm = self.slices.https(target.host, target.port)
        else:
            realm = self.slices.http(target.host, target.port)

        line = target.request_line("GET")
        logger.debug(f"Requesting token: {line} (host={target.host}, secure={target.secure})")

        credentials = await self.realm_authenticator.authenticate(Headers.EMPTY)
        response = await realm.respond(line, credentials, None)
        if not 200 <= response.status < 300:
            logger.warning(f"Token realm {target.host} answered {response.status}")
        content = await read_bytes(response.body)

        token = self.token_format.token(content)
        return Headers.of("Authorization", f"Bearer {token}")
