"""
Authenticating Client Slice
Adds credentials to requests and retries once on 401 Unauthorized.
"""

import logging
from http import HTTPStatus

from ..http.content import Body, Content, read_bytes
from ..http.headers import Headers
from ..http.response import Response
from ..http.slice import Slice
from .auth_base import Authenticator

logger = logging.getLogger(__name__)


class AuthClientSlice(Slice):
    """
    Slice augmenting requests with authentication when needed.

    The request body is read into memory once so it can be sent again on
    retry. The first attempt uses pre-emptive credentials; a 401 answer is
    handed to the authenticator, and if it produces new credentials the
    request is sent exactly one more time.
    """

    def __init__(self, origin: Slice, authenticator: Authenticator):
        self.origin = origin
        self.authenticator = authenticator

    async def respond(self, line: str, headers: Headers, body: Body = None) -> Response:
        headers = Headers(headers)
        data = await read_bytes(body)

        first = await self.authenticator.authenticate(Headers.EMPTY)
        logger.debug(f"Sending {line} ({len(first)} pre-emptive auth headers)")
        response = await self.origin.respond(line, headers + first, Content(data))
        if response.status != HTTPStatus.UNAUTHORIZED:
            return response

        try:
            second = await self.authenticator.authenticate(response.headers)
        except BaseException:
            await response.aclose()
            raise
        if not second:
            logger.debug(f"No credentials for challenge on {line}, returning 401")
            return response

        logger.info(f"Authentication required for {line}, retrying with new credentials")
        await response.aclose()
        return await self.origin.respond(line, headers + second, Content(data))
