"""
httpx Client Slices
Slices that send requests over the network with ``httpx.AsyncClient``.

Connection pooling, TLS, proxies and redirects are left to httpx.
"""

import logging
from typing import Optional

import httpx

from ..http.content import Body, Content, read_bytes
from ..http.headers import Headers
from ..http.request_line import RequestLine
from ..http.response import Response
from ..http.slice import ClientSlices, Slice
from .settings import Settings

logger = logging.getLogger(__name__)


class HttpxClientSlices(ClientSlices):
    """
    Client slices sharing one ``httpx.AsyncClient``.

    Usage:
        async with HttpxClientSlices(Settings(connect_timeout=5)) as slices:
            response = await slices.https("registry-1.docker.io").respond(
                "GET /v2/ HTTP/1.1", Headers.EMPTY
            )

    A client passed in explicitly is not closed by ``aclose()``.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or Settings()
        self._owns_client = client is None
        self.client = client or self._create_client(self.settings)

    @staticmethod
    def _create_client(settings: Settings) -> httpx.AsyncClient:
        proxy = settings.proxy.url if settings.proxy else None
        return httpx.AsyncClient(
            verify=not settings.trust_all,
            proxy=proxy,
            follow_redirects=settings.follow_redirects,
            timeout=settings.httpx_timeout(),
        )

    def http(self, host: str, port: Optional[int] = None) -> Slice:
        return HttpxClientSlice(self.client, False, host, port or self.HTTP_PORT)

    def https(self, host: str, port: Optional[int] = None) -> Slice:
        return HttpxClientSlice(self.client, True, host, port or self.HTTPS_PORT)

    async def aclose(self) -> None:
        """Release connections and stop requests in progress."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HttpxClientSlices":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


class HttpxClientSlice(Slice):
    """Slice bound to one origin (scheme, host, port)."""

    def __init__(self, client: httpx.AsyncClient, secure: bool, host: str, port: int):
        self.client = client
        self.secure = secure
        self.host = host
        self.port = port

    def url(self, uri: str) -> str:
        scheme = "https" if self.secure else "http"
        host = f"[{self.host}]" if ":" in self.host else self.host
        if not uri.startswith("/"):
            uri = "/" + uri
        return f"{scheme}://{host}:{self.port}{uri}"

    async def respond(self, line: str, headers: Headers, body: Body = None) -> Response:
        request_line = RequestLine.parse(line)
        content = await read_bytes(body)
        request = self.client.build_request(
            request_line.method,
            self.url(request_line.uri),
            headers=list(Headers(headers)),
            content=content or None,
        )
        logger.debug(f"{request.method} {request.url}")

        response = await self.client.send(request, stream=True)
        logger.debug(f"Response: {response.status_code} from {self.host}:{self.port}")
        return Response(
            status=response.status_code,
            headers=Headers.from_multi_items(response.headers),
            body=Content(response.aiter_bytes(), on_close=response.aclose),
        )
