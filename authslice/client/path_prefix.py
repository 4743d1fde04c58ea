"""
Path Prefix Slice
Prepends a fixed path to every request before passing it on.
"""

from ..http.content import Body
from ..http.headers import Headers
from ..http.request_line import RequestLine
from ..http.response import Response
from ..http.slice import Slice


class PathPrefixSlice(Slice):
    """
    Slice adding a prefix to the request path.

    Method, query, headers and body are passed through unchanged.

    Example:
        PathPrefixSlice(origin, "/my/repo") turns
        ``GET /123/file.txt?p=1 HTTP/1.1`` into
        ``GET /my/repo/123/file.txt?p=1 HTTP/1.1``
    """

    def __init__(self, origin: Slice, prefix: str):
        self.origin = origin
        self.prefix = prefix.rstrip("/")

    async def respond(self, line: str, headers: Headers, body: Body = None) -> Response:
        request_line = RequestLine.parse(line)
        uri = self.prefix + request_line.path
        if request_line.query is not None:
            uri = f"{uri}?{request_line.query}"
        return await self.origin.respond(str(request_line.with_uri(uri)), headers, body)
