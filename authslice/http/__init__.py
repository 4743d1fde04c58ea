"""
HTTP primitives: headers, request lines, bodies, responses and slices.
"""

from .headers import Headers
from .request_line import RequestLine, RequestLineError
from .content import Body, Content, read_bytes
from .response import Response
from .slice import ClientSlices, Slice

__all__ = [
    "Headers",
    "RequestLine",
    "RequestLineError",
    "Body",
    "Content",
    "read_bytes",
    "Response",
    "Slice",
    "ClientSlices",
]
