"""
HTTP Request Line
Parses and formats ``METHOD target HTTP/x.y`` lines.
"""

from dataclasses import dataclass
from typing import Optional


class RequestLineError(ValueError):
    """Raised when a request line cannot be parsed."""


@dataclass(frozen=True)
class RequestLine:
    """Immutable request line. ``uri`` is raw: path plus optional query."""
    method: str
    uri: str
    version: str = "HTTP/1.1"

    @staticmethod
    def parse(line: str) -> "RequestLine":
        """Parse a request line such as ``GET /v2/?n=1 HTTP/1.1``."""
        parts = (line or "").strip().split(" ")
        if len(parts) != 3 or not all(parts):
            raise RequestLineError(f"Invalid request line: {line!r}")
        method, uri, version = parts
        if not version.upper().startswith("HTTP/"):
            raise RequestLineError(f"Invalid HTTP version in request line: {line!r}")
        return RequestLine(method=method.upper(), uri=uri, version=version)

    @staticmethod
    def build(method: str, path: str, query: Optional[str] = None) -> "RequestLine":
        """Build a request line from a raw path and an optional raw query."""
        uri = path or "/"
        if query:
            uri = f"{uri}?{query}"
        return RequestLine(method=method.upper(), uri=uri)

    @property
    def path(self) -> str:
        return self.uri.split("?", 1)[0]

    @property
    def query(self) -> Optional[str]:
        if "?" not in self.uri:
            return None
        return self.uri.split("?", 1)[1]

    def with_uri(self, uri: str) -> "RequestLine":
        return RequestLine(method=self.method, uri=uri, version=self.version)

    def __str__(self) -> str:
        return f"{self.method} {self.uri} {self.version}"
