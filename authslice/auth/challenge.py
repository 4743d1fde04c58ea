"""
WWW-Authenticate Challenge Parsing
Handles ``<scheme> key="value",key2="value2"`` challenges (RFC 7235).

Parameters are split on commas outside double quotes, so quoted values
may contain commas. Quoted values support backslash quoted-pairs.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple
from urllib.parse import quote, unquote, urlsplit

from ..http.headers import Headers
from ..http.request_line import RequestLine

logger = logging.getLogger(__name__)

WWW_AUTHENTICATE = "WWW-Authenticate"

# Characters left as-is when re-encoding a value for a query component.
# '&', '=', '+' and '#' are always escaped.
_QUERY_SAFE = "/:@!$'()*,;-._~"

_QUOTED_PAIR = re.compile(r"\\(.)")
_TOKEN = re.compile(r"[!#$%&'*+.^_`|~0-9A-Za-z-]+")


class ChallengeParseError(ValueError):
    """Raised when a WWW-Authenticate value is malformed."""


@dataclass(frozen=True)
class RealmTarget:
    """Where and how to request a token for a challenge."""
    secure: bool
    host: str
    port: Optional[int]
    path: str
    query: str

    def request_line(self, method: str = "GET") -> str:
        return str(RequestLine.build(method, self.path, self.query))


@dataclass(frozen=True)
class Challenge:
    """Parsed authentication challenge."""
    scheme: str
    params: Tuple[Tuple[str, str], ...] = ()

    def param(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.params:
            if key.lower() == wanted:
                return value
        return None

    @property
    def realm(self) -> Optional[str]:
        return self.param("realm")

    def query(self) -> str:
        """Non-realm parameters as an encoded query string, in declaration order."""
        pairs = []
        for key, value in self.params:
            if key.lower() == "realm":
                continue
            pairs.append(f"{quote(key, safe=_QUERY_SAFE)}={quote(unquote(value), safe=_QUERY_SAFE)}")
        return "&".join(pairs)

    def realm_target(self) -> RealmTarget:
        """
        Resolve the realm URI into a token request target.

        Raises:
            ChallengeParseError: realm missing or not an absolute http(s) URI
        """
        realm = self.realm
        if not realm:
            raise ChallengeParseError(f"{self.scheme} challenge has no realm")

        parts = urlsplit(realm)
        scheme = parts.scheme.lower()
        if scheme not in ("http", "https") or not parts.hostname:
            raise ChallengeParseError(f"Realm is not an absolute http(s) URI: {realm!r}")
        try:
            port = parts.port
        except ValueError as e:
            raise ChallengeParseError(f"Realm has invalid port: {realm!r}") from e

        query = "&".join(q for q in (parts.query, self.query()) if q)
        return RealmTarget(
            secure=scheme == "https",
            host=parts.hostname,
            port=port,
            path=parts.path or "/",
            query=query,
        )


def _split_elements(text: str) -> List[str]:
    """Split on commas that are not inside a quoted string."""
    elements: List[str] = []
    current: List[str] = []
    quoted = False
    escaped = False
    for ch in text:
        if escaped:
            escaped = False
        elif quoted and ch == "\\":
            escaped = True
        elif ch == '"':
            quoted = not quoted
        elif ch == "," and not quoted:
            elements.append("".join(current))
            current = []
            continue
        current.append(ch)
    if quoted:
        raise ChallengeParseError(f"Unterminated quoted string in challenge: {text!r}")
    elements.append("".join(current))
    return [e.strip() for e in elements if e.strip()]


def _parse_param(element: str) -> Tuple[str, str]:
    if "=" not in element:
        raise ChallengeParseError(f"Challenge parameter without value: {element!r}")
    key, raw = element.split("=", 1)
    key = key.strip()
    raw = raw.strip()
    if not key:
        raise ChallengeParseError(f"Challenge parameter without name: {element!r}")
    if not _TOKEN.fullmatch(key):
        raise ChallengeParseError(f"Invalid challenge parameter name: {key!r}")
    if raw.startswith('"'):
        if len(raw) < 2 or not raw.endswith('"'):
            raise ChallengeParseError(f"Malformed quoted value: {element!r}")
        raw = _QUOTED_PAIR.sub(r"\1", raw[1:-1])
    return key, raw


def parse_challenge(value: str) -> Challenge:
    """
    Parse a single WWW-Authenticate header value.

    Example:
        >>> parse_challenge('Bearer realm="https://auth.io/token",service="registry"')
        Challenge(scheme='Bearer', params=(('realm', 'https://auth.io/token'), ('service', 'registry')))
    """
    text = (value or "").strip()
    if not text:
        raise ChallengeParseError("Empty WWW-Authenticate value")

    pieces = text.split(None, 1)
    scheme = pieces[0]
    rest = pieces[1] if len(pieces) > 1 else ""
    params = tuple(_parse_param(element) for element in _split_elements(rest))
    return Challenge(scheme=scheme, params=params)


def find_bearer_challenge(headers: Headers) -> Optional[Challenge]:
    """First parseable Bearer challenge in ``headers``, if any."""
    for value in headers.get_all(WWW_AUTHENTICATE):
        text = value.strip()
        if not text or text.split(None, 1)[0].lower() != "bearer":
            continue
        try:
            return parse_challenge(text)
        except ChallengeParseError as e:
            logger.debug(f"Ignoring malformed Bearer challenge: {e}")
    return None
