"""
HTTP Headers
Ordered multimap of header name/value pairs.
"""

from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

HeaderPair = Tuple[str, str]
HeadersLike = Union["Headers", Mapping[str, str], Iterable[HeaderPair], None]


class Headers:
    """
    Immutable ordered sequence of (name, value) pairs.

    Duplicate names are legal and kept in order. Name case is preserved,
    but lookups compare names case-insensitively. Combining two header sets
    with ``+`` concatenates them, it never replaces existing entries.
    """

    EMPTY: "Headers"

    __slots__ = ("_items",)

    def __init__(self, items: HeadersLike = None):
        if items is None:
            pairs: Tuple[HeaderPair, ...] = ()
        elif isinstance(items, Headers):
            pairs = items._items
        elif isinstance(items, Mapping):
            pairs = tuple((str(k), str(v)) for k, v in items.items())
        else:
            pairs = tuple((str(k), str(v)) for k, v in items)
        self._items = pairs

    @classmethod
    def of(cls, name: str, value: str) -> "Headers":
        """Single header."""
        return cls([(name, value)])

    @classmethod
    def from_multi_items(cls, source: Any) -> "Headers":
        """Build from any object exposing ``multi_items()`` (httpx.Headers)."""
        return cls(source.multi_items())

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """First value for ``name`` (case-insensitive)."""
        wanted = name.lower()
        for key, value in self._items:
            if key.lower() == wanted:
                return value
        return default

    def get_all(self, name: str) -> List[str]:
        """All values for ``name`` (case-insensitive), in order."""
        wanted = name.lower()
        return [value for key, value in self._items if key.lower() == wanted]

    def add(self, name: str, value: str) -> "Headers":
        return Headers(self._items + ((name, value),))

    def __add__(self, other: HeadersLike) -> "Headers":
        if not isinstance(other, Headers):
            other = Headers(other)
        if not other._items:
            return self
        if not self._items:
            return other
        return Headers(self._items + other._items)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.get(name) is not None

    def __iter__(self) -> Iterator[HeaderPair]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        # values may carry credentials
        names = ", ".join(key for key, _ in self._items)
        return f"Headers([{names}])"


Headers.EMPTY = Headers()
