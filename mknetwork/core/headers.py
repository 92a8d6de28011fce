"""
MKNETWORK - Header Collection

Ordered header collection with case-insensitive name uniqueness.
Updating an existing name rewrites its value in place; new names are appended.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Union

from mknetwork.core.types import HTTPHeader


class HTTPHeaders:
    """
    Ordered, case-insensitive set of HTTP headers.

    No two entries share a name that is equal ignoring case. add() and
    update() behave identically: a duplicate name silently overwrites the
    earlier value while keeping the earlier position and casing.
    """

    def __init__(
        self,
        headers: Union[Iterable[HTTPHeader], Mapping[str, str], None] = None,
    ):
        """
        Create a collection, optionally from a list of headers or a dict.

        Entries are applied left to right through update(), so later
        duplicates overwrite earlier values.

        Args:
            headers: Initial headers, either HTTPHeader items or a name->value mapping
        """
        self._headers: List[HTTPHeader] = []

        if headers is None:
            return
        if isinstance(headers, Mapping):
            for name, value in headers.items():
                self.update(name, value)
        else:
            for header in headers:
                self.update(header)

    def _index(self, name: str) -> Optional[int]:
        lowered = name.lower()
        for index, header in enumerate(self._headers):
            if header.name.lower() == lowered:
                return index
        return None

    def add(self, name: Union[str, HTTPHeader], value: Optional[str] = None) -> None:
        """Add a header. Same as update(); duplicates overwrite."""
        self.update(name, value)

    def update(self, name: Union[str, HTTPHeader], value: Optional[str] = None) -> None:
        """
        Set a header value, matching the name case-insensitively.

        Accepts either an HTTPHeader or a name and value. An existing entry
        keeps its position and name casing; a new entry is appended.
        """
        if isinstance(name, HTTPHeader):
            header = name
        else:
            if value is None:
                raise TypeError("update() requires a value when given a header name")
            header = HTTPHeader(name=name, value=value)

        index = self._index(header.name)
        if index is None:
            self._headers.append(header)
            return
        existing = self._headers[index]
        self._headers[index] = HTTPHeader(name=existing.name, value=header.value)

    def remove(self, name: str) -> None:
        """Remove a header by name. Missing names are ignored."""
        index = self._index(name)
        if index is not None:
            del self._headers[index]

    def sort(self) -> None:
        """Sort headers by name, case-insensitively. Stable for equal names."""
        self._headers.sort(key=lambda header: header.name.lower())

    def value(self, name: str) -> Optional[str]:
        """Find a header's value by name, or None."""
        index = self._index(name)
        if index is None:
            return None
        return self._headers[index].value

    def to_dict(self) -> Dict[str, str]:
        """All headers as a plain dict, keyed by the stored name casing."""
        flattened: Dict[str, str] = {}
        for header in self._headers:
            flattened[header.name] = header.value
        return flattened

    def __getitem__(self, name: str) -> Optional[str]:
        return self.value(name)

    def __setitem__(self, name: str, value: Optional[str]) -> None:
        if value is None:
            self.remove(name)
        else:
            self.update(name, value)

    def __delitem__(self, name: str) -> None:
        self.remove(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._index(name) is not None

    def __iter__(self) -> Iterator[HTTPHeader]:
        return iter(list(self._headers))

    def __len__(self) -> int:
        return len(self._headers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HTTPHeaders):
            return NotImplemented
        return self._headers == other._headers

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"HTTPHeaders({self._headers!r})"

    def __str__(self) -> str:
        return "\n".join(str(header) for header in self._headers)
