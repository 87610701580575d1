"""src/codivo/http/headers.py

Mutable HTTP header store for request templates.
"""

from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, Union

__all__ = ["Headers"]


class Headers(MutableMapping[str, str]):
    """
    Case-insensitive dictionary for HTTP headers with support for multiple values.

    Behaves like a dictionary where values are strings; multiple values are
    joined by commas. Access raw lists via get_all(). The first spelling of
    a header name is kept for rendering.
    """

    __slots__ = ("_headers", "_names")

    def __init__(self, headers: Optional[Dict[str, Union[str, List[str]]]] = None):
        self._headers: Dict[str, List[str]] = {}
        self._names: Dict[str, str] = {}
        if headers:
            for k, v in headers.items():
                if isinstance(v, list):
                    self.add(k, *v)
                else:
                    self.add(k, v)

    def __getitem__(self, key: str) -> str:
        """Get header value (comma-joined if multiple)."""
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if key.lower() not in self._headers:
            raise KeyError(key)
        self.remove(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._headers)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get header value.

        Args:
            key: Header name (case-insensitive).
            default: Default value if header not found.

        Returns:
            Comma-joined string for multiple values, or default if not found.
        """
        values = self._headers.get(key.lower())
        if not values:
            return default
        return ", ".join(values)

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a header.

        Args:
            key: Header name (case-insensitive).

        Returns:
            List of all values for the header, empty list if not found.
        """
        return list(self._headers.get(key.lower(), []))

    def add(self, key: str, *values: str) -> None:
        """Append values to a header, creating it if needed."""
        if not values:
            return
        lower = key.lower()
        self._names.setdefault(lower, key)
        self._headers.setdefault(lower, []).extend(values)

    def set(self, key: str, *values: str) -> None:
        """Replace all values of a header."""
        self.remove(key)
        self.add(key, *values)

    def remove(self, key: str) -> None:
        """Remove a header. Missing headers are ignored."""
        lower = key.lower()
        self._headers.pop(lower, None)
        self._names.pop(lower, None)

    def items_raw(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(name, value)`` pairs, one per value, in insertion order."""
        for lower, values in self._headers.items():
            name = self._names[lower]
            for value in values:
                yield name, value

    def copy(self) -> "Headers":
        """Return an independent copy."""
        clone = Headers()
        for name, value in self.items_raw():
            clone.add(name, value)
        return clone
