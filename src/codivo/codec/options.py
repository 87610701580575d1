"""codec/options.py

JSON encoding configuration.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class JsonOptions:
    """
    Options forwarded to :func:`json.dumps`.

    Attributes:
        ensure_ascii: Escape non-ASCII characters.
        sort_keys: Sort object keys.
        indent: Pretty-print indentation, None for a single line.
        separators: ``(item, key)`` separators, None for the json default.
        allow_nan: Allow NaN and Infinity; if False they fail encoding.
    """

    ensure_ascii: bool = False
    sort_keys: bool = False
    indent: Optional[int] = None
    separators: Optional[Tuple[str, str]] = None
    allow_nan: bool = True

    @classmethod
    def compact(cls) -> "JsonOptions":
        """Options producing the smallest output."""
        return cls(separators=(",", ":"))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "JsonOptions":
        """Create options from a mapping, rejecting unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"Unknown JSON options: {', '.join(unknown)}")
        values = dict(mapping)
        if values.get("separators") is not None:
            values["separators"] = tuple(values["separators"])
        return cls(**values)

    def as_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`json.dumps`."""
        return dataclasses.asdict(self)
