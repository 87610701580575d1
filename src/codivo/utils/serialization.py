"""utils/serialization.py

Serialization utilities for Codivo (JSON, form-urlencode).
"""

import collections.abc
import dataclasses
import json
import urllib.parse
from typing import Any, Dict, List, Mapping, Optional, Tuple


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(data: Any, **kwargs: Any) -> str:
    """Serializes data to a JSON string. Dataclass instances become objects."""
    return json.dumps(data, default=_default, **kwargs)


def _form_value(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (collections.abc.Mapping, list, tuple, set)):
        raise TypeError(
            f"Form field {key!r} cannot hold a nested {type(value).__name__}"
        )
    return str(value)


def form_pairs(data: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten a form mapping into ordered key/value pairs.

    ``None`` values are dropped, list/tuple values expand into one pair per
    item and booleans render as ``true``/``false``. Nested mappings or
    sequences raise ``TypeError``.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend(
                (key, _form_value(key, item)) for item in value if item is not None
            )
        else:
            pairs.append((key, _form_value(key, value)))
    return pairs


def to_form_urlencoded(data: Mapping[str, Any], encoding: str = "utf-8") -> str:
    """Serializes a mapping to an application/x-www-form-urlencoded string."""
    return urllib.parse.urlencode(form_pairs(data), encoding=encoding)


def to_query_string(params: Dict[str, List[Optional[str]]]) -> str:
    """
    Render query parameters.

    A ``None`` value renders as a bare key (``?flag``).
    """
    parts = []
    for key, values in params.items():
        name = urllib.parse.quote(key, safe="")
        for value in values:
            if value is None:
                parts.append(name)
            else:
                parts.append(f"{name}={urllib.parse.quote(value, safe='')}")
    return "&".join(parts)
