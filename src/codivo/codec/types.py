"""src/codivo/codec/types.py

Body type descriptors.

A body type descriptor tells an encoder how to interpret the body value.
Descriptors are ordinary Python types or typing constructs: ``str``,
``bytes``, a dataclass, ``List[int]``... Form-encoded calls use
:data:`FORM_BODY_TYPE`.
"""

from typing import Any, Dict, Mapping

__all__ = [
    "FORM_BODY_TYPE",
    "is_text_type",
    "is_bytes_type",
    "is_form_type",
    "type_name",
]

FORM_BODY_TYPE = Dict[str, Any]
"""Descriptor passed to encoders when form parameters are collected."""

_FORM_TYPES = (FORM_BODY_TYPE, Mapping[str, Any], dict[str, Any])


def is_text_type(body_type: Any) -> bool:
    """True if body_type denotes plain text."""
    return body_type is str


def is_bytes_type(body_type: Any) -> bool:
    """True if body_type denotes a raw byte sequence."""
    return body_type in (bytes, bytearray)


def is_form_type(body_type: Any) -> bool:
    """True if body_type is the form descriptor, a mapping of str to Any."""
    return body_type in _FORM_TYPES


def type_name(body_type: Any) -> str:
    """Readable name of a descriptor, for error messages."""
    if isinstance(body_type, type):
        return body_type.__name__
    return repr(body_type)
