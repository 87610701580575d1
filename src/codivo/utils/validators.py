"""utils/validators.py

Validation utilities for Codivo.
"""


def validate_url(url: str) -> bool:
    """Accept absolute http(s) URLs and absolute paths."""
    return url.startswith(("http://", "https://", "/"))


def has_control_chars(value: str) -> bool:
    """Return True if value contains CR, LF or NUL."""
    return "\r" in value or "\n" in value or "\x00" in value
