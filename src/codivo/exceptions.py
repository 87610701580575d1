"""src/codivo/exceptions.py

Codivo Exceptions hierarchy.
"""

from typing import Any, Optional


class CodivoError(Exception):
    """Base exception for all Codivo errors."""


class EncodeError(CodivoError):
    """
    A value could not be converted to the required request body representation.

    Raised by encoders when the value does not fit the target body type, or
    when the underlying serializer fails. The serializer error, if any, is
    available as ``__cause__``.

    Attributes:
        value_type: Runtime type of the value that failed to encode.
        body_type: Body type descriptor the value was encoded as.
    """

    def __init__(
        self,
        message: str,
        *,
        value_type: Optional[type] = None,
        body_type: Any = None,
    ):
        super().__init__(message)
        self.value_type = value_type
        self.body_type = body_type
