"""src/codivo/codec/encoder.py

Request body encoders.

An :class:`Encoder` turns a method-call argument into the body of a
:class:`~codivo.http.template.RequestTemplate`. It is used when an argument
is the request body rather than a named parameter. When form parameters are
present they are collected into a ``Dict[str, Any]`` and passed to the
encoder with :data:`~codivo.codec.types.FORM_BODY_TYPE`.

Example implementation::

    class JsonEncoder(Encoder):
        def encode(self, value, body_type, template):
            template.set_body(json.dumps(value))
"""

import abc
import logging
from typing import Any

from codivo.codec.types import is_bytes_type, is_text_type, type_name
from codivo.exceptions import EncodeError
from codivo.http.template import DEFAULT_CHARSET, RequestTemplate

__all__ = ["Encoder", "DefaultEncoder"]

logger = logging.getLogger(__name__)


class Encoder(abc.ABC):
    """Converts objects to an appropriate body representation in a template."""

    __slots__ = ()

    @abc.abstractmethod
    def encode(self, value: Any, body_type: Any, template: RequestTemplate) -> None:
        """
        Populate the template body from value.

        Args:
            value: What to encode as the request body. May be None.
            body_type: The type the value should be encoded as.
                ``Dict[str, Any]`` when form encoding.
            template: The request template to populate.

        Raises:
            EncodeError: When the value cannot be encoded.
        """
        raise NotImplementedError()


class DefaultEncoder(Encoder):
    """
    Encodes text and raw bytes; leaves the body unset for None.

    Any other non-None value raises :class:`EncodeError`.
    """

    __slots__ = ("charset",)

    def __init__(self, *, charset: str = DEFAULT_CHARSET) -> None:
        self.charset = charset

    def encode(self, value: Any, body_type: Any, template: RequestTemplate) -> None:
        if is_text_type(body_type):
            if value is None:
                return
            logger.debug("Encoding %s value as text", type(value).__name__)
            try:
                template.set_body(str(value), self.charset)
            except (UnicodeEncodeError, LookupError) as exc:
                raise EncodeError(
                    f"{type(value).__name__} cannot be encoded as text "
                    f"in charset {self.charset!r}: {exc}",
                    value_type=type(value),
                    body_type=body_type,
                ) from exc
        elif is_bytes_type(body_type):
            if value is None:
                return
            if not isinstance(value, (bytes, bytearray)):
                raise EncodeError(
                    f"{type(value).__name__} cannot be encoded as {type_name(body_type)}.",
                    value_type=type(value),
                    body_type=body_type,
                )
            logger.debug("Encoding %s value as raw bytes", type(value).__name__)
            template.set_body(value)
        elif value is not None:
            raise EncodeError(
                f"{type(value).__name__} is not a type supported by this encoder.",
                value_type=type(value),
                body_type=body_type,
            )
