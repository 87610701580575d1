"""src/codivo/codec/form_encoder.py

application/x-www-form-urlencoded request body encoder.
"""

import collections.abc
import logging
from typing import Any, Optional

from codivo.codec.encoder import DefaultEncoder, Encoder
from codivo.codec.types import is_form_type, type_name
from codivo.exceptions import EncodeError
from codivo.http.template import RequestTemplate
from codivo.utils.serialization import to_form_urlencoded

__all__ = ["FormEncoder"]

logger = logging.getLogger(__name__)


class FormEncoder(Encoder):
    """
    Encodes form parameter mappings; hands every other body to a delegate.

    None values are dropped and list or tuple values become repeated keys.
    """

    __slots__ = ("delegate",)

    content_type = "application/x-www-form-urlencoded; charset=utf-8"

    def __init__(self, delegate: Optional[Encoder] = None) -> None:
        self.delegate = delegate or DefaultEncoder()

    def encode(self, value: Any, body_type: Any, template: RequestTemplate) -> None:
        if not is_form_type(body_type):
            self.delegate.encode(value, body_type, template)
            return

        if not isinstance(value, collections.abc.Mapping):
            raise EncodeError(
                f"{type(value).__name__} cannot be form encoded as "
                f"{type_name(body_type)}; a mapping is required.",
                value_type=type(value),
                body_type=body_type,
            )

        try:
            payload = to_form_urlencoded(value)
        except TypeError as exc:
            raise EncodeError(
                f"Could not form encode {type(value).__name__}: {exc}",
                value_type=type(value),
                body_type=body_type,
            ) from exc

        template.set_body(payload, "utf-8")
        template.headers.set("Content-Type", self.content_type)
        logger.debug("Form encoded %d fields", len(value))
