"""src/codivo/codec/json_encoder.py

JSON request body encoder.
"""

import logging
from typing import Any, Optional

from codivo.codec.encoder import Encoder
from codivo.codec.options import JsonOptions
from codivo.codec.types import type_name
from codivo.exceptions import EncodeError
from codivo.http.template import RequestTemplate
from codivo.utils.serialization import to_json

__all__ = ["JsonEncoder"]

logger = logging.getLogger(__name__)


class JsonEncoder(Encoder):
    """
    Encodes any JSON-serializable value, including dataclass instances.

    Sets ``Content-Type: application/json; charset=utf-8``. A None value
    leaves the body unset.
    """

    __slots__ = ("options",)

    content_type = "application/json; charset=utf-8"

    def __init__(self, options: Optional[JsonOptions] = None) -> None:
        self.options = options or JsonOptions()

    def encode(self, value: Any, body_type: Any, template: RequestTemplate) -> None:
        if value is None:
            return
        try:
            payload = to_json(value, **self.options.as_kwargs())
        except (TypeError, ValueError) as exc:
            raise EncodeError(
                f"Could not encode {type(value).__name__} as JSON "
                f"for {type_name(body_type)}: {exc}",
                value_type=type(value),
                body_type=body_type,
            ) from exc

        template.set_body(payload, "utf-8")
        template.headers.set("Content-Type", self.content_type)
        logger.debug(
            "Encoded %s as JSON (%d bytes)",
            type(value).__name__,
            len(template.body or b""),
        )
