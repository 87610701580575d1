"""src/codivo/client/builder.py

Builds request templates from method arguments.
"""

import logging
import re
import urllib.parse
from typing import Any, Dict, Optional, Sequence

from codivo.client.metadata import MethodMetadata
from codivo.codec.encoder import DefaultEncoder, Encoder
from codivo.codec.types import FORM_BODY_TYPE
from codivo.exceptions import EncodeError
from codivo.http.template import RequestTemplate

__all__ = ["TemplateBuilder"]

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


class TemplateBuilder:
    """
    Turns the arguments of one call into a populated :class:`RequestTemplate`.

    The body argument, if declared, is handed to the encoder with its
    declared body type. Otherwise declared form parameters are collected
    into a dict and encoded with :data:`FORM_BODY_TYPE`.

    Attributes:
        metadata: Description of the method.
        encoder: Encoder used for the body.
    """

    __slots__ = ("metadata", "encoder")

    def __init__(
        self, metadata: MethodMetadata, encoder: Optional[Encoder] = None
    ) -> None:
        self.metadata = metadata
        self.encoder = encoder or DefaultEncoder()

    def create(self, args: Sequence[Any]) -> RequestTemplate:
        """
        Build a template for one call.

        Args:
            args: Positional call arguments.

        Returns:
            The populated template.

        Raises:
            EncodeError: If the encoder rejects the body.
            ValueError: If a URL placeholder has no value.
        """
        named = self._named_args(args)
        template = RequestTemplate(self.metadata.method, self._expand(named))

        if self.metadata.body_index is not None:
            body = args[self.metadata.body_index]
            self._encode(body, self.metadata.body_type, template)
        elif self.metadata.form_params:
            form = {
                name: named[name]
                for name in self.metadata.form_params
                if named.get(name) is not None
            }
            self._encode(form, FORM_BODY_TYPE, template)

        return template

    def _named_args(self, args: Sequence[Any]) -> Dict[str, Any]:
        return {name: args[i] for i, name in self.metadata.index_to_name.items()}

    def _expand(self, named: Dict[str, Any]) -> str:
        def replace(match: "re.Match[str]") -> str:
            name = match.group(1)
            value = named.get(name)
            if value is None:
                raise ValueError(f"No value for URL placeholder {{{name}}}")
            return urllib.parse.quote(str(value), safe="")

        return _PLACEHOLDER.sub(replace, self.metadata.url)

    def _encode(self, value: Any, body_type: Any, template: RequestTemplate) -> None:
        try:
            self.encoder.encode(value, body_type, template)
        except EncodeError as exc:
            logger.debug(
                "Encoding failed for %s %s: %s",
                self.metadata.method,
                self.metadata.url,
                exc,
            )
            raise
