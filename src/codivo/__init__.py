"""src/codivo/__init__.py

Codivo - request body encoding for HTTP clients.

Codivo turns method-call arguments into request bodies. An ``Encoder``
receives the value, its body type and a mutable ``RequestTemplate`` and
populates the template body, or raises ``EncodeError``.

Key Features:
    - Zero external dependencies
    - Pluggable encoders (default text/bytes, JSON, form-urlencoded)
    - Form parameter collection from method metadata
    - Request templates rendering to raw HTTP/1.1 bytes
    - Full type hints (PEP 561)

Example:
    Encoding a body::

        from codivo import DefaultEncoder, RequestTemplate

        template = RequestTemplate("POST", "/messages")
        DefaultEncoder().encode("hello", str, template)
        assert template.body == b"hello"

    Building a form request::

        from codivo import FormEncoder, MethodMetadata, TemplateBuilder

        login = MethodMetadata(
            method="POST",
            url="/session",
            index_to_name={0: "username", 1: "password"},
            form_params=["username", "password"],
        )
        template = TemplateBuilder(login, FormEncoder()).create(["alice", "s3cret"])
        assert template.body == b"username=alice&password=s3cret"
"""

import logging

from codivo.client.builder import TemplateBuilder
from codivo.client.metadata import MethodMetadata
from codivo.codec.encoder import DefaultEncoder, Encoder
from codivo.codec.form_encoder import FormEncoder
from codivo.codec.json_encoder import JsonEncoder
from codivo.codec.options import JsonOptions
from codivo.codec.types import FORM_BODY_TYPE
from codivo.exceptions import CodivoError, EncodeError
from codivo.http.template import RequestTemplate
from codivo.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Encoder",
    "DefaultEncoder",
    "JsonEncoder",
    "FormEncoder",
    "JsonOptions",
    "FORM_BODY_TYPE",
    "RequestTemplate",
    "MethodMetadata",
    "TemplateBuilder",
    "CodivoError",
    "EncodeError",
    "__version__",
]
