"""src/codivo/codec/__init__.py"""

from .encoder import DefaultEncoder, Encoder
from .form_encoder import FormEncoder
from .json_encoder import JsonEncoder
from .options import JsonOptions
from .types import FORM_BODY_TYPE

__all__ = [
    "Encoder",
    "DefaultEncoder",
    "JsonEncoder",
    "FormEncoder",
    "JsonOptions",
    "FORM_BODY_TYPE",
]
