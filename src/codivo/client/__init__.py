"""src/codivo/client/__init__.py"""

from .builder import TemplateBuilder
from .metadata import MethodMetadata

__all__ = ["MethodMetadata", "TemplateBuilder"]
