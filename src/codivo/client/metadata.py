"""client/metadata.py

Method metadata consumed by the template builder.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class MethodMetadata:
    """
    Describes how the arguments of one client method map onto a request.

    Attributes:
        method: HTTP method.
        url: URL or path; ``{name}`` placeholders are expanded from named
            arguments.
        body_index: Position of the argument encoded as the body, if any.
        body_type: Body type descriptor passed to the encoder along with the
            body argument.
        index_to_name: Names of the named (non-body) arguments by position.
        form_params: Names of the arguments collected into a form body.
    """

    method: str = "GET"
    url: str = "/"
    body_index: Optional[int] = None
    body_type: Any = None
    index_to_name: Dict[int, str] = field(default_factory=dict)
    form_params: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.body_index is not None and self.form_params:
            raise ValueError("Body parameters cannot be used with form parameters.")
        if self.body_index is not None and self.body_index in self.index_to_name:
            raise ValueError(
                f"Argument {self.body_index} cannot be both the body and "
                f"the named parameter {self.index_to_name[self.body_index]!r}."
            )
        missing = [p for p in self.form_params if p not in self.index_to_name.values()]
        if missing:
            raise ValueError(f"Form parameters without arguments: {', '.join(missing)}")
