"""src/codivo/http/template.py

Mutable request template populated by the request-building pipeline.
"""

from typing import Dict, List, Optional, Union

from codivo.http.headers import Headers
from codivo.utils.serialization import to_query_string
from codivo.utils.validators import has_control_chars, validate_url

__all__ = ["RequestTemplate", "DEFAULT_CHARSET"]

DEFAULT_CHARSET = "utf-8"


class RequestTemplate:
    """
    Builder accumulating the pieces of an outgoing HTTP request.

    Encoders receive a template and may only set its body (and optionally
    its charset or Content-Type header). Everything else belongs to the
    caller.

    Attributes:
        method: HTTP method, upper-cased.
        headers: Request headers.
    """

    __slots__ = ("method", "headers", "_url", "_queries", "_body", "_charset")

    def __init__(self, method: str = "GET", url: str = "/") -> None:
        if has_control_chars(method) or not method.strip():
            raise ValueError(f"Invalid HTTP method: {method!r}")
        self.method = method.upper()
        self.headers = Headers()
        self._queries: Dict[str, List[Optional[str]]] = {}
        self._body: Optional[bytes] = None
        self._charset: Optional[str] = None
        self._url = ""
        self.url = url

    @property
    def url(self) -> str:
        """Target URL or path, without the query string."""
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        if has_control_chars(value):
            raise ValueError(f"Invalid character in URL: {value!r}")
        if not validate_url(value):
            raise ValueError(f"URL must be absolute or start with '/': {value!r}")
        self._url = value

    @property
    def body(self) -> Optional[bytes]:
        """Body bytes, or None when no body is set."""
        return self._body

    @property
    def charset(self) -> Optional[str]:
        """Charset of the body, or None for binary or absent bodies."""
        return self._charset

    def set_body(
        self,
        data: Union[str, bytes, bytearray, None],
        charset: Optional[str] = None,
    ) -> "RequestTemplate":
        """
        Set the request body. A failed call leaves the template unchanged.

        Args:
            data: Text is encoded with ``charset`` (UTF-8 by default). Bytes
                are stored verbatim. None clears the body.
            charset: Charset of the body. Recorded as given for bytes.

        Returns:
            The template, for chaining.

        Raises:
            TypeError: If data is not text, bytes or None.
            UnicodeEncodeError: If text cannot be encoded with charset.
            LookupError: If charset is unknown.
        """
        if data is None:
            self._body = None
            self._charset = None
        elif isinstance(data, str):
            encoding = charset or DEFAULT_CHARSET
            self._body = data.encode(encoding)
            self._charset = encoding
        elif isinstance(data, (bytes, bytearray)):
            self._body = bytes(data)
            self._charset = charset
        else:
            raise TypeError(
                f"Body must be str, bytes or None, not {type(data).__name__}"
            )
        return self

    def body_text(self) -> Optional[str]:
        """Decode the body with its charset. None if there is no body or charset."""
        if self._body is None or self._charset is None:
            return None
        return self._body.decode(self._charset)

    def header(self, name: str, *values: str) -> "RequestTemplate":
        """Append header values. Without values, the header is removed."""
        if not values:
            self.headers.remove(name)
        else:
            self.headers.add(name, *values)
        return self

    def query(self, name: str, *values: Optional[str]) -> "RequestTemplate":
        """Append query values. Without values, the parameter is removed."""
        if not values:
            self._queries.pop(name, None)
        else:
            self._queries.setdefault(name, []).extend(values)
        return self

    @property
    def queries(self) -> Dict[str, List[Optional[str]]]:
        """Copy of the query parameters."""
        return {k: list(v) for k, v in self._queries.items()}

    def request_url(self) -> str:
        """URL including the rendered query string."""
        if not self._queries:
            return self._url
        separator = "&" if "?" in self._url else "?"
        return f"{self._url}{separator}{to_query_string(self._queries)}"

    def to_bytes(self, host: str) -> bytes:
        """
        Render the template as a raw HTTP/1.1 request.

        Args:
            host: Value of the Host header.

        Returns:
            Request line, headers, blank line and body.

        Raises:
            ValueError: If the method or a header contains CR, LF or NUL.
        """
        if has_control_chars(self.method):
            raise ValueError(f"Invalid HTTP method: {self.method!r}")
        request_line = f"{self.method} {self.request_url()} HTTP/1.1\r\n"
        final_headers = Headers({"Host": host, "User-Agent": "codivo/0.1"})
        for name in self.headers:
            if name.lower() in ("host", "user-agent"):
                final_headers.remove(name)
        for name, value in self.headers.items_raw():
            final_headers.add(name, value)

        body_bytes = self._body or b""
        if self._body is not None:
            final_headers.set("Content-Length", str(len(body_bytes)))

        headers_str = ""
        for k, v in final_headers.items_raw():
            # Validate against HTTP header injection attacks
            if has_control_chars(k) or has_control_chars(v):
                raise ValueError(f"Invalid character in header {k}: {v!r}")
            headers_str += f"{k}: {v}\r\n"

        return (request_line + headers_str + "\r\n").encode("utf-8") + body_bytes

    def copy(self) -> "RequestTemplate":
        """Return an independent copy of the template."""
        clone = RequestTemplate(self.method, self._url)
        clone.headers = self.headers.copy()
        clone._queries = self.queries
        clone._body = self._body
        clone._charset = self._charset
        return clone

    def __repr__(self) -> str:
        size = "none" if self._body is None else f"{len(self._body)} bytes"
        return f"<RequestTemplate {self.method} {self.request_url()} body={size}>"
