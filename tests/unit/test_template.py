"""tests/unit/test_template.py"""

import pytest

from codivo.http.template import RequestTemplate


class TestRequestTemplateBody:
    """Tests for body handling."""

    def test_new_template_has_no_body(self):
        """Test defaults of a fresh template."""
        template = RequestTemplate()
        assert template.method == "GET"
        assert template.url == "/"
        assert template.body is None
        assert template.charset is None
        assert template.body_text() is None

    def test_set_text_body(self):
        """Test that text is encoded as UTF-8 by default."""
        template = RequestTemplate("post", "/items")
        template.set_body("héllo")
        assert template.method == "POST"
        assert template.body == "héllo".encode("utf-8")
        assert template.charset == "utf-8"
        assert template.body_text() == "héllo"

    def test_set_text_body_with_charset(self):
        """Test that text honours an explicit charset."""
        template = RequestTemplate().set_body("héllo", "latin-1")
        assert template.body == b"h\xe9llo"
        assert template.charset == "latin-1"
        assert template.body_text() == "héllo"

    def test_set_bytes_body(self):
        """Test that bytes are stored verbatim without charset."""
        template = RequestTemplate().set_body(b"\x01\x02")
        assert template.body == b"\x01\x02"
        assert template.charset is None
        assert template.body_text() is None

    def test_set_bytearray_body(self):
        """Test that bytearray is copied into bytes."""
        data = bytearray(b"abc")
        template = RequestTemplate().set_body(data)
        data[0] = 0
        assert template.body == b"abc"
        assert isinstance(template.body, bytes)

    def test_set_none_clears_body(self):
        """Test that None clears body and charset."""
        template = RequestTemplate().set_body("text")
        template.set_body(None)
        assert template.body is None
        assert template.charset is None

    def test_set_invalid_body_type(self):
        """Test that unsupported body types raise TypeError."""
        with pytest.raises(TypeError, match="not int"):
            RequestTemplate().set_body(42)


class TestRequestTemplateRequest:
    """Tests for URL, headers, queries and rendering."""

    @pytest.mark.parametrize("url", ["", "users", "ftp://example.com"])
    def test_invalid_url(self, url):
        """Test that relative or non-http URLs are rejected."""
        with pytest.raises(ValueError):
            RequestTemplate("GET", url)

    def test_header_append_and_remove(self):
        """Test header() semantics."""
        template = RequestTemplate()
        template.header("Accept", "a").header("accept", "b")
        assert template.headers.get_all("Accept") == ["a", "b"]
        template.header("Accept")
        assert "Accept" not in template.headers

    def test_query_and_request_url(self):
        """Test query() semantics and URL rendering."""
        template = RequestTemplate("GET", "/search")
        template.query("q", "a b").query("tag", "x", "y")
        assert template.request_url() == "/search?q=a%20b&tag=x&tag=y"
        template.query("tag")
        assert template.queries == {"q": ["a b"]}

    def test_request_url_existing_query(self):
        """Test that queries append to a URL that already has one."""
        template = RequestTemplate("GET", "/search?lang=en").query("q", "x")
        assert template.request_url() == "/search?lang=en&q=x"

    def test_to_bytes_without_body(self):
        """Test rendering of a body-less request."""
        template = RequestTemplate("GET", "/items").header("Accept", "text/plain")
        raw = template.to_bytes("example.com")
        assert raw == (
            b"GET /items HTTP/1.1\r\n"
            b"Host: example.com\r\n"
            b"User-Agent: codivo/0.1\r\n"
            b"Accept: text/plain\r\n"
            b"\r\n"
        )

    def test_to_bytes_with_body(self):
        """Test that Content-Length is added and the body appended."""
        template = RequestTemplate("POST", "/items").set_body("hello")
        raw = template.to_bytes("example.com")
        assert b"Content-Length: 5\r\n" in raw
        assert raw.endswith(b"\r\n\r\nhello")

    def test_to_bytes_empty_body(self):
        """Test that an empty body still declares its length."""
        raw = RequestTemplate("POST", "/").set_body(b"").to_bytes("example.com")
        assert b"Content-Length: 0\r\n" in raw

    def test_to_bytes_overrides_defaults(self):
        """Test that template headers replace Host and User-Agent."""
        template = RequestTemplate().header("user-agent", "custom/1.0")
        raw = template.to_bytes("example.com")
        assert b"user-agent: custom/1.0\r\n" in raw
        assert b"codivo/0.1" not in raw

    @pytest.mark.parametrize(
        "name, value",
        [
            ("X-Bad", "a\r\nInjected: 1"),
            ("X-Bad\n", "a"),
            ("X-Null", "a\x00b"),
        ],
    )
    def test_to_bytes_rejects_header_injection(self, name, value):
        """Test the header injection guard."""
        template = RequestTemplate().header(name, value)
        with pytest.raises(ValueError, match="Invalid character in header"):
            template.to_bytes("example.com")

    def test_copy_is_independent(self):
        """Test that copies do not share headers, queries or body."""
        template = RequestTemplate("PUT", "/a").header("X", "1").query("q", "1")
        template.set_body("body")
        clone = template.copy()
        clone.header("X", "2").query("q", "2").set_body(None)
        assert template.headers.get_all("X") == ["1"]
        assert template.queries == {"q": ["1"]}
        assert template.body == b"body"
        assert clone.method == "PUT"

    def test_repr(self):
        """Test the debug representation."""
        template = RequestTemplate("POST", "/a").set_body(b"xyz")
        assert repr(template) == "<RequestTemplate POST /a body=3 bytes>"


class TestRequestTemplateGuards:
    """Tests for failed body writes and request line injection."""

    def test_failed_text_encoding_leaves_template_unchanged(self):
        """Test that an unencodable body does not change body or charset."""
        template = RequestTemplate().set_body(b"\x01")
        with pytest.raises(UnicodeEncodeError):
            template.set_body("é", "ascii")
        assert template.body == b"\x01"
        assert template.charset is None

    def test_unknown_charset_leaves_template_unchanged(self):
        """Test that an unknown charset does not change body or charset."""
        template = RequestTemplate()
        with pytest.raises(LookupError):
            template.set_body("hello", "no-such-charset")
        assert template.body is None
        assert template.charset is None

    @pytest.mark.parametrize(
        "url",
        ["/a HTTP/1.1\r\nX-Injected: 1\r\n", "/a\nb", "/a\x00", "http://h/\r"],
    )
    def test_url_rejects_control_chars(self, url):
        """Test that CR, LF and NUL are rejected in URLs."""
        with pytest.raises(ValueError, match="Invalid character in URL"):
            RequestTemplate("GET", url)

    def test_url_setter_rejects_control_chars(self):
        """Test the guard on URL reassignment."""
        template = RequestTemplate("GET", "/ok")
        with pytest.raises(ValueError, match="Invalid character in URL"):
            template.url = "/a\r\nX: 1"
        assert template.url == "/ok"

    @pytest.mark.parametrize("method", ["GET\r\nX: 1", "PO\nST", "GET\x00", "", " "])
    def test_method_rejects_control_chars(self, method):
        """Test that malformed methods are rejected."""
        with pytest.raises(ValueError, match="Invalid HTTP method"):
            RequestTemplate(method, "/")

    def test_to_bytes_rejects_reassigned_method(self):
        """Test that a method changed after construction is checked on render."""
        template = RequestTemplate("GET", "/")
        template.method = "GET / HTTP/1.1\r\nX-Injected: 1\r\n"
        with pytest.raises(ValueError, match="Invalid HTTP method"):
            template.to_bytes("example.com")
