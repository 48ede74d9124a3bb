import attr
import pytest

from aio_hreq.enums import (
    ContentType,
    HttpRequestMethod,
    UnknownContentType,
    UnknownMethod,
)
from aio_hreq.http import HttpRequest, normalize_url


class TestHttpRequestMethod:
    @pytest.mark.parametrize("text", ["get", "GET", "Get", "gEt"])
    def test_parse_is_case_insensitive(self, text):
        assert HttpRequestMethod.parse(text) is HttpRequestMethod.GET

    @pytest.mark.parametrize("method", list(HttpRequestMethod))
    def test_str_parses_back(self, method):
        assert HttpRequestMethod.parse(str(method)) is method

    def test_str_is_upper_case_name(self):
        assert str(HttpRequestMethod.OPTIONS) == "OPTIONS"

    @pytest.mark.parametrize("text", ["fetch", "CONNECT", "TRACE", ""])
    def test_unknown_method(self, text):
        with pytest.raises(UnknownMethod) as exc_info:
            HttpRequestMethod.parse(text)
        assert exc_info.value.text == text.upper()
        assert str(exc_info.value) == f"Unknown HTTP method: {text.upper()}"

    def test_unknown_method_is_value_error(self):
        with pytest.raises(ValueError):
            HttpRequestMethod.parse("nope")


class TestContentType:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("text", ContentType.TEXT),
            ("json", ContentType.JSON),
            ("form", ContentType.FORM),
            ("file", ContentType.MULTIPART),
            ("JSON", ContentType.JSON),
            ("text/plain", ContentType.TEXT),
            ("application/json", ContentType.JSON),
            ("application/x-www-form-urlencoded", ContentType.FORM),
            ("Multipart/Form-Data", ContentType.MULTIPART),
        ],
    )
    def test_parse(self, text, expected):
        assert ContentType.parse(text) is expected

    @pytest.mark.parametrize("content_type", list(ContentType))
    def test_str_parses_back(self, content_type):
        assert ContentType.parse(str(content_type)) is content_type

    def test_str_is_mime_type(self):
        assert str(ContentType.FORM) == "application/x-www-form-urlencoded"

    @pytest.mark.parametrize("text", ["xml", "multipart", "application/xml", "Text/HTML"])
    def test_unknown_content_type(self, text):
        with pytest.raises(UnknownContentType) as exc_info:
            ContentType.parse(text)
        assert exc_info.value.text == text.lower()
        assert str(exc_info.value) == f"Unknown Content-Type: {text.lower()}"


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("example.com", "http://example.com"),
            ("localhost:8080/a?b=c", "http://localhost:8080/a?b=c"),
            ("http://example.com", "http://example.com"),
            ("https://example.com", "https://example.com"),
            ("ftp://example.com", "http://ftp://example.com"),
        ],
    )
    def test_normalize_url(self, url, expected):
        assert normalize_url(url) == expected


class TestHttpRequestCreate:
    def test_parses_method_and_url(self):
        req = HttpRequest.create("post", "example.com/items")
        assert req.method is HttpRequestMethod.POST
        assert req.url == "http://example.com/items"
        assert req.body is None
        assert req.content_type is None

    def test_guesses_content_type_when_body_given(self):
        req = HttpRequest.create("POST", "https://example.com", body='{"a": 1}')
        assert req.content_type is ContentType.JSON

    def test_empty_body_is_guessed_as_text(self):
        req = HttpRequest.create("PUT", "example.com", body="")
        assert req.content_type is ContentType.TEXT

    def test_explicit_content_type_wins_over_guess(self):
        req = HttpRequest.create("POST", "example.com", body="a=b", content_type="json")
        assert req.content_type is ContentType.JSON
        assert req.body == "a=b"

    def test_accepts_enum_members(self):
        req = HttpRequest.create(
            HttpRequestMethod.PATCH, "example.com", "x", ContentType.TEXT
        )
        assert req.method is HttpRequestMethod.PATCH
        assert req.content_type is ContentType.TEXT

    def test_content_type_without_body_is_kept(self):
        req = HttpRequest.create("GET", "example.com", content_type="form")
        assert req.content_type is ContentType.FORM

    def test_unknown_method(self):
        with pytest.raises(UnknownMethod):
            HttpRequest.create("BREW", "example.com")

    def test_unknown_content_type(self):
        with pytest.raises(UnknownContentType):
            HttpRequest.create("POST", "example.com", "a=b", "yaml")

    def test_request_is_immutable(self):
        req = HttpRequest.create("GET", "example.com")
        with pytest.raises(attr.exceptions.FrozenInstanceError):
            req.url = "http://other.example.com"


class TestMakeHeaders:
    def test_no_headers_without_body(self):
        req = HttpRequest.create("GET", "example.com")
        assert req.make_headers() == {}

    def test_content_type_header_is_mime_type(self):
        req = HttpRequest.create("POST", "example.com", body="a=b")
        assert req.make_headers() == {
            "Content-Type": "application/x-www-form-urlencoded"
        }

    def test_accept_encoding(self):
        req = HttpRequest.create("POST", "example.com", body="-----x")
        headers = req.make_headers(["gzip", "br"])
        assert headers["accept-encoding"] == "gzip,br"
        assert headers["Content-Type"] == "multipart/form-data"
