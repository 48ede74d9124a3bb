import attr as _attr
import logging as _logging
import typing as _ty
import urllib3 as _urllib3

from .enums import ContentType, HttpRequestMethod
from .guess import guess_content_type

logger = _logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")


def normalize_url(url: str) -> str:
    if url.startswith(_URL_SCHEMES):
        return url
    return "http://" + url


@_attr.s(auto_attribs=True, frozen=True, slots=True)
class HttpRequest:
    method: HttpRequestMethod
    url: str
    body: _ty.Optional[str] = None
    content_type: _ty.Optional[ContentType] = None

    @classmethod
    def create(
        cls,
        method: _ty.Union[HttpRequestMethod, str],
        url: str,
        body: _ty.Optional[str] = None,
        content_type: _ty.Union[ContentType, str, None] = None,
    ) -> "HttpRequest":
        """Resolve raw user input into a final request.

        When a body is given without a content type, the content type is
        guessed from the body, so a request with a body always carries one.
        """
        if not isinstance(method, HttpRequestMethod):
            method = HttpRequestMethod.parse(method)
        if content_type is not None and not isinstance(content_type, ContentType):
            content_type = ContentType.parse(content_type)
        if body is not None and content_type is None:
            content_type = guess_content_type(body)
            logger.debug("Guessed Content-Type %s for the request body", content_type)
        return cls(method, normalize_url(url), body, content_type)

    def make_headers(
        self, accept_encoding: _ty.Optional[_ty.Sequence[str]] = None
    ) -> _ty.Dict[str, str]:
        if accept_encoding:
            headers = _urllib3.make_headers(accept_encoding=list(accept_encoding))
        else:
            headers = {}
        if self.content_type is not None:
            headers["Content-Type"] = str(self.content_type)
        return headers
