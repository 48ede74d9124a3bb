from .enums import ContentType, HttpRequestMethod, UnknownContentType, UnknownMethod
from .guess import guess_content_type
from .http import HttpRequest

__all__ = [
    "ContentType",
    "HttpRequest",
    "HttpRequestMethod",
    "UnknownContentType",
    "UnknownMethod",
    "guess_content_type",
]
