import enum as _enum


class HreqError(ValueError):
    message = "{}"

    def __init__(self, text):
        super().__init__(self.message.format(text))
        self.text = text


class UnknownMethod(HreqError):
    message = "Unknown HTTP method: {}"


class UnknownContentType(HreqError):
    message = "Unknown Content-Type: {}"


class HttpRequestMethod(_enum.Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, text: str) -> "HttpRequestMethod":
        name = text.upper()
        try:
            return cls(name)
        except ValueError:
            raise UnknownMethod(name) from None

    def __str__(self):
        return self.value


class ContentType(_enum.Enum):
    TEXT = "text/plain"
    JSON = "application/json"
    # percent encoded
    FORM = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"

    @classmethod
    def parse(cls, text: str) -> "ContentType":
        token = text.lower()
        if token in _CONTENT_TYPE_ALIASES:
            return _CONTENT_TYPE_ALIASES[token]
        try:
            return cls(token)
        except ValueError:
            raise UnknownContentType(token) from None

    def __str__(self):
        return self.value


_CONTENT_TYPE_ALIASES = {
    "text": ContentType.TEXT,
    "json": ContentType.JSON,
    "form": ContentType.FORM,
    "file": ContentType.MULTIPART,
}
