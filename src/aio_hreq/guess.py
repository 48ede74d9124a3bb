"""Best-effort guessing of a request body's content type.

None of the checks here parse or validate the body. They look for the shape
that the common case of each format starts with, so some guesses will be
wrong. Every check is total: it returns a boolean and never raises.
"""
import enum
import string

from .enums import ContentType

# Bodies at least this long are never treated as a bare empty object.
EMPTY_OBJECT_MAX_LEN = 20

# Boundaries seen in the wild:
#   Firefox 90     -----------------------------<random>
#   Chromium 91    ------WebKitFormBoundary<random>
#   Postman 8.8    ----------------------------<random>
#   curl 7.77.0    --------------------------<random>
# Chromium uses the fewest hyphens (6).
MULTIPART_MIN_HYPHENS = 5

# RFC 3986 section 2.3 unreserved characters, plus '+' for encoded spaces.
_URL_KEY_CHARS = frozenset(string.ascii_letters + string.digits + "-._~+")
_ASCII_DIGITS = frozenset(string.digits)


class _JsonScanState(enum.Enum):
    SEEK_OPEN_BRACE = enum.auto()
    SEEK_OPEN_QUOTE = enum.auto()
    IN_KEY = enum.auto()
    SEEK_COLON = enum.auto()
    DONE = enum.auto()


# state -> (expected character, next state); whitespace is skipped meanwhile
_JSON_EXPECTED = {
    _JsonScanState.SEEK_OPEN_BRACE: ("{", _JsonScanState.SEEK_OPEN_QUOTE),
    _JsonScanState.SEEK_OPEN_QUOTE: ('"', _JsonScanState.IN_KEY),
    _JsonScanState.SEEK_COLON: (":", _JsonScanState.DONE),
}


def _is_empty_object(body: str) -> bool:
    if len(body) >= EMPTY_OBJECT_MAX_LEN:
        return False
    return "".join(body.split()) == "{}"


def looks_like_json(body: str) -> bool:
    """Guess whether ``body`` is a JSON document.

    JSON is usually sent with an object at the top level, so this looks for
    something like ``{"key":`` with any whitespace in between. The key is
    assumed to contain no escape sequence. A short body holding only an
    empty object is also accepted.
    """
    if _is_empty_object(body):
        return True

    state = _JsonScanState.SEEK_OPEN_BRACE
    for char in body:
        if state is _JsonScanState.IN_KEY:
            if char == '"':
                state = _JsonScanState.SEEK_COLON
            continue
        if char.isspace():
            continue
        expected, next_state = _JSON_EXPECTED[state]
        if char != expected:
            return False
        state = next_state
        if state is _JsonScanState.DONE:
            return True
    return False


def looks_like_url_encoded(body: str) -> bool:
    """Guess whether ``body`` is URL encoded (percent encoded).

    Accepted when it starts with a non-empty ``key=``, where the key only
    holds unreserved characters, ``+`` and complete ``%XX`` escapes. For
    example ``a-s.d_f~0+%21=`` is accepted. Escapes must be followed by
    exactly two decimal digits.
    """
    digits_left = 0
    key_len = 0
    for char in body:
        if digits_left:
            if char not in _ASCII_DIGITS:
                break
            digits_left -= 1
        elif char == "%":
            digits_left = 2
        elif char not in _URL_KEY_CHARS:
            break
        key_len += 1

    if key_len == 0 or digits_left:
        return False
    return body[key_len:key_len + 1] == "="


def looks_like_multipart(body: str) -> bool:
    return body.startswith("-" * MULTIPART_MIN_HYPHENS)


def guess_content_type(body: str) -> ContentType:
    if looks_like_json(body):
        return ContentType.JSON
    if looks_like_url_encoded(body):
        return ContentType.FORM
    if looks_like_multipart(body):
        return ContentType.MULTIPART
    return ContentType.TEXT
