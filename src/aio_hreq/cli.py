import argparse
import asyncio
import logging
import sys

import aiohttp

from .base import fetch
from .config import load_settings
from .enums import ContentType, HreqError, HttpRequestMethod
from .http import HttpRequest

logger = logging.getLogger(__name__)

_TYPE_HELP = """Value for the Content-Type header, can be:
- text: for text/plain
- json: for application/json
- form: for application/x-www-form-urlencoded
- file: for multipart/form-data
By default the content type is guessed from the request body, but the guess
may be wrong, so specifying the content type explicitly is recommended."""


def _argument_type(parse):
    def _convert(text):
        try:
            return parse(text)
        except HreqError as err:
            raise argparse.ArgumentTypeError(str(err)) from err

    return _convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hreq",
        description="Send an HTTP request and print the response body.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-m",
        "--method",
        type=_argument_type(HttpRequestMethod.parse),
        default=HttpRequestMethod.GET,
        help="The HTTP method to use (case-insensitive).\n"
        "Supported methods: " + ", ".join(m.value for m in HttpRequestMethod),
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="content_type",
        type=_argument_type(ContentType.parse),
        help=_TYPE_HELP,
    )
    parser.add_argument("-d", "--data", help="The request body")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument("url", help="The URL to send the request to")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    request = HttpRequest.create(args.method, args.url, args.data, args.content_type)
    try:
        body = asyncio.run(fetch(request, settings))
    except (aiohttp.ClientError, asyncio.TimeoutError) as err:
        logger.error("Request to %s failed: %r", request.url, err)
        return 1

    print(body)
    return 0
