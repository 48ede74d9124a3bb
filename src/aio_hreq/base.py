import functools
import logging
import typing as _ty

import aiohttp

from .config import Settings, load_settings
from .http import HttpRequest

logger = logging.getLogger(__name__)


def create_session(settings: Settings) -> aiohttp.ClientSession:
    timeout = aiohttp.ClientTimeout(total=settings.timeout)
    return aiohttp.ClientSession(timeout=timeout, auto_decompress=True)


async def _base_request_performer(
    req: HttpRequest, session: aiohttp.ClientSession, accept_encoding=None
) -> _ty.Tuple[int, str]:
    data = req.body.encode("utf-8") if req.body is not None else None
    logger.debug("Sending %s %s (Content-Type: %s)", req.method, req.url, req.content_type)
    async with session.request(
        req.method.value,
        req.url,
        data=data,
        headers=req.make_headers(accept_encoding),
    ) as resp:
        st = resp.status
        response_text = await resp.text(errors="replace")
        if not 200 <= st < 300:
            logger.warning("%s %s returned status %d", req.method, req.url, st)
        return st, response_text


def create_requester(session, accept_encoding=None):
    partial_func = functools.partial(
        _base_request_performer, session=session, accept_encoding=accept_encoding
    )
    functools.update_wrapper(partial_func, _base_request_performer)
    return partial_func


async def perform_request(
    request: HttpRequest, session: aiohttp.ClientSession, settings: Settings
) -> _ty.Tuple[int, str]:
    requester = create_requester(session, settings.accept_encoding)
    return await requester(request)


async def fetch(request: HttpRequest, settings: _ty.Optional[Settings] = None) -> str:
    """Send ``request`` once and return the response body.

    Connection failures and timeouts are raised as they come from aiohttp.
    """
    if settings is None:
        settings = load_settings()

    async with create_session(settings) as session:
        _, text = await perform_request(request, session, settings)
    return text
