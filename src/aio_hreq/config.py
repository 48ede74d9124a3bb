"""Settings for the transport and the command line, read from the environment."""

import logging
import os
import typing as _ty

import attr as _attr

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000
DEFAULT_ACCEPT_ENCODING = "gzip,br"
DEFAULT_LOG_LEVEL = "WARNING"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning("Ignoring invalid %s=%r, using %d", name, raw, default)
        return default
    return value


def _log_level_from_env(name: str, default: str) -> str:
    level = os.environ.get(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring unknown log level %s=%r, using %s", name, level, default)
        return default
    return level


def _split_encodings(raw: str) -> _ty.Tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@_attr.s(auto_attribs=True, frozen=True, slots=True)
class Settings:
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    accept_encoding: _ty.Tuple[str, ...] = _split_encodings(DEFAULT_ACCEPT_ENCODING)
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def timeout(self) -> float:
        return self.timeout_ms / 1000


def load_settings() -> Settings:
    return Settings(
        timeout_ms=_int_from_env("AIO_HREQ_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
        accept_encoding=_split_encodings(
            os.environ.get("AIO_HREQ_ACCEPT_ENCODING", DEFAULT_ACCEPT_ENCODING)
        ),
        log_level=_log_level_from_env("AIO_HREQ_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
