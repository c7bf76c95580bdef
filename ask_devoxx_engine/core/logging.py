"""Structured logging helpers with correlation, platform request and session metadata."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from ask_devoxx_engine.core.config import settings

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_skill_request_id: ContextVar[Optional[str]] = ContextVar("skill_request_id", default=None)
_session_id: ContextVar[Optional[str]] = ContextVar("session_id", default=None)

LEVEL_NAME = str(getattr(settings, "ASK_DEVOXX_LOG_LEVEL", "info")).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent


def _resolve_logs_dir() -> Path:
    """Select a writable logs directory honoring configuration overrides."""

    configured_dir = getattr(settings, "ASK_DEVOXX_LOG_DIR", None)
    candidates = []
    if configured_dir:
        candidates.append(Path(configured_dir))

    data_dir = Path(getattr(settings, "DATA_DIR", Path("/data")))
    # Precedence: explicit override → repo root logs → DATA_DIR/logs → package-local logs
    candidates.append(ROOT_DIR / "logs")
    candidates.append(data_dir / "logs")
    candidates.append(BASE_DIR / "logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return candidate

    raise PermissionError("Unable to create a writable logs directory")


LOGS_DIR = _resolve_logs_dir()
LOG_SCHEMA_VERSION = "1.0.0"
LOG_FILE_PATH = LOGS_DIR / "ask_devoxx.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("schema_version", self._schema_version)


class CorrelationIdFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach correlation, skill request and session ids to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.skill_request_id = get_skill_request_id() or "-"
        record.session_id = get_session_id() or "-"
        return True


def bind_correlation_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind ``value`` to the correlation id context variable."""

    return _correlation_id.set(value)


def reset_correlation_id(token: Token[Optional[str]]) -> None:
    """Reset the correlation id context variable to a previous state."""

    _correlation_id.reset(token)


def get_correlation_id() -> Optional[str]:
    """Return the current correlation id if bound."""

    return _correlation_id.get()


def bind_skill_request_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind the voice platform's request id for downstream logging."""

    return _skill_request_id.set(value)


def reset_skill_request_id(token: Token[Optional[str]]) -> None:
    """Reset the skill request id context variable."""

    _skill_request_id.reset(token)


def get_skill_request_id() -> Optional[str]:
    """Return the current skill request id if bound."""

    return _skill_request_id.get()


def bind_session_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind the voice platform's session id for downstream logging."""

    return _session_id.set(value)


def reset_session_id(token: Token[Optional[str]]) -> None:
    """Reset the session id context variable."""

    _session_id.reset(token)


def get_session_id() -> Optional[str]:
    """Return the current session id if bound."""

    return _session_id.get()


@contextmanager
def correlation_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a correlation id."""

    token = bind_correlation_id(value)
    try:
        yield
    finally:
        reset_correlation_id(token)


@contextmanager
def skill_request_context(request_id: Optional[str], session_id: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds the platform request and session ids."""

    request_token = bind_skill_request_id(request_id)
    session_token = bind_session_id(session_id)
    try:
        yield
    finally:
        reset_session_id(session_token)
        reset_skill_request_id(request_token)


def _has_shared_handlers(logger: logging.Logger) -> bool:
    return any(
        isinstance(flt, CorrelationIdFilter) for handler in logger.handlers for flt in handler.filters
    )


def _ensure_handlers(logger: logging.Logger) -> None:
    # Other tooling (pytest, uvicorn) may attach its own handlers to the root logger.
    if _has_shared_handlers(logger):
        return

    formatter = VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(correlation_id)s",
                "%(skill_request_id)s",
                "%(session_id)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
            "skill_request_id": "request_id",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )
    correlation_filter = CorrelationIdFilter()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.addFilter(correlation_filter)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    file_handler = RotatingFileHandler(
        LOG_FILE_PATH, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.addFilter(correlation_filter)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a named logger that propagates to the shared JSON handlers."""

    _ensure_handlers(logging.getLogger())
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    return logger


__all__ = [
    "CorrelationIdFilter",
    "VersionedJsonFormatter",
    "bind_correlation_id",
    "bind_session_id",
    "bind_skill_request_id",
    "reset_correlation_id",
    "reset_session_id",
    "reset_skill_request_id",
    "get_correlation_id",
    "get_session_id",
    "get_skill_request_id",
    "correlation_id_context",
    "skill_request_context",
    "get_logger",
    "LOG_FILE_PATH",
    "LOG_SCHEMA_VERSION",
]
