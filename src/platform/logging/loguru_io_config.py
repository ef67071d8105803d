"""
Loguru sinks and the stdlib logging bridge

Every record carries three extra fields: the service context
(name@env:pid), the start time of the current @Logger.io call chain and the
decorated call target. Standard logging (uvicorn, sqlalchemy, aiosqlite) is
routed into the same sinks.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING, Optional

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings


# Argument names whose values never reach the log
SENSITIVE_KEYWORDS = {
    'password',
    'plain_password',
    'hashed_password',
    'token',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def service_context() -> str:
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{os.getpid()}'


def log_dir() -> Path:
    return Path(os.environ.get('TEST_LOG_DIR') or settings.LOG_DIR)


# uvicorn access line: 127.0.0.1:52344 - "GET /api/schedule HTTP/1.1" 200
_ACCESS_LOG_STATUS = re.compile(r' - "[A-Z]+ \S+ HTTP/[\d.]+" (\d{3})')

_STATUS_LEVELS = ((500, 'CRITICAL'), (400, 'ERROR'), (300, 'WARNING'), (200, 'SUCCESS'))

# Loggers that only ever add noise at DEBUG
_QUIET_DEBUG_LOGGERS = ('aiosqlite', 'asyncio')


def access_log_level(message: str) -> Optional[str]:
    match = _ACCESS_LOG_STATUS.search(message)
    if not match:
        return None
    status_code = int(match.group(1))
    for threshold, level in _STATUS_LEVELS:
        if status_code >= threshold:
            return level
    return 'INFO'


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(_QUIET_DEBUG_LOGGERS):
            return

        message = record.getMessage()
        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Point loguru at the frame that called the stdlib logger
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def configure_sinks(logger: 'LoguruLogger') -> None:
    level = 'DEBUG' if settings.DEBUG else 'INFO'
    logger.add(sys.stdout, format=io_log_format, level=level, enqueue=True)

    # Hourly files in DEBUG mode only; production logs to stdout
    if not settings.DEBUG:
        return

    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    stamp = datetime.now().astimezone().strftime('%Y-%m-%d_%H')
    logger.add(
        str(log_dir() / f'{prefix}{stamp}.log'),
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=level,
    )


loguru_logger.remove()
custom_logger = loguru_logger.bind(**_default_extra())
configure_sinks(custom_logger)

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
