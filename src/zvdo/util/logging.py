from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
import logging
from typing import Iterator

_SECTION_DEPTH: ContextVar[int] = ContextVar("section_depth", default=0)

LOG_FORMAT = "%(levelname)s %(indent)s%(message)s"


class IndentFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.indent = "  " * _SECTION_DEPTH.get()
        return True


@contextmanager
def log_indent() -> Iterator[None]:
    token = _SECTION_DEPTH.set(_SECTION_DEPTH.get() + 1)
    try:
        yield
    finally:
        _SECTION_DEPTH.reset(token)


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr, nested by the current ``log_indent`` depth."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(item, IndentFilter) for item in handler.filters):
            handler.addFilter(IndentFilter())
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
