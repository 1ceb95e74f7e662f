"""
Bridges between these handlers and the standard logging module
"""

import logging
from typing import Any, Dict, Union

from ..levels import Level, LevelLike, to_stdlib_level
from ..record import CONTEXT_PREFIX, LogRecord
from .base import AbstractHandler, Handler


class StdlibHandler(AbstractHandler):
    """
    Emits records through a standard library logger

    Context and extra fields become ``ctx_`` prefixed attributes of the
    resulting ``logging.LogRecord``; the channel is kept as ``channel``.
    """

    def __init__(
        self,
        logger: Union[logging.Logger, str],
        level: LevelLike = Level.DEBUG,
        bubble: bool = True,
    ):
        super().__init__(level, bubble)
        self.logger = logging.getLogger(logger) if isinstance(logger, str) else logger

    def handle(self, record: LogRecord) -> bool:
        if not self.is_handling(record):
            return False

        self.logger.log(
            to_stdlib_level(record.level),
            record.message,
            extra=self._build_extra(record),
        )
        return not self.bubble

    def _build_extra(self, record: LogRecord) -> Dict[str, Any]:
        fields = {**record.context, **record.extra}
        extra = {
            f"{CONTEXT_PREFIX}{key}": value
            for key, value in fields.items()
            if value is not None
        }
        extra["channel"] = record.channel
        return extra


class DispatchingHandler(logging.Handler):
    """
    logging.Handler that passes records on to a Handler

    Attach it to a standard logger to run its records through a
    CallbackFilterHandler or any other Handler.
    """

    def __init__(self, handler: Handler, level: int = logging.NOTSET):
        super().__init__(level)
        self.handler = handler

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.handler.handle(LogRecord.from_stdlib(record))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        try:
            self.handler.close()
        finally:
            super().close()
