from typing import Any, Dict, Iterable, List, Optional

from .handlers import Handler
from .levels import Level, LevelLike
from .processing import ProcessableHandlerMixin
from .record import LogRecord

# Process-wide logger registry
_loggers: Dict[str, "Logger"] = {}


class Logger(ProcessableHandlerMixin):
    """
    Channel logger walking a stack of handlers

    The most recently pushed handler is asked first. A handler returning True
    from ``handle`` stops the record from reaching the handlers below it.
    """

    def __init__(
        self,
        name: str,
        handlers: Optional[Iterable[Handler]] = None,
        processors: Optional[Iterable[Any]] = None,
    ):
        super().__init__()
        self.name = name
        self.handlers: List[Handler] = list(handlers or [])
        for processor in processors or []:
            self.push_processor(processor)

    def push_handler(self, handler: Handler) -> "Logger":
        self.handlers.insert(0, handler)
        return self

    def pop_handler(self) -> Handler:
        if not self.handlers:
            raise LookupError("You tried to pop from an empty handler stack.")
        return self.handlers.pop(0)

    def is_handling(self, level: LevelLike) -> bool:
        probe = LogRecord.create(level, "", channel=self.name)
        return any(handler.is_handling(probe) for handler in self.handlers)

    def log(
        self,
        level: LevelLike,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Log a message, returning False when no handler is handling it"""
        record = LogRecord.create(level, message, context, channel=self.name)
        return self.add_record(record)

    def add_record(self, record: LogRecord) -> bool:
        start = next(
            (i for i, handler in enumerate(self.handlers) if handler.is_handling(record)),
            None,
        )
        if start is None:
            return False

        record = self.process_record(record)

        # Each handler checks the record itself
        for handler in self.handlers[start:]:
            if handler.handle(record):
                break

        return True

    def reset(self) -> None:
        for handler in self.handlers:
            if handler.supports_reset():
                handler.reset()
        self.reset_processors()

    def close(self) -> None:
        for handler in self.handlers:
            handler.close()

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(Level.DEBUG, message, context)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(Level.INFO, message, context)

    def notice(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(Level.NOTICE, message, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(Level.WARNING, message, context)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(Level.ERROR, message, context)

    def critical(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(Level.CRITICAL, message, context)

    def alert(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(Level.ALERT, message, context)

    def emergency(self, message: str, context: Optional[Dict[str, Any]] = None) -> bool:
        return self.log(Level.EMERGENCY, message, context)


def get_logger(name: str) -> Logger:
    """Return the logger registered under ``name``, creating it on first use"""
    if name not in _loggers:
        _loggers[name] = Logger(name)
    return _loggers[name]
