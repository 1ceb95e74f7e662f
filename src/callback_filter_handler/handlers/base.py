"""
Base classes for record handlers
"""

from abc import ABC, abstractmethod
from typing import Sequence

from ..levels import Level, LevelLike, to_level
from ..record import LogRecord


class Handler(ABC):
    """
    Destination for log records

    ``handle`` returns True when the record must not bubble to the next
    handler of the stack. Handlers that can be reset override
    ``supports_reset`` as well as ``reset``.
    """

    @abstractmethod
    def is_handling(self, record: LogRecord) -> bool:
        """Whether ``handle`` would accept the record"""

    @abstractmethod
    def handle(self, record: LogRecord) -> bool:
        """Handle a single record"""

    @abstractmethod
    def handle_batch(self, records: Sequence[LogRecord]) -> None:
        """Handle several records at once"""

    def close(self) -> None:
        pass

    def supports_reset(self) -> bool:
        return False

    def reset(self) -> None:
        pass


class AbstractHandler(Handler):
    """Handler with a minimum level and a bubble flag"""

    def __init__(self, level: LevelLike = Level.DEBUG, bubble: bool = True):
        self.level = level
        self.bubble = bubble

    @property
    def level(self) -> Level:
        return self._level

    @level.setter
    def level(self, value: LevelLike) -> None:
        self._level = to_level(value)

    def is_handling(self, record: LogRecord) -> bool:
        return record.level >= self._level

    def handle_batch(self, records: Sequence[LogRecord]) -> None:
        for record in records:
            self.handle(record)
