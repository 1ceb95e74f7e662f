"""
In-memory handler that records everything it handles
"""

from collections import defaultdict
from typing import Any, Dict, List

from ..levels import Level, LevelLike, to_level
from ..processing import ProcessableHandlerMixin
from ..record import LogRecord
from .base import AbstractHandler


class InMemoryHandler(ProcessableHandlerMixin, AbstractHandler):
    """
    Keeps handled records in memory

    Useful for tests and debugging.
    """

    def __init__(self, level: LevelLike = Level.DEBUG, bubble: bool = True):
        super().__init__(level, bubble)
        self.records: List[LogRecord] = []
        self.records_by_level: Dict[Level, List[LogRecord]] = defaultdict(list)

    def handle(self, record: LogRecord) -> bool:
        if not self.is_handling(record):
            return False

        record = self.process_record(record)
        self.records.append(record)
        self.records_by_level[record.level].append(record)

        return not self.bubble

    def clear(self) -> None:
        self.records = []
        self.records_by_level = defaultdict(list)

    def supports_reset(self) -> bool:
        return True

    def reset(self) -> None:
        self.clear()
        self.reset_processors()

    def has_records(self, level: LevelLike) -> bool:
        return bool(self.records_by_level.get(to_level(level)))

    def has_record_that_contains(self, message: str, level: LevelLike) -> bool:
        return any(
            message in record.message
            for record in self.records_by_level.get(to_level(level), [])
        )

    def has_only_records_that_contain(self, message: str, level: LevelLike) -> bool:
        """True when every record has ``level`` and at least one contains ``message``"""
        levels = [lvl for lvl, records in self.records_by_level.items() if records]
        if levels != [to_level(level)]:
            return False
        return self.has_record_that_contains(message, level)

    def has_only_records_matching(self, **fields: Any) -> bool:
        """True when every record has the given attribute values"""
        for record in self.records:
            for name, expected in fields.items():
                if not hasattr(record, name):
                    return False
                if getattr(record, name) != expected:
                    return False
        return True

