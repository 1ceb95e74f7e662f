"""
Immutable log record passed between loggers, processors and handlers
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .levels import Level, LevelLike, from_stdlib_level, to_level

CONTEXT_PREFIX = "ctx_"


@dataclass(frozen=True)
class LogRecord:
    """A single log event"""

    timestamp: datetime
    channel: str
    level: Level
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        level: LevelLike,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        channel: str = "app",
        extra: Optional[Dict[str, Any]] = None,
    ) -> "LogRecord":
        """Create a record stamped with the current UTC time"""
        return cls(
            timestamp=datetime.now(timezone.utc),
            channel=channel,
            level=to_level(level),
            message=message,
            context=dict(context or {}),
            extra=dict(extra or {}),
        )

    @classmethod
    def from_stdlib(cls, record: logging.LogRecord) -> "LogRecord":
        """Convert a logging module record, collecting ctx_ attributes as context"""
        context = {
            key[len(CONTEXT_PREFIX) :]: value
            for key, value in record.__dict__.items()
            if key.startswith(CONTEXT_PREFIX)
        }
        return cls(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
            channel=record.name,
            level=from_stdlib_level(record.levelno),
            message=record.getMessage(),
            context=context,
        )

    @property
    def level_name(self) -> str:
        return self.level.level_name

    def with_extra(self, **values: Any) -> "LogRecord":
        """Return a copy with ``values`` merged into extra"""
        return dataclasses.replace(self, extra={**self.extra, **values})
