"""
Log severity levels and conversions
"""

import logging
from enum import IntEnum
from typing import Dict, Union

from .exceptions import InvalidLevelError


class Level(IntEnum):
    """Severity levels ordered by rank"""

    DEBUG = 100
    INFO = 200
    NOTICE = 250
    WARNING = 300
    ERROR = 400
    CRITICAL = 500
    ALERT = 550
    EMERGENCY = 600

    @property
    def level_name(self) -> str:
        """Display name, e.g. ``Warning``"""
        return self.name.capitalize()


LevelLike = Union[Level, int, str]

_STDLIB_LEVELS: Dict[Level, int] = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.NOTICE: logging.INFO + 5,
    Level.WARNING: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.CRITICAL: logging.CRITICAL,
    Level.ALERT: logging.CRITICAL,
    Level.EMERGENCY: logging.CRITICAL,
}


def to_level(value: LevelLike) -> Level:
    """
    Convert a level, rank or name into a Level

    Names are matched case-insensitively, numeric strings are treated as ranks.
    """
    if isinstance(value, Level):
        return value

    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isdigit():
            return to_level(int(stripped))
        try:
            return Level[stripped.upper()]
        except KeyError:
            raise InvalidLevelError(
                f'Level "{value}" is not defined, use one of: '
                + ", ".join(level.name for level in Level)
            ) from None

    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Level(value)
        except ValueError:
            raise InvalidLevelError(
                f'Level "{value}" is not defined, use one of: '
                + ", ".join(str(level.value) for level in Level)
            ) from None

    raise InvalidLevelError(f"Cannot convert {value!r} to a log level")


def to_stdlib_level(level: LevelLike) -> int:
    """Map a level onto the numbers used by the logging module"""
    return _STDLIB_LEVELS[to_level(level)]


def from_stdlib_level(levelno: int) -> Level:
    """Map a logging module level number back onto a Level"""
    result = Level.DEBUG
    for level in (
        Level.DEBUG,
        Level.INFO,
        Level.NOTICE,
        Level.WARNING,
        Level.ERROR,
        Level.CRITICAL,
    ):
        if _STDLIB_LEVELS[level] <= levelno:
            result = level
    return result
