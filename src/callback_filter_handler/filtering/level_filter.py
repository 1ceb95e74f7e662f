"""
Level-based record filtering
"""

from typing import FrozenSet, Iterable, Optional

from ..levels import Level, LevelLike, to_level
from ..record import LogRecord


class LevelFilter:
    """Accept records whose level is one of ``levels``, optionally capped by ``max_level``"""

    def __init__(
        self,
        levels: Optional[Iterable[LevelLike]] = None,
        max_level: Optional[LevelLike] = None,
    ):
        self.levels: Optional[FrozenSet[Level]] = (
            frozenset(to_level(level) for level in levels) if levels is not None else None
        )
        self.max_level = to_level(max_level) if max_level is not None else None

    def __call__(self, record: LogRecord, min_level: Level) -> bool:
        if self.levels is not None and record.level not in self.levels:
            return False
        if self.max_level is not None and record.level > self.max_level:
            return False
        return True

    def __repr__(self) -> str:
        levels = sorted(self.levels) if self.levels is not None else None
        return f"LevelFilter(levels={levels}, max_level={self.max_level})"
