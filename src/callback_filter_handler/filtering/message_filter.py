"""
Message and channel based record filtering
"""

import re
from typing import Iterable, Literal, Pattern, Union

from ..levels import Level
from ..record import LogRecord

MatchMode = Literal["search", "match", "fullmatch"]


class MessageFilter:
    """Accept records whose message matches a regular expression"""

    def __init__(
        self,
        pattern: Union[str, Pattern[str]],
        mode: MatchMode = "search",
        invert: bool = False,
    ):
        if mode not in ("search", "match", "fullmatch"):
            raise ValueError(f"Unknown match mode {mode!r}")
        self.pattern = re.compile(pattern)
        self.mode = mode
        self.invert = invert

    def __call__(self, record: LogRecord, min_level: Level) -> bool:
        matched = getattr(self.pattern, self.mode)(record.message) is not None
        return matched != self.invert


class ChannelFilter:
    """Accept records from the given channels, or all others when ``exclude`` is set"""

    def __init__(self, channels: Iterable[str], exclude: bool = False):
        self.channels = frozenset(channels)
        self.exclude = exclude

    def __call__(self, record: LogRecord, min_level: Level) -> bool:
        return (record.channel in self.channels) != self.exclude
