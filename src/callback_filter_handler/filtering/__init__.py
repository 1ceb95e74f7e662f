"""
Ready-made filter callables for CallbackFilterHandler
"""

from .context_filter import ContextFilter
from .level_filter import LevelFilter
from .message_filter import ChannelFilter, MessageFilter

__all__ = [
    "LevelFilter",
    "ContextFilter",
    "MessageFilter",
    "ChannelFilter",
]
