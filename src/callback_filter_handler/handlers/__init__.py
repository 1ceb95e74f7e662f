"""
Record handlers, including the callback filter wrapper
"""

from .base import AbstractHandler, Handler
from .callback_filter import CallbackFilterHandler, HandlerFactory, RecordFilter
from .memory import InMemoryHandler
from .stdlib import DispatchingHandler, StdlibHandler
from .utils import create_filter_handler

__all__ = [
    "Handler",
    "AbstractHandler",
    "CallbackFilterHandler",
    "HandlerFactory",
    "RecordFilter",
    "InMemoryHandler",
    "StdlibHandler",
    "DispatchingHandler",
    "create_filter_handler",
]
