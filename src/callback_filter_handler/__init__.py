"""
Callback Filter Handler

Wraps a log handler and forwards only the records that pass a list of
filter callables.
"""

__version__ = "1.0.0"

from .config import FilterHandlerConfig, get_default_config, set_default_config
from .context import (
    RequestState,
    get_custom_context,
    get_request_id,
    get_request_state,
    get_user_context,
    request_context,
    set_custom_context,
    set_request_id,
    set_user_context,
    update_custom_context,
)
from .exceptions import CallbackFilterError, ConfigurationError, InvalidLevelError
from .filtering import ChannelFilter, ContextFilter, LevelFilter, MessageFilter
from .handlers import (
    AbstractHandler,
    CallbackFilterHandler,
    DispatchingHandler,
    Handler,
    HandlerFactory,
    InMemoryHandler,
    RecordFilter,
    StdlibHandler,
    create_filter_handler,
)
from .levels import Level, from_stdlib_level, to_level, to_stdlib_level
from .logger import Logger, get_logger
from .processing import ProcessableHandlerMixin, Processor
from .processors import RequestContextProcessor, UidProcessor
from .record import LogRecord

__all__ = [
    # Core
    "CallbackFilterHandler",
    "HandlerFactory",
    "RecordFilter",
    # Handlers
    "Handler",
    "AbstractHandler",
    "InMemoryHandler",
    "StdlibHandler",
    "DispatchingHandler",
    "create_filter_handler",
    # Records and levels
    "LogRecord",
    "Level",
    "to_level",
    "to_stdlib_level",
    "from_stdlib_level",
    # Filters
    "LevelFilter",
    "ContextFilter",
    "MessageFilter",
    "ChannelFilter",
    # Processing
    "ProcessableHandlerMixin",
    "Processor",
    "UidProcessor",
    "RequestContextProcessor",
    # Context
    "request_context",
    "RequestState",
    "get_request_state",
    "get_request_id",
    "set_request_id",
    "get_user_context",
    "set_user_context",
    "get_custom_context",
    "set_custom_context",
    "update_custom_context",
    # Logger
    "Logger",
    "get_logger",
    # Configuration
    "FilterHandlerConfig",
    "get_default_config",
    "set_default_config",
    # Errors
    "CallbackFilterError",
    "ConfigurationError",
    "InvalidLevelError",
]
