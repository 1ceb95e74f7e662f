"""
Utility functions for building handlers
"""

from typing import Iterable, Optional, Union

from ..config import FilterHandlerConfig, get_default_config
from .base import Handler
from .callback_filter import CallbackFilterHandler, HandlerFactory, RecordFilter


def create_filter_handler(
    handler: Union[Handler, HandlerFactory],
    filters: Iterable[RecordFilter],
    config: Optional[FilterHandlerConfig] = None,
) -> CallbackFilterHandler:
    """
    Create a CallbackFilterHandler from configuration

    Args:
        handler: Nested handler or factory building it
        filters: Filter callables applied to each record
        config: Level and bubble settings, the process default when omitted

    Returns:
        Configured filter handler
    """
    config = config or get_default_config()
    return CallbackFilterHandler(
        handler, filters, level=config.level, bubble=config.bubble
    )
