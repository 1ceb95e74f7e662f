"""
Handler wrapper that filters records through a list of callables
"""

import json
import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from ..exceptions import ConfigurationError
from ..levels import Level, LevelLike
from ..processing import ProcessableHandlerMixin
from ..record import LogRecord
from .base import AbstractHandler, Handler

logger = logging.getLogger(__name__)

RecordFilter = Callable[[LogRecord, Level], bool]
HandlerFactory = Callable[[Optional[LogRecord], "CallbackFilterHandler"], Handler]


class CallbackFilterHandler(ProcessableHandlerMixin, AbstractHandler):
    """
    Forwards records to a nested handler when they pass every filter

    The nested handler may be given directly or as a factory called with
    ``(record, self)``. A factory runs on first use and its handler is kept
    for the lifetime of this wrapper.

    Filters are called as ``filter(record, min_level)`` in the order given and
    evaluation stops at the first falsy result. Records with an empty message
    are only checked against the minimum level.
    """

    def __init__(
        self,
        handler: Union[Handler, HandlerFactory],
        filters: Iterable[RecordFilter],
        level: LevelLike = Level.DEBUG,
        bubble: bool = True,
    ):
        super().__init__(level, bubble)

        self._handler: Optional[Handler] = None
        self._factory: Optional[HandlerFactory] = None
        if isinstance(handler, Handler):
            self._handler = handler
        elif callable(handler):
            self._factory = handler
        else:
            raise ConfigurationError(
                f"Expected a Handler or a factory callable, got {type(handler).__name__}"
            )

        self._filters: List[RecordFilter] = []
        for record_filter in filters:
            if not callable(record_filter):
                try:
                    serialized = json.dumps(record_filter)
                except (TypeError, ValueError) as e:
                    raise ConfigurationError("The given filter is not callable") from e
                raise ConfigurationError(
                    f"The given filter ({serialized}) is not callable"
                )
            self._filters.append(record_filter)

    @property
    def filters(self) -> Tuple[RecordFilter, ...]:
        return tuple(self._filters)

    @property
    def is_resolved(self) -> bool:
        """Whether the nested handler has been built"""
        return self._handler is not None

    def is_handling(self, record: LogRecord) -> bool:
        if not super().is_handling(record):
            return False

        if record.message:
            for record_filter in self._filters:
                if not record_filter(record, self.level):
                    return False

        return True

    def handle(self, record: LogRecord) -> bool:
        if not self.is_handling(record):
            return False

        record = self.process_record(record)

        self.get_handler(record).handle(record)

        return not self.bubble

    def handle_batch(self, records: Sequence[LogRecord]) -> None:
        filtered = [record for record in records if self.is_handling(record)]

        if not filtered:
            return

        self.get_handler(filtered[-1]).handle_batch(filtered)

    def get_handler(self, record: Optional[LogRecord] = None) -> Handler:
        """
        Return the nested handler, building it from the factory if needed

        A factory that does not return a Handler raises ConfigurationError and
        is called again on the next attempt.
        """
        if self._handler is None:
            handler = self._factory(record, self)

            if not isinstance(handler, Handler):
                raise ConfigurationError(
                    "The handler factory did not produce a Handler"
                )

            logger.debug(
                "Resolved nested handler %s from factory", type(handler).__name__
            )
            self._handler = handler
            self._factory = None

        return self._handler

    def supports_reset(self) -> bool:
        return True

    def reset(self) -> None:
        self.reset_processors()

        handler = self.get_handler()

        if handler.supports_reset():
            handler.reset()
