"""
Record processor support shared by handlers and loggers
"""

from typing import Callable, List, Tuple

from .exceptions import ConfigurationError
from .record import LogRecord

Processor = Callable[[LogRecord], LogRecord]


class ProcessableHandlerMixin:
    """
    Keeps an ordered list of record processors

    Processors run in registration order. Each receives the record returned by
    the previous one, so a processor may either mutate ``record.extra`` in place
    or return a new record.
    """

    def __init__(self, *args, **kwargs):
        self._processors: List[Processor] = []
        super().__init__(*args, **kwargs)

    @property
    def processors(self) -> Tuple[Processor, ...]:
        return tuple(self._processors)

    def push_processor(self, processor: Processor) -> "ProcessableHandlerMixin":
        if not callable(processor):
            raise ConfigurationError(
                f"Processors must be callable, got {type(processor).__name__}"
            )
        self._processors.append(processor)
        return self

    def process_record(self, record: LogRecord) -> LogRecord:
        for processor in self._processors:
            processed = processor(record)
            if processed is None:
                raise ConfigurationError(
                    f"Processor {processor!r} did not return a record"
                )
            record = processed
        return record

    def reset_processors(self) -> None:
        for processor in self._processors:
            reset = getattr(processor, "reset", None)
            if callable(reset):
                reset()

