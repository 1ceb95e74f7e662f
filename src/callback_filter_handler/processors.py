"""
Stock record processors
"""

import secrets

from .context import get_custom_context, get_request_id, get_user_context
from .record import LogRecord


class UidProcessor:
    """Adds a unique identifier to ``extra["uid"]``, regenerated on reset"""

    def __init__(self, length: int = 7):
        valid = isinstance(length, int) and not isinstance(length, bool)
        if not valid or not 0 < length <= 32:
            raise ValueError("The uid length must be an integer between 1 and 32")
        self.length = length
        self._uid = self._generate_uid()

    @property
    def uid(self) -> str:
        return self._uid

    def __call__(self, record: LogRecord) -> LogRecord:
        record.extra["uid"] = self._uid
        return record

    def reset(self) -> None:
        self._uid = self._generate_uid()

    def _generate_uid(self) -> str:
        return secrets.token_hex((self.length + 1) // 2)[: self.length]


class RequestContextProcessor:
    """Copies the current request id and user/custom context into extra"""

    def __init__(self, include_request_id: bool = True, include_user_context: bool = True):
        self.include_request_id = include_request_id
        self.include_user_context = include_user_context

    def __call__(self, record: LogRecord) -> LogRecord:
        if self.include_request_id:
            req_id = get_request_id()
            if req_id:
                record.extra["request_id"] = req_id

        if self.include_user_context:
            record.extra.update(
                {k: v for k, v in get_user_context().items() if v is not None}
            )

        record.extra.update(
            {k: v for k, v in get_custom_context().items() if v is not None}
        )
        return record
