"""
Context-based record filtering
"""

from typing import Any, Dict, List, Optional

from ..levels import Level
from ..record import LogRecord


class ContextFilter:
    """Filter records based on their context values"""

    def __init__(
        self,
        required_keys: Optional[List[str]] = None,
        excluded_keys: Optional[List[str]] = None,
        key_value_filters: Optional[Dict[str, Any]] = None,
    ):
        self.required_keys = set(required_keys or [])
        self.excluded_keys = set(excluded_keys or [])
        self.key_value_filters = key_value_filters or {}

    def __call__(self, record: LogRecord, min_level: Level) -> bool:
        context = record.context

        if self.required_keys and not self.required_keys.issubset(context.keys()):
            return False

        if self.excluded_keys and any(key in context for key in self.excluded_keys):
            return False

        # Only keys present in the context are compared
        for key, expected_value in self.key_value_filters.items():
            if key in context and context[key] != expected_value:
                return False

        return True
