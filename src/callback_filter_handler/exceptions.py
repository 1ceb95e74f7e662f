"""
Exception hierarchy for callback filter handling
"""


class CallbackFilterError(Exception):
    """Base class for all errors raised by this package"""


class ConfigurationError(CallbackFilterError, RuntimeError):
    """Raised when a handler, filter, factory or processor is misconfigured"""


class InvalidLevelError(CallbackFilterError, ValueError):
    """Raised when a value cannot be converted to a log level"""
