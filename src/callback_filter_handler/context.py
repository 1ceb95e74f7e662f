"""
Request-scoped values picked up by RequestContextProcessor
"""

import dataclasses
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RequestState:
    request_id: str = ""
    user: Dict[str, Any] = field(default_factory=dict)
    custom: Dict[str, Any] = field(default_factory=dict)


_state: ContextVar[RequestState] = ContextVar("callback_filter_request_state")


def get_request_state() -> RequestState:
    return _state.get(RequestState())


def _update_state(**changes: Any) -> None:
    _state.set(dataclasses.replace(get_request_state(), **changes))


def get_request_id() -> str:
    """Get current request ID"""
    return get_request_state().request_id


def set_request_id(req_id: str) -> None:
    _update_state(request_id=req_id)


def get_user_context() -> Dict[str, Any]:
    """Get current user context"""
    return dict(get_request_state().user)


def set_user_context(context: Dict[str, Any]) -> None:
    _update_state(user=dict(context or {}))


def get_custom_context() -> Dict[str, Any]:
    """Get current custom context"""
    return dict(get_request_state().custom)


def set_custom_context(context: Dict[str, Any]) -> None:
    _update_state(custom=dict(context or {}))


def update_custom_context(**kwargs: Any) -> None:
    """Merge fields into the custom context of the current request"""
    _update_state(custom={**get_request_state().custom, **kwargs})


@contextmanager
def request_context(
    user_id: Optional[str] = None,
    tenant_id: Optional[str] = None,
    request_id: Optional[str] = None,
    **custom_fields: Any,
) -> Generator[str, None, None]:
    """
    Scope a request id and user/custom fields to the enclosed block

    The previous state is restored on exit. Yields the request id in use.
    """
    user = {
        key: value
        for key, value in (("user_id", user_id), ("tenant_id", tenant_id))
        if value is not None
    }
    state = RequestState(
        request_id=request_id or str(uuid.uuid4()),
        user=user,
        custom=dict(custom_fields),
    )

    token = _state.set(state)
    try:
        yield state.request_id
    finally:
        _state.reset(token)
