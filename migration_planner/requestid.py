"""
Request-scoped correlation identifiers.

The active request ID lives in a ContextVar so any code running inside a
request (route handlers, log formatters) can read it without it being
passed around explicitly.
"""

import uuid
from contextvars import ContextVar, Token

_request_id: ContextVar[str] = ContextVar("request_id", default="")


def generate() -> str:
    """Return a new opaque request identifier."""
    return str(uuid.uuid4())


def new_context(request_id: str) -> Token:
    """Bind request_id to the current context; pass the token to reset()."""
    return _request_id.set(request_id)


def reset(token: Token) -> None:
    _request_id.reset(token)


def from_context() -> str:
    """Return the request ID bound to the current context, or ''."""
    return _request_id.get()
