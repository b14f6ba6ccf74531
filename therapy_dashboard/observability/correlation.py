"""
Request correlation IDs.

The id of the request being served is held in a ContextVar so log records
emitted anywhere below the middleware can carry it.

Dependencies: contextvars
System role: Request tracing
"""

import re
import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

# Caller-supplied ids are echoed in headers and logs, so keep them short and plain.
_VALID_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


def bind_correlation_id(incoming: str | None = None) -> tuple[str, Token]:
    """
    Bind the id for the current request.

    An incoming X-Correlation-ID is reused when it is well formed; otherwise
    a new UUID is generated.

    Returns:
        tuple[str, Token]: The bound id and the token for reset_correlation_id
    """
    value = incoming if incoming and _VALID_ID.match(incoming) else uuid.uuid4().hex
    return value, _correlation_id.set(value)


def reset_correlation_id(token: Token) -> None:
    _correlation_id.reset(token)


def get_correlation_id() -> str:
    """Current request's id, or "" outside a request."""
    return _correlation_id.get()
