"""Request correlation ids.

Every response carries X-Request-ID: the client's value when supplied,
otherwise a fresh UUID. The id is also merged into structlog events.
"""

import uuid

from asgi_correlation_id import CorrelationIdMiddleware
from asgi_correlation_id.context import correlation_id
from fastapi import FastAPI


def setup_correlation_middleware(app: FastAPI) -> None:
    """Add the correlation id middleware to ``app``."""
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        generator=lambda: str(uuid.uuid4()),
        validator=None,  # Accept any client-supplied format
        transformer=lambda a: a,
    )


def get_correlation_id() -> str | None:
    """Return the current request's correlation id, or None outside a request."""
    try:
        return correlation_id.get()
    except LookupError:
        return None


__all__ = ["setup_correlation_middleware", "get_correlation_id"]
