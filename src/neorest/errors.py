"""Exceptions raised by the REST client.

Every failure the client detects is raised as a subclass of `NeoRestError`.
Transport failures are not wrapped: they surface as the `httpx.HTTPError`
raised by the transport.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import NeoError

logger = logging.getLogger(__name__)


class NeoRestError(Exception):
    """Base class for all client errors."""


class NotFound(NeoRestError):
    """The server answered 404 for the requested resource."""

    def __init__(self, url: str):
        super().__init__(f"not found: {url}")
        self.url = url


class BadResponse(NeoRestError):
    """The server answered with a status the operation does not accept."""

    def __init__(self, status: int, url: str, error: NeoError | None = None, reason: str | None = None):
        detail = reason or (error.message if error is not None and error.message else None)
        msg = f"bad response from {url}: HTTP {status}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.status = status
        self.url = url
        self.error = error


class FeatureUnavailable(NeoRestError):
    """The server does not advertise the endpoint an operation needs."""


class Unauthorized(NeoRestError):
    """The server rejected the supplied credentials."""


class InvalidDatabase(NeoRestError):
    """The URL does not point at a database service root."""


class MalformedEntity(NeoRestError):
    """An entity's self URI does not end in a numeric id.

    This means the object was built from a response the server should never
    send; callers are not expected to recover from it.
    """


def log_pretty(error: NeoError | None) -> None:
    if error is None:
        return
    logger.warning(f"Server error payload:\n{error.pretty()}")
