"""
exceptions.py

Errors raised by the phyphox client.

Only the HTTP exchange and the shape of the /get reply can fail. A channel that
is missing from an otherwise valid reply is not an error: its cached value
simply becomes None.

    # Narrow:
    except TransportError: ...

    # Anything from this package:
    except PhyphoxError: ...
"""
from __future__ import annotations
from typing import Any


class PhyphoxError(Exception):
    """Base class for all phyphox client errors."""


class TransportError(PhyphoxError):
    """Raised when the GET to the experiment server could not be completed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class MalformedResponse(PhyphoxError):
    """Raised when a /get reply has no top-level "buffer" envelope."""

    def __init__(self, payload: Any) -> None:
        super().__init__(f"response has no 'buffer' envelope: {payload!r:.200}")
        self.payload = payload
