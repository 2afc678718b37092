from __future__ import annotations
import logging
from typing import Any, Protocol

import requests

from .config import PHYPHOX_TIMEOUT_S
from .exceptions import TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """
    Minimal interface the client needs from the HTTP layer.
    Both calls block until the exchange is finished and raise TransportError on failure.
    """

    def fetch_json(self, url: str) -> Any:
        """GET url and return the decoded JSON body."""
        ...

    def send(self, url: str) -> None:
        """GET url and discard the body."""
        ...


class HttpTransport:
    """
    Plain requests.get per call, no session or retries.

    Non-2xx replies count as failures. The phyphox server answers every valid
    request with 200, so anything else means the address or command is wrong.
    """

    def __init__(self, timeout_s: float = PHYPHOX_TIMEOUT_S) -> None:
        self.timeout_s = timeout_s

    def _get(self, url: str) -> requests.Response:
        logger.debug(f"GET {url}")
        try:
            response = requests.get(url, timeout=self.timeout_s)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error on {url}: {e}")
            raise TransportError(url, str(e)) from e
        return response

    def fetch_json(self, url: str) -> Any:
        response = self._get(url)
        try:
            return response.json()
        except ValueError as e:
            # requests' JSONDecodeError subclasses ValueError
            logger.error(f"Undecodable body from {url}: {e}")
            raise TransportError(url, f"invalid JSON body: {e}") from e

    def send(self, url: str) -> None:
        self._get(url)
