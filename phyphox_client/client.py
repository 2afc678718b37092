from __future__ import annotations
import logging
import threading
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, Iterable, Optional
from urllib.parse import quote

from pydantic import ValidationError

from .channels import Channel
from .config import PHYPHOX_ADDRESS
from .exceptions import MalformedResponse
from .models import ChannelBuffer, RegistrySnapshot
from .transport import HttpTransport, Transport

logger = logging.getLogger(__name__)

ENVELOPE_KEY = "buffer"


def base_url(address: str) -> str:
    """Turn "host:port" into "http://host:port". A full http:// URL is accepted too."""
    address = address.strip().rstrip("/")
    if address.startswith("http://"):
        return address
    return f"http://{address}"


def _first_sample(entry: Any) -> Optional[float]:
    """
    Pull the first sample out of one buffer entry of the /get envelope.
    Anything that is not a JSON number ends up as None.
    """
    try:
        parsed = ChannelBuffer.model_validate(entry)
    except ValidationError:
        return None
    if not parsed.buffer:
        return None
    sample = parsed.buffer[0]
    # bool is an int subclass but never a measurement
    if isinstance(sample, bool) or not isinstance(sample, (int, float)):
        return None
    try:
        return float(sample)
    except OverflowError:
        # integer literal beyond float range
        return None


def parse_envelope(payload: Any, channels: Iterable[Channel]) -> Dict[Channel, Optional[float]]:
    """
    Map each requested channel to its value in a decoded /get reply.

    Raises MalformedResponse if the top-level envelope key is missing. Channels
    the envelope does not carry map to None.
    """
    if not isinstance(payload, Mapping) or ENVELOPE_KEY not in payload:
        raise MalformedResponse(payload)

    envelope = payload[ENVELOPE_KEY]
    if not isinstance(envelope, Mapping):
        logger.warning(f"'{ENVELOPE_KEY}' envelope is {type(envelope).__name__}, not an object")
        envelope = {}

    values: Dict[Channel, Optional[float]] = {}
    for channel in channels:
        value = _first_sample(envelope.get(channel.wire_name))
        if value is None:
            logger.debug(f"No value for {channel.wire_name} in response")
        values[channel] = value
    return values


class PhyphoxClient:
    """
    Cache of the latest value of each registered channel on one phyphox server.

    Channels are added with register(), refreshed in one batched request by
    retrieve() and read back with get(). Sensor handles created by Phyphox share
    a single instance of this class, so a retrieve() is immediately visible
    through all of them.

    Not meant for concurrent polling. The lock only keeps the cache consistent
    if a second thread registers or clears while a retrieve is in flight.
    """

    def __init__(self, address: str | None = None, transport: Transport | None = None) -> None:
        self.url = base_url(address or PHYPHOX_ADDRESS)
        self.transport: Transport = transport or HttpTransport()
        self._values: Dict[Channel, Optional[float]] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"PhyphoxClient({self.url!r}, {len(self)} channels)"

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __contains__(self, channel: object) -> bool:
        with self._lock:
            return channel in self._values

    # --- registry ------------------------------------------------------------

    def register(self, channel: Channel) -> None:
        """Start tracking channel. Registering it again resets its value to None."""
        with self._lock:
            self._values[channel] = None

    def get(self, channel: Channel) -> Optional[float]:
        """Cached value of channel, or None if unregistered or not retrieved."""
        with self._lock:
            return self._values.get(channel)

    def registered(self) -> FrozenSet[Channel]:
        with self._lock:
            return frozenset(self._values)

    def snapshot(self) -> RegistrySnapshot:
        with self._lock:
            return RegistrySnapshot(
                values={channel.wire_name: value for channel, value in self._values.items()}
            )

    def clear_variables(self) -> None:
        """Forget every registered channel. The experiment itself is left alone."""
        with self._lock:
            count = len(self._values)
            self._values.clear()
        logger.info(f"Cleared {count} registered channels")

    # --- server --------------------------------------------------------------

    def retrieve(self) -> None:
        """
        Fetch the latest sample of every registered channel in one GET.

        Raises TransportError if the request fails and MalformedResponse if the
        reply has no envelope; the cache is unchanged in both cases. A channel the
        reply does not carry is set back to None.
        """
        with self._lock:
            channels = list(self._values)

        url = f"{self.url}/get?{'&'.join(c.wire_name for c in channels)}"
        payload = self.transport.fetch_json(url)
        try:
            values = parse_envelope(payload, channels)
        except MalformedResponse:
            logger.error(f"Malformed response from {url}")
            raise

        with self._lock:
            for channel, value in values.items():
                # cleared while the request was in flight
                if channel in self._values:
                    self._values[channel] = value

    def control(self, cmd: str) -> None:
        """Send a control command to the experiment. The reply body is ignored."""
        url = f"{self.url}/control?cmd={quote(cmd, safe='')}"
        self.transport.send(url)
        logger.info(f"Sent control command {cmd!r} to {self.url}")

    def start(self) -> None:
        """Start the experiment. No effect if it is already running."""
        self.control("start")

    def stop(self) -> None:
        """Stop the experiment. No effect if it is not running."""
        self.control("stop")

    def clear(self) -> None:
        """Clear the experiment's buffers on the phone. This also stops it."""
        self.control("clear")
