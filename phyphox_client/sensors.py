# phyphox_client/sensors.py
"""
Sensor-level view over PhyphoxClient.

A kind (SingleValueKind, ThreeAxisKind) only knows which Channel plays which
role for a sensor. A handle (SingleValueSensor, ThreeAxisSensor) pairs a kind
with a shared PhyphoxClient and forwards register/read calls to it. Handles keep
no values of their own, so every handle over the same client sees the result of
the latest retrieve().
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .channels import Channel
from .client import PhyphoxClient


class SingleValueKind(Enum):
    LIGHT = "light"

    # Enum already defines .value
    def value_channel(self) -> Channel:
        return _SINGLE_VALUE_CHANNELS[self]["value"]

    def time(self) -> Channel:
        return _SINGLE_VALUE_CHANNELS[self]["time"]

    def channel(self, role: str) -> Channel:
        """Channel for role, one of "value" or "time"."""
        return _role_lookup(_SINGLE_VALUE_CHANNELS[self], self, role)


class ThreeAxisKind(Enum):
    MAGNETOMETER = "magnetometer"
    ACCELERATION = "acceleration"
    GYROSCOPE = "gyroscope"

    def x(self) -> Channel:
        return _THREE_AXIS_CHANNELS[self]["x"]

    def y(self) -> Channel:
        return _THREE_AXIS_CHANNELS[self]["y"]

    def z(self) -> Channel:
        return _THREE_AXIS_CHANNELS[self]["z"]

    def abs(self) -> Channel:
        return _THREE_AXIS_CHANNELS[self]["abs"]

    def time(self) -> Channel:
        return _THREE_AXIS_CHANNELS[self]["time"]

    def channel(self, role: str) -> Channel:
        """Channel for role, one of "x", "y", "z", "abs" or "time"."""
        return _role_lookup(_THREE_AXIS_CHANNELS[self], self, role)


SensorKind = Union[SingleValueKind, ThreeAxisKind]

SINGLE_VALUE_ROLES = ("value", "time")
THREE_AXIS_ROLES = ("x", "y", "z", "abs", "time")

_SINGLE_VALUE_CHANNELS: Dict[SingleValueKind, Dict[str, Channel]] = {
    SingleValueKind.LIGHT: {"value": Channel.LIGHT, "time": Channel.LIGHT_TIME},
}

_THREE_AXIS_CHANNELS: Dict[ThreeAxisKind, Dict[str, Channel]] = {
    ThreeAxisKind.MAGNETOMETER: {
        "x": Channel.MAGNETOMETER_X,
        "y": Channel.MAGNETOMETER_Y,
        "z": Channel.MAGNETOMETER_Z,
        "abs": Channel.MAGNETOMETER_ABS,
        "time": Channel.MAGNETOMETER_TIME,
    },
    ThreeAxisKind.ACCELERATION: {
        "x": Channel.ACCELERATION_X,
        "y": Channel.ACCELERATION_Y,
        "z": Channel.ACCELERATION_Z,
        "abs": Channel.ACCELERATION_ABS,
        "time": Channel.ACCELERATION_TIME,
    },
    ThreeAxisKind.GYROSCOPE: {
        "x": Channel.GYROSCOPE_X,
        "y": Channel.GYROSCOPE_Y,
        "z": Channel.GYROSCOPE_Z,
        "abs": Channel.GYROSCOPE_ABS,
        "time": Channel.GYROSCOPE_TIME,
    },
}


def _role_lookup(roles: Dict[str, Channel], kind: Enum, role: str) -> Channel:
    try:
        return roles[role]
    except KeyError:
        raise ValueError(
            f"{kind.name} has no {role!r} channel; expected one of {sorted(roles)}"
        ) from None


class _SensorHandle:
    def __init__(self, kind: SensorKind, client: PhyphoxClient) -> None:
        self.kind = kind
        self.client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self.client!r})"

    def _register(self, channel: Channel) -> None:
        self.client.register(channel)

    def _read(self, channel: Channel) -> Optional[float]:
        return self.client.get(channel)


class SingleValueSensor(_SensorHandle):
    """Handle for a sensor that reports one value per sample, e.g. light."""

    def __init__(self, kind: SingleValueKind, client: PhyphoxClient) -> None:
        if not isinstance(kind, SingleValueKind):
            raise TypeError(f"expected a SingleValueKind, got {kind!r}")
        super().__init__(kind, client)

    def register(self) -> None:
        """Registers the value channel to be read."""
        self._register(self.kind.value_channel())

    def register_time(self) -> None:
        self._register(self.kind.time())

    def value(self) -> Optional[float]:
        return self._read(self.kind.value_channel())

    def time(self) -> Optional[float]:
        return self._read(self.kind.time())


class ThreeAxisSensor(_SensorHandle):
    """Handle for a sensor with x, y, z components plus magnitude and time."""

    def __init__(self, kind: ThreeAxisKind, client: PhyphoxClient) -> None:
        if not isinstance(kind, ThreeAxisKind):
            raise TypeError(f"expected a ThreeAxisKind, got {kind!r}")
        super().__init__(kind, client)

    def register_x(self) -> None:
        self._register(self.kind.x())

    def register_y(self) -> None:
        self._register(self.kind.y())

    def register_z(self) -> None:
        self._register(self.kind.z())

    def register_abs(self) -> None:
        self._register(self.kind.abs())

    def register_time(self) -> None:
        self._register(self.kind.time())

    def register_all(self) -> None:
        """Registers x, y, z, abs and time."""
        for role in THREE_AXIS_ROLES:
            self._register(self.kind.channel(role))

    def x(self) -> Optional[float]:
        return self._read(self.kind.x())

    def y(self) -> Optional[float]:
        return self._read(self.kind.y())

    def z(self) -> Optional[float]:
        return self._read(self.kind.z())

    def abs(self) -> Optional[float]:
        return self._read(self.kind.abs())

    def time(self) -> Optional[float]:
        return self._read(self.kind.time())

    def vector(self) -> Tuple[Optional[float], Optional[float], Optional[float]]:
        return self.x(), self.y(), self.z()
