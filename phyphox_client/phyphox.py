from __future__ import annotations
from typing import Optional

from .channels import Channel
from .client import PhyphoxClient
from .sensors import SingleValueKind, SingleValueSensor, ThreeAxisKind, ThreeAxisSensor
from .transport import Transport


class Phyphox:
    """
    Entry point for talking to one phone.

    Owns a single PhyphoxClient and hands out sensor handles that all point at
    it, so one retrieve() refreshes every handle:

        phy = Phyphox("192.168.0.1:8080")
        light = phy.light()
        mag = phy.magnetometer()
        light.register()
        mag.register_x()
        phy.start()
        phy.retrieve()
        print(light.value(), mag.x())
    """

    def __init__(self, address: str | None = None, transport: Transport | None = None) -> None:
        self.client = PhyphoxClient(address, transport)

    def __repr__(self) -> str:
        return f"Phyphox({self.client.url!r})"

    # sensors
    def sv_sensor(self, kind: SingleValueKind) -> SingleValueSensor:
        return SingleValueSensor(kind, self.client)

    def xyz_sensor(self, kind: ThreeAxisKind) -> ThreeAxisSensor:
        return ThreeAxisSensor(kind, self.client)

    def light(self) -> SingleValueSensor:
        return self.sv_sensor(SingleValueKind.LIGHT)

    def magnetometer(self) -> ThreeAxisSensor:
        return self.xyz_sensor(ThreeAxisKind.MAGNETOMETER)

    def accelerometer(self) -> ThreeAxisSensor:
        return self.xyz_sensor(ThreeAxisKind.ACCELERATION)

    def gyroscope(self) -> ThreeAxisSensor:
        return self.xyz_sensor(ThreeAxisKind.GYROSCOPE)

    # channels
    def register(self, channel: Channel) -> None:
        self.client.register(channel)

    def get(self, channel: Channel) -> Optional[float]:
        return self.client.get(channel)

    def retrieve(self) -> None:
        self.client.retrieve()

    def clear_variables(self) -> None:
        self.client.clear_variables()

    # experiment control
    def control(self, cmd: str) -> None:
        self.client.control(cmd)

    def start(self) -> None:
        self.client.start()

    def stop(self) -> None:
        self.client.stop()

    def clear(self) -> None:
        self.client.clear()
