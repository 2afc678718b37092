# phyphox_client/channels.py
from __future__ import annotations
from enum import Enum, unique


@unique
class Channel(str, Enum):
    """
    Every buffer the client knows how to ask for.

    The value of each member is the buffer name the phyphox experiment uses,
    which is both the bare token in the /get query and the key in the JSON reply.
    """

    MAGNETOMETER_X = "magX"
    MAGNETOMETER_Y = "magY"
    MAGNETOMETER_Z = "magZ"
    MAGNETOMETER_ABS = "mag_abs"
    MAGNETOMETER_TIME = "mag_time"

    GYROSCOPE_X = "gyrX"
    GYROSCOPE_Y = "gyrY"
    GYROSCOPE_Z = "gyrZ"
    GYROSCOPE_ABS = "gyr_abs"
    GYROSCOPE_TIME = "gyr_time"

    ACCELERATION_X = "accX"
    ACCELERATION_Y = "accY"
    ACCELERATION_Z = "accZ"
    ACCELERATION_ABS = "acc_abs"
    ACCELERATION_TIME = "acc_time"

    LIGHT = "light"
    LIGHT_TIME = "light_time"

    @property
    def wire_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
