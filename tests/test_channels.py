from phyphox_client.channels import Channel
from phyphox_client.sensors import (
    SINGLE_VALUE_ROLES,
    THREE_AXIS_ROLES,
    SingleValueKind,
    ThreeAxisKind,
)


def test_wire_names_are_unique():
    names = [c.wire_name for c in Channel]
    assert len(names) == len(set(names))
    # @unique would reject aliases at import, this guards against it being dropped
    assert len(Channel.__members__) == len(list(Channel))


def test_wire_names_are_bare_query_tokens():
    for c in Channel:
        assert c.wire_name
        assert c.wire_name.isascii()
        assert not set(c.wire_name) & set("&=?# /")


def test_channel_str_is_wire_name():
    assert str(Channel.LIGHT) == "light"
    assert str(Channel.ACCELERATION_ABS) == "acc_abs"
    assert f"{Channel.MAGNETOMETER_X.wire_name}" == "magX"


def test_known_wire_names():
    assert Channel.MAGNETOMETER_TIME.wire_name == "mag_time"
    assert Channel.GYROSCOPE_Z.wire_name == "gyrZ"
    assert Channel.LIGHT_TIME.wire_name == "light_time"


def test_every_channel_belongs_to_exactly_one_sensor_role():
    mapped = [kind.channel(role) for kind in SingleValueKind for role in SINGLE_VALUE_ROLES]
    mapped += [kind.channel(role) for kind in ThreeAxisKind for role in THREE_AXIS_ROLES]
    assert len(mapped) == len(set(mapped))
    assert set(mapped) == set(Channel)
