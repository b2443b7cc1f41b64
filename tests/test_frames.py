import struct

import pytest

from bhy2sense.frames import (
    RawOrientation,
    RawQuaternion,
    RawXYZ,
    parse_altitude,
    parse_humidity,
    parse_orientation,
    parse_pressure,
    parse_quaternion,
    parse_temperature_celsius,
    parse_xyz,
)


def test_temperature_scale():
    assert parse_temperature_celsius(struct.pack("<h", 2500)) == pytest.approx(2500 / 100)
    assert parse_temperature_celsius(struct.pack("<h", -150)) == pytest.approx(-150 / 100)


def test_humidity_is_first_byte():
    assert parse_humidity(bytes([55, 99])) == 55.0


def test_pressure_scale():
    raw = 101325 * 128
    assert parse_pressure(raw.to_bytes(3, "little")) == pytest.approx(101325)


def test_altitude_unsigned_32():
    assert parse_altitude(struct.pack("<I", 0xFFFFFFFF)) == float(0xFFFFFFFF)


def test_quaternion():
    data = struct.pack("<hhhhH", -1, 2, -3, 4, 65000)
    assert parse_quaternion(data) == RawQuaternion(-1, 2, -3, 4, 65000)


def test_xyz_and_orientation():
    data = struct.pack("<hhh", 32767, -32768, 0)
    assert parse_xyz(data) == RawXYZ(32767, -32768, 0)
    assert parse_orientation(data) == RawOrientation(32767, -32768, 0)


@pytest.mark.parametrize(
    "func, length",
    [
        (parse_temperature_celsius, 2),
        (parse_humidity, 1),
        (parse_pressure, 3),
        (parse_altitude, 4),
        (parse_quaternion, 10),
        (parse_xyz, 6),
        (parse_orientation, 6),
    ],
)
def test_short_frames_rejected(func, length):
    with pytest.raises(ValueError):
        func(bytes(length - 1))