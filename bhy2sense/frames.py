"""Decoding of raw FIFO frame payloads."""

from __future__ import annotations

from dataclasses import dataclass


def _require(data: bytes, length: int) -> bytes:
    data = bytes(data)
    if len(data) < length:
        raise ValueError(f"frame needs {length} bytes, got {len(data)}")
    return data


def _s16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 2], "little", signed=True)


def _u16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 2], "little")


@dataclass(frozen=True)
class RawXYZ:
    x: int
    y: int
    z: int


@dataclass(frozen=True)
class RawQuaternion:
    x: int
    y: int
    z: int
    w: int
    accuracy: int


@dataclass(frozen=True)
class RawOrientation:
    heading: int
    pitch: int
    roll: int


def parse_temperature_celsius(data) -> float:
    """Temperature in degrees Celsius; 1 LSB = 1/100 degC."""
    data = _require(data, 2)
    return _s16(data, 0) * (1 / 100)


def parse_humidity(data) -> float:
    """Relative humidity in percent."""
    data = _require(data, 1)
    return float(data[0])


def parse_pressure(data) -> float:
    """Barometric pressure in pascals; 1 LSB = 1/128 Pa."""
    data = _require(data, 3)
    return int.from_bytes(data[:3], "little") * (1 / 128)


def parse_altitude(data) -> float:
    data = _require(data, 4)
    return float(int.from_bytes(data[:4], "little"))


def parse_quaternion(data) -> RawQuaternion:
    data = _require(data, 10)
    return RawQuaternion(
        _s16(data, 0), _s16(data, 2), _s16(data, 4), _s16(data, 6), _u16(data, 8)
    )


def parse_xyz(data) -> RawXYZ:
    data = _require(data, 6)
    return RawXYZ(_s16(data, 0), _s16(data, 2), _s16(data, 4))


def parse_orientation(data) -> RawOrientation:
    data = _require(data, 6)
    return RawOrientation(_s16(data, 0), _s16(data, 2), _s16(data, 4))