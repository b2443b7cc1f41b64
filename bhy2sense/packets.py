"""Fixed-size sensor data and configuration packets."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

SENSOR_DATA_FIXED_LENGTH = 10
# The largest frame (the BSEC2 collector) needs 21 payload bytes.
SENSOR_LONG_DATA_FIXED_LENGTH = 21
PARAM_SIZE_LENGTH = 20


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value}")


@dataclass(frozen=True)
class SensorDataPacket:
    """A sensor frame with a fixed-length little-endian payload.

    Reads that run past the end of the payload use only the bytes that are
    there, with missing high-order bytes taken as zero; reads that start past
    the end give zero.
    """

    FIXED_LENGTH: ClassVar[int] = SENSOR_DATA_FIXED_LENGTH

    sensor_id: int
    size: int = 0
    data: bytes = b""

    def __post_init__(self) -> None:
        _check_byte("sensor_id", self.sensor_id)
        _check_byte("size", self.size)
        payload = bytes(self.data)
        if len(payload) > self.FIXED_LENGTH:
            raise ValueError(
                f"payload of {len(payload)} bytes exceeds {self.FIXED_LENGTH}"
            )
        object.__setattr__(self, "data", payload.ljust(self.FIXED_LENGTH, b"\x00"))

    @classmethod
    def from_bytes(cls, raw):
        """Build a packet from its wire form: id, size, then the payload."""
        raw = bytes(raw)
        if len(raw) < 2:
            raise ValueError("a packet needs at least a sensor id and a size byte")
        return cls(raw[0], raw[1], raw[2:])

    def _read(self, index: int, width: int) -> bytes:
        _check_byte("index", index)
        return self.data[index:index + width].ljust(width, b"\x00")

    def _unsigned(self, index: int, width: int) -> int:
        return int.from_bytes(self._read(index, width), "little")

    def _signed(self, index: int, width: int) -> int:
        return int.from_bytes(self._read(index, width), "little", signed=True)

    def get_float(self, index):
        """Little-endian 32-bit float at ``index``."""
        return struct.unpack("<f", self._read(index, 4))[0]

    def get_uint8(self, index):
        return self._unsigned(index, 1)

    def get_uint16(self, index):
        return self._unsigned(index, 2)

    def get_uint24(self, index):
        return self._unsigned(index, 3)

    def get_uint32(self, index):
        return self._unsigned(index, 4)

    def get_int8(self, index):
        return self._signed(index, 1)

    def get_int16(self, index):
        return self._signed(index, 2)

    def get_int24(self, index):
        return self._signed(index, 3)

    def get_int32(self, index):
        return self._signed(index, 4)


@dataclass(frozen=True)
class SensorLongDataPacket(SensorDataPacket):
    """A sensor frame with the longer fixed-length payload."""

    FIXED_LENGTH: ClassVar[int] = SENSOR_LONG_DATA_FIXED_LENGTH

    def get_uint64(self, index):
        return self._unsigned(index, 8)

    def get_int64(self, index):
        return self._signed(index, 8)


_CONFIG_FORMAT = struct.Struct("<BfI")


@dataclass(frozen=True)
class SensorConfigurationPacket:
    """Sample rate (Hz, 0 disables) and report latency (ms) for one sensor."""

    sensor_id: int
    sample_rate: float
    latency: int

    def __post_init__(self) -> None:
        _check_byte("sensor_id", self.sensor_id)
        if not 0 <= self.latency <= 0xFFFFFFFF:
            raise ValueError(f"latency must fit in 32 bits, got {self.latency}")

    def to_bytes(self):
        """Packed little-endian form: id byte, float32 rate, uint32 latency."""
        return _CONFIG_FORMAT.pack(self.sensor_id, self.sample_rate, self.latency)

    @classmethod
    def from_bytes(cls, raw):
        raw = bytes(raw)
        if len(raw) != _CONFIG_FORMAT.size:
            raise ValueError(
                f"configuration packet must be {_CONFIG_FORMAT.size} bytes, got {len(raw)}"
            )
        sensor_id, sample_rate, latency = _CONFIG_FORMAT.unpack(raw)
        return cls(sensor_id, sample_rate, latency)