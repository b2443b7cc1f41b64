"""Decoding of sensor data packets into typed readings."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .packets import SensorDataPacket, SensorLongDataPacket
from .sensor_ids import SensorPayload

SCALE_BSEC_BVOC_EQ = 0.01
SCALE_BSEC_COMP_T = 1.0 / 256
SCALE_BSEC_COMP_H = 1.0 / 500


def _to_unsigned(value: float, bits: int) -> int:
    """Truncate a float toward zero and wrap it into an unsigned range."""
    if not math.isfinite(value):
        return 0
    return int(value) & ((1 << bits) - 1)


@dataclass
class DataXYZ:
    x: int = 0
    y: int = 0
    z: int = 0

    def __str__(self) -> str:
        return f"XYZ values - X: {self.x}   Y: {self.y}   Z: {self.z}\n"


@dataclass
class DataOrientation:
    heading: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def __str__(self) -> str:
        return (
            f"Orientation values - heading: {self.heading:.3f}"
            f"   pitch: {self.pitch:.3f}"
            f"   roll: {self.roll:.3f}\n"
        )


@dataclass
class DataQuaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0
    accuracy: float = 0.0

    def __str__(self) -> str:
        return (
            f"Quaternion values - X: {self.x:.3f}"
            f"   Y: {self.y:.3f}"
            f"   Z: {self.z:.3f}"
            f"   W: {self.w:.3f}"
            f"   Accuracy: {self.accuracy:.3f}\n"
        )


@dataclass
class DataBSEC:
    """Air-quality output of the BSEC algorithm."""

    iaq: int = 0
    iaq_s: int = 0
    b_voc_eq: float = 0.0
    co2_eq: int = 0
    comp_t: float = 0.0
    comp_h: float = 0.0
    comp_g: int = 0
    accuracy: int = 0

    def __str__(self) -> str:
        return (
            f"BSEC output values - iaq: {self.iaq}"
            f"   iaq_s: {self.iaq_s}"
            f"   b_voc_eq: {self.b_voc_eq:.2f}"
            f"   co2_eq: {self.co2_eq}"
            f"   accuracy: {self.accuracy}"
            f"   comp_t: {self.comp_t:.2f}"
            f"   comp_h: {self.comp_h:.2f}"
            f"   comp_g: {self.comp_g}\n"
        )


@dataclass
class DataBSEC2:
    """Gas classifier output: four estimates (%) and an accuracy level."""

    gas_estimates: tuple[int, int, int, int] = (0, 0, 0, 0)
    accuracy: int = 0

    def __str__(self) -> str:
        g = self.gas_estimates
        return (
            f"BSEC2 output values (%) - gas[0]: {g[0]}"
            f"   gas[1]: {g[1]}"
            f"   gas[2]: {g[2]}"
            f"   gas[3]: {g[3]}"
            f"   accuracy: {self.accuracy}\n"
        )


@dataclass
class DataBSEC2Collector:
    """Raw gas-sensor samples collected for training."""

    timestamp: int = 0
    raw_temp: float = 0.0
    raw_pressure: float = 0.0
    raw_hum: float = 0.0
    raw_gas: float = 0.0
    gas_index: int = 0

    def __str__(self) -> str:
        high = self.timestamp >> 32
        low = self.timestamp & 0xFFFFFFFF
        return (
            f"timestamp: {high}{low}"
            f"   temp: {self.raw_temp:.2f}"
            f"   pressure: {self.raw_pressure:.2f}"
            f"   hum: {self.raw_hum:.2f}"
            f"   gas: {self.raw_gas:.2f}"
            f"   gas_index: {self.gas_index}\n"
        )


def parse_3d_vector(packet: SensorDataPacket) -> DataXYZ:
    return DataXYZ(packet.get_int16(0), packet.get_int16(2), packet.get_int16(4))


def parse_euler(packet: SensorDataPacket, scale_factor: float = 1.0) -> DataOrientation:
    return DataOrientation(
        packet.get_int16(0) * scale_factor,
        packet.get_int16(2) * scale_factor,
        packet.get_int16(4) * scale_factor,
    )


def parse_quaternion(packet: SensorDataPacket, scale_factor: float) -> DataQuaternion:
    return DataQuaternion(
        packet.get_int16(0) * scale_factor,
        packet.get_int16(2) * scale_factor,
        packet.get_int16(4) * scale_factor,
        packet.get_int16(6) * scale_factor,
        packet.get_uint16(8) * scale_factor,
    )


def parse_bsec(packet: SensorLongDataPacket) -> DataBSEC:
    """Decode the current BSEC frame layout."""
    return DataBSEC(
        iaq=packet.get_uint16(0),
        iaq_s=packet.get_uint16(2),
        b_voc_eq=packet.get_uint16(4) * SCALE_BSEC_BVOC_EQ,
        co2_eq=packet.get_uint24(6),
        accuracy=packet.get_uint8(9),
        comp_t=packet.get_int16(10) * SCALE_BSEC_COMP_T,
        comp_h=packet.get_uint16(12) * SCALE_BSEC_COMP_H,
        comp_g=_to_unsigned(packet.get_float(14), 32),
    )


def parse_bsec2(packet: SensorDataPacket) -> DataBSEC2:
    estimates = tuple(packet.get_uint8(i) for i in range(4))
    return DataBSEC2(gas_estimates=estimates, accuracy=packet.get_uint8(4))


def parse_bsec2_collector(packet: SensorLongDataPacket) -> DataBSEC2Collector:
    return DataBSEC2Collector(
        timestamp=packet.get_uint64(0),
        raw_temp=packet.get_int16(8) * SCALE_BSEC_COMP_T,
        raw_pressure=packet.get_float(10),
        raw_hum=packet.get_uint16(14) * SCALE_BSEC_COMP_H,
        raw_gas=packet.get_float(16),
        gas_index=packet.get_uint8(20),
    )


def parse_bsec_legacy(packet: SensorLongDataPacket) -> DataBSEC:
    """Decode the legacy all-float BSEC frame.

    Fields past the end of the fixed payload read as zero.
    """
    return DataBSEC(
        comp_t=packet.get_float(0),
        comp_h=packet.get_float(4),
        comp_g=_to_unsigned(packet.get_float(8), 32),
        iaq=_to_unsigned(packet.get_float(12), 16),
        iaq_s=_to_unsigned(packet.get_float(16), 16),
        co2_eq=_to_unsigned(packet.get_float(20), 32),
        b_voc_eq=packet.get_float(24),
        accuracy=packet.get_uint8(28),
    )


_SCALAR_READERS = {
    SensorPayload.P8BITSIGNED: SensorDataPacket.get_int8,
    SensorPayload.P8BITUNSIGNED: SensorDataPacket.get_uint8,
    SensorPayload.P16BITSIGNED: SensorDataPacket.get_int16,
    SensorPayload.P16BITUNSIGNED: SensorDataPacket.get_uint16,
    SensorPayload.P24BITUNSIGNED: SensorDataPacket.get_uint24,
    SensorPayload.P32BITSIGNED: SensorDataPacket.get_int32,
    SensorPayload.P32BITUNSIGNED: SensorDataPacket.get_uint32,
}


def parse_data(packet: SensorDataPacket, scale_factor: float, payload_format):
    """Decode a scalar reading.

    Events give 1.0; formats that are not scalars give None.
    """
    try:
        payload_format = SensorPayload(payload_format)
    except ValueError:
        return None
    if payload_format is SensorPayload.PEVENT:
        return 1.0
    reader = _SCALAR_READERS.get(payload_format)
    if reader is None:
        return None
    return reader(packet, 0) * scale_factor


def parse_activity(packet: SensorDataPacket) -> int:
    return packet.get_uint16(0)