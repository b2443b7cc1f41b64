"""Virtual sensor identifiers, payload formats and the supported-sensor table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class SensorID(IntEnum):
    ACC_PASS = 1
    ACC_RAW = 3
    ACC = 4
    ACC_BIAS = 5
    ACC_WU = 6
    ACC_RAW_WU = 7
    GYRO_PASS = 10
    GYRO_RAW = 12
    GYRO = 13
    GYRO_BIAS = 14
    GYRO_WU = 15
    GYRO_RAW_WU = 16
    MAG_PASS = 19
    MAG_RAW = 21
    MAG = 22
    MAG_BIAS = 23
    MAG_WU = 24
    MAG_RAW_WU = 25
    GRA = 28
    GRA_WU = 29
    LACC = 31
    LACC_WU = 32
    RV = 34
    RV_WU = 35
    GAMERV = 37
    GAMERV_WU = 38
    GEORV = 40
    GEORV_WU = 41
    ORI = 43
    ORI_WU = 44
    TILT_DETECTOR = 48
    STD = 50
    STC = 52
    STC_WU = 53
    SIG = 55
    WAKE_GESTURE = 57
    GLANCE_GESTURE = 59
    PICKUP_GESTURE = 61
    AR = 63
    WRIST_TILT_GESTURE = 67
    DEVICE_ORI = 69
    DEVICE_ORI_WU = 70
    STATIONARY_DET = 75
    MOTION_DET = 77
    ACC_BIAS_WU = 91
    GYRO_BIAS_WU = 92
    MAG_BIAS_WU = 93
    STD_WU = 94
    KLIO = 112
    PDR = 113
    SWIM = 114
    BSEC = 115
    BSEC2_COLLECTOR = 116
    BSEC2 = 117
    HMC = 120
    OC = 121
    NOC = 122
    OCE = 123
    NOCE = 124
    TEMP = 128
    BARO = 129
    HUM = 130
    GAS = 131
    TEMP_WU = 132
    BARO_WU = 133
    HUM_WU = 134
    GAS_WU = 135
    STC_HW = 136
    STD_HW = 137
    SIG_HW = 138
    STC_HW_WU = 139
    STD_HW_WU = 140
    SIG_HW_WU = 141
    ANY_MOTION = 142
    ANY_MOTION_WU = 143
    EXCAMERA = 144
    GPS = 145
    LIGHT = 146
    PROX = 147
    LIGHT_WU = 148
    PROX_WU = 149
    BSEC_LEGACY = 171
    DEBUG_DATA_EVENT = 250
    TIMESTAMP_SMALL_DELTA = 251
    TIMESTAMP_SMALL_DELTA_WU = 245
    TIMESTAMP_LARGE_DELTA = 252
    TIMESTAMP_LARGE_DELTA_WU = 246
    TIMESTAMP_FULL = 253
    TIMESTAMP_FULL_WU = 247


class SensorPayload(IntEnum):
    PQUATERNION = 0
    VECTOR3D = 1
    PEULER = 2
    P8BITSIGNED = 3
    P8BITUNSIGNED = 4
    P16BITSIGNED = 5
    P16BITUNSIGNED = 6
    P32BITSIGNED = 7
    P32BITUNSIGNED = 8
    P24BITUNSIGNED = 9
    P40BITUNSIGNED = 10
    PEVENT = 11
    ACTIVITY = 12
    DEBUG_DATA = 13
    BSEC = 14
    BSEC2 = 15
    BSEC2_COLLECTOR = 16
    KLIO = 17


@dataclass(frozen=True)
class SensorSpec:
    """Payload format and scale factor of one supported sensor."""

    id: SensorID
    payload: SensorPayload
    scale_factor: float


def _spec(sensor_id: SensorID, payload: SensorPayload, scale: float = 1.0) -> SensorSpec:
    return SensorSpec(sensor_id, payload, scale)


_S = SensorID
_P = SensorPayload
_TIMESTAMP_SCALE = 0.000015625

LONG_SENSOR_LIST: tuple[SensorSpec, ...] = (
    _spec(_S.BSEC, _P.BSEC),
    _spec(_S.BSEC2_COLLECTOR, _P.BSEC2_COLLECTOR),
    _spec(_S.BSEC_LEGACY, _P.BSEC),
    _spec(_S.KLIO, _P.KLIO),
)

SENSOR_LIST: tuple[SensorSpec, ...] = (
    _spec(_S.ACC_PASS, _P.VECTOR3D),
    _spec(_S.ACC_RAW, _P.VECTOR3D),
    _spec(_S.ACC, _P.VECTOR3D),
    _spec(_S.ACC_BIAS, _P.VECTOR3D),
    _spec(_S.ACC_WU, _P.VECTOR3D),
    _spec(_S.ACC_RAW_WU, _P.VECTOR3D),
    _spec(_S.GYRO_PASS, _P.VECTOR3D),
    _spec(_S.GYRO_RAW, _P.VECTOR3D),
    _spec(_S.GYRO, _P.VECTOR3D),
    _spec(_S.GYRO_BIAS, _P.VECTOR3D),
    _spec(_S.GYRO_WU, _P.VECTOR3D),
    _spec(_S.GYRO_RAW_WU, _P.VECTOR3D),
    _spec(_S.MAG_PASS, _P.VECTOR3D),
    _spec(_S.MAG_RAW, _P.VECTOR3D),
    _spec(_S.MAG, _P.VECTOR3D),
    _spec(_S.MAG_BIAS, _P.VECTOR3D),
    _spec(_S.MAG_WU, _P.VECTOR3D),
    _spec(_S.MAG_RAW_WU, _P.VECTOR3D),
    _spec(_S.GRA, _P.VECTOR3D),
    _spec(_S.GRA_WU, _P.VECTOR3D),
    _spec(_S.LACC, _P.VECTOR3D),
    _spec(_S.LACC_WU, _P.VECTOR3D),
    _spec(_S.RV, _P.PQUATERNION),
    _spec(_S.RV_WU, _P.PQUATERNION),
    _spec(_S.GAMERV, _P.PQUATERNION),
    _spec(_S.GAMERV_WU, _P.PQUATERNION),
    _spec(_S.GEORV, _P.PQUATERNION),
    _spec(_S.GEORV_WU, _P.PQUATERNION),
    _spec(_S.ORI, _P.PEULER, 0.01098),
    _spec(_S.ORI_WU, _P.PEULER, 0.01098),
    _spec(_S.TILT_DETECTOR, _P.PEVENT),
    _spec(_S.STD, _P.PEVENT),
    _spec(_S.STC, _P.P32BITUNSIGNED),
    _spec(_S.STC_WU, _P.P32BITUNSIGNED),
    _spec(_S.SIG, _P.PEVENT),
    _spec(_S.WAKE_GESTURE, _P.PEVENT),
    _spec(_S.GLANCE_GESTURE, _P.PEVENT),
    _spec(_S.PICKUP_GESTURE, _P.PEVENT),
    _spec(_S.AR, _P.ACTIVITY),
    _spec(_S.WRIST_TILT_GESTURE, _P.PEVENT),
    _spec(_S.DEVICE_ORI, _P.P8BITUNSIGNED),
    _spec(_S.DEVICE_ORI_WU, _P.P8BITUNSIGNED),
    _spec(_S.STATIONARY_DET, _P.PEVENT),
    _spec(_S.MOTION_DET, _P.PEVENT),
    _spec(_S.ACC_BIAS_WU, _P.VECTOR3D),
    _spec(_S.GYRO_BIAS_WU, _P.VECTOR3D),
    _spec(_S.MAG_BIAS_WU, _P.VECTOR3D),
    _spec(_S.STD_WU, _P.PEVENT),
    _spec(_S.KLIO, _P.KLIO),
    _spec(_S.BSEC, _P.BSEC),
    _spec(_S.BSEC2, _P.BSEC2),
    _spec(_S.BSEC2_COLLECTOR, _P.BSEC2_COLLECTOR),
    _spec(_S.TEMP, _P.P16BITSIGNED, 0.01),
    _spec(_S.BARO, _P.P24BITUNSIGNED, 0.0078),
    _spec(_S.HUM, _P.P8BITUNSIGNED),
    _spec(_S.GAS, _P.P32BITUNSIGNED),
    _spec(_S.TEMP_WU, _P.P16BITSIGNED, 0.01),
    _spec(_S.BARO_WU, _P.P24BITUNSIGNED, 0.0078),
    _spec(_S.HUM_WU, _P.P8BITUNSIGNED),
    _spec(_S.GAS_WU, _P.P32BITUNSIGNED),
    _spec(_S.STC_HW, _P.P32BITUNSIGNED),
    _spec(_S.STD_HW, _P.PEVENT),
    _spec(_S.SIG_HW, _P.PEVENT),
    _spec(_S.STC_HW_WU, _P.P32BITUNSIGNED),
    _spec(_S.STD_HW_WU, _P.PEVENT),
    _spec(_S.SIG_HW_WU, _P.PEVENT),
    _spec(_S.ANY_MOTION, _P.PEVENT),
    _spec(_S.ANY_MOTION_WU, _P.PEVENT),
    _spec(_S.EXCAMERA, _P.P8BITUNSIGNED),
    _spec(_S.GPS, _P.VECTOR3D),
    _spec(_S.LIGHT, _P.P16BITUNSIGNED, 46.296),
    _spec(_S.PROX, _P.P8BITUNSIGNED),
    _spec(_S.LIGHT_WU, _P.P16BITUNSIGNED, 46.296),
    _spec(_S.PROX_WU, _P.P8BITUNSIGNED),
    _spec(_S.BSEC_LEGACY, _P.BSEC),
    _spec(_S.DEBUG_DATA_EVENT, _P.DEBUG_DATA),
    _spec(_S.TIMESTAMP_SMALL_DELTA, _P.P8BITUNSIGNED, _TIMESTAMP_SCALE),
    _spec(_S.TIMESTAMP_SMALL_DELTA_WU, _P.P8BITUNSIGNED, _TIMESTAMP_SCALE),
    _spec(_S.TIMESTAMP_LARGE_DELTA, _P.P8BITUNSIGNED, _TIMESTAMP_SCALE),
    _spec(_S.TIMESTAMP_LARGE_DELTA_WU, _P.P8BITUNSIGNED, _TIMESTAMP_SCALE),
    _spec(_S.TIMESTAMP_FULL, _P.P8BITUNSIGNED, _TIMESTAMP_SCALE),
    _spec(_S.TIMESTAMP_FULL_WU, _P.P8BITUNSIGNED, _TIMESTAMP_SCALE),
)

_BY_ID = {spec.id: spec for spec in SENSOR_LIST}
_LONG_IDS = frozenset(spec.id for spec in LONG_SENSOR_LIST)


def find_sensor(sensor_id):
    """Return the table entry for ``sensor_id``, or None if it is not supported."""
    return _BY_ID.get(sensor_id)


def is_long_sensor(sensor_id):
    """True for sensors whose frames need the long data packet."""
    return sensor_id in _LONG_IDS