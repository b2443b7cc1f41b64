import pytest

from bhy2sense.sensor_ids import (
    LONG_SENSOR_LIST,
    SENSOR_LIST,
    SensorID,
    SensorPayload,
    find_sensor,
    is_long_sensor,
)


def test_table_sizes_match_supported_counts():
    found = [spec for spec in SENSOR_LIST if find_sensor(spec.id) == spec]
    assert len(found) == 82
    long_ids = [spec.id for spec in SENSOR_LIST if is_long_sensor(spec.id)]
    assert len(long_ids) == 4
    assert len(LONG_SENSOR_LIST) == 4


def test_table_ids_are_unique():
    looked_up = [find_sensor(spec.id) for spec in SENSOR_LIST]
    assert looked_up == list(SENSOR_LIST)
    ids = [spec.id for spec in looked_up]
    assert len(ids) == len(set(ids))


def test_every_long_sensor_is_in_main_table():
    for spec in LONG_SENSOR_LIST:
        assert find_sensor(spec.id) == spec


def test_find_orientation():
    spec = find_sensor(SensorID.ORI)
    assert spec.payload is SensorPayload.PEULER
    assert spec.scale_factor == 0.01098


@pytest.mark.parametrize(
    "sensor_id, payload, scale",
    [
        (SensorID.TEMP, SensorPayload.P16BITSIGNED, 0.01),
        (SensorID.BARO, SensorPayload.P24BITUNSIGNED, 0.0078),
        (SensorID.LIGHT, SensorPayload.P16BITUNSIGNED, 46.296),
        (SensorID.TIMESTAMP_FULL, SensorPayload.P8BITUNSIGNED, 0.000015625),
        (SensorID.AR, SensorPayload.ACTIVITY, 1.0),
        (SensorID.RV, SensorPayload.PQUATERNION, 1.0),
    ],
)
def test_find_sensor_entries(sensor_id, payload, scale):
    spec = find_sensor(sensor_id)
    assert (spec.payload, spec.scale_factor) == (payload, scale)


def test_find_sensor_accepts_plain_int():
    assert find_sensor(128).id is SensorID.TEMP


@pytest.mark.parametrize("sensor_id", [SensorID.PDR, SensorID.SWIM, 0, 300])
def test_unsupported_sensor_not_found(sensor_id):
    assert find_sensor(sensor_id) is None


@pytest.mark.parametrize(
    "sensor_id, expected",
    [
        (SensorID.BSEC, True),
        (SensorID.BSEC_LEGACY, True),
        (SensorID.BSEC2_COLLECTOR, True),
        (SensorID.KLIO, True),
        (SensorID.BSEC2, False),
        (SensorID.ACC, False),
    ],
)
def test_is_long_sensor(sensor_id, expected):
    assert is_long_sensor(sensor_id) is expected


def test_event_sensors_use_unit_scale():
    events = [
        find_sensor(s.id)
        for s in SENSOR_LIST
        if find_sensor(s.id).payload is SensorPayload.PEVENT
    ]
    assert events
    assert all(s.scale_factor == 1.0 for s in events)