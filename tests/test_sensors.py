import struct

import pytest

from bhy2sense.packets import SensorDataPacket, SensorLongDataPacket
from bhy2sense.sensor_ids import SensorID, SensorPayload, find_sensor
from bhy2sense.sensors import (
    Sensor,
    SensorActivity,
    SensorBSEC,
    SensorBSEC2,
    SensorBSEC2Collector,
    SensorManager,
    SensorOrientation,
    SensorQuaternion,
    SensorXYZ,
)


def short(sensor_id, payload):
    return SensorDataPacket(int(sensor_id), len(payload), payload)


def long(sensor_id, payload):
    return SensorLongDataPacket(int(sensor_id), len(payload), payload)


def test_sensor_takes_factor_and_format_from_table():
    sensor = Sensor(SensorID.TEMP)
    spec = find_sensor(SensorID.TEMP)
    assert sensor.factor == spec.scale_factor
    assert sensor.payload_format is SensorPayload.P16BITSIGNED


def test_sensor_scales_scalar_value():
    sensor = Sensor(SensorID.TEMP)
    sensor.set_data(short(SensorID.TEMP, struct.pack("<h", -2500)))
    assert sensor.value() == pytest.approx(-2500 * sensor.factor)
    assert sensor.value() == pytest.approx(-2500 * sensor.factor)


def test_sensor_factor_can_be_changed():
    sensor = Sensor(SensorID.GAS)
    sensor.factor = 2.0
    sensor.set_data(short(SensorID.GAS, struct.pack("<I", 21)))
    assert sensor.value() == pytest.approx(42.0)


def test_unknown_sensor_has_zero_factor_and_keeps_value():
    sensor = Sensor(200)
    assert sensor.factor == 0.0
    sensor.set_data(short(200, b"\x05"))
    assert sensor.value() == 0.0


def test_event_sensor_reports_once():
    sensor = Sensor(SensorID.SIG)
    assert sensor.value() == 0.0
    sensor.set_data(short(SensorID.SIG, b""))
    assert sensor.value() == 1.0
    assert sensor.value() == 0.0


def test_event_sensor_string():
    sensor = Sensor(SensorID.STD)
    sensor.set_data(short(SensorID.STD, b""))
    assert str(sensor) == "Event detected\n"
    assert str(sensor) == ""


def test_scalar_sensor_string_format():
    sensor = Sensor(SensorID.HUM)
    sensor.set_data(short(SensorID.HUM, bytes([55])))
    assert str(sensor) == f"Data value: {sensor.value():.3f}\n"
    assert str(sensor).startswith("Data value: ")


def test_sensor_ignores_long_packets():
    sensor = Sensor(SensorID.HUM)
    sensor.set_data(long(SensorID.HUM, bytes([55])))
    assert sensor.value() == 0.0


def test_activity_messages_from_bits():
    sensor = SensorActivity(SensorID.AR)
    assert sensor.activity() == "Waiting to detect valid activity"
    sensor.set_data(short(SensorID.AR, struct.pack("<H", 1 << 9)))
    assert sensor.value == 1 << 9
    assert sensor.activity() == "Walking activity started"
    assert str(sensor) == "Walking activity started"


def test_activity_lowest_bit_wins():
    sensor = SensorActivity(SensorID.AR)
    sensor.set_data(short(SensorID.AR, struct.pack("<H", (1 << 13) | (1 << 2))))
    assert sensor.activity() == "Running activity ended"


def test_bsec_current_layout():
    payload = struct.pack("<HHH", 120, 130, 250) + (450).to_bytes(3, "little")
    payload += bytes([3]) + struct.pack("<hHf", 256 * 5, 500 * 4, 1000.0)
    sensor = SensorBSEC(SensorID.BSEC)
    sensor.set_data(long(SensorID.BSEC, payload))
    assert (sensor.iaq, sensor.iaq_s, sensor.co2_eq) == (120, 130, 450)
    assert sensor.accuracy == 3
    assert sensor.comp_t == pytest.approx(5.0)
    assert sensor.comp_h == pytest.approx(4.0)
    assert sensor.comp_g == 1000


def test_bsec_legacy_layout():
    payload = struct.pack("<fffff", 21.5, 40.25, 900.0, 77.0, 66.0)
    sensor = SensorBSEC(SensorID.BSEC_LEGACY)
    sensor.set_data(long(SensorID.BSEC_LEGACY, payload))
    assert sensor.comp_t == pytest.approx(21.5)
    assert sensor.comp_h == pytest.approx(40.25)
    assert sensor.comp_g == 900
    assert (sensor.iaq, sensor.iaq_s) == (77, 66)


def test_bsec_ignores_short_packet_and_other_ids():
    sensor = SensorBSEC(SensorID.BSEC)
    sensor.set_data(short(SensorID.BSEC, struct.pack("<H", 99)))
    assert sensor.iaq == 0
    other = SensorBSEC(SensorID.KLIO)
    other.set_data(long(SensorID.KLIO, struct.pack("<H", 99)))
    assert other.iaq == 0


def test_bsec2_sets_new_data_flag():
    sensor = SensorBSEC2(SensorID.BSEC2)
    assert sensor.new_data_flag is False
    sensor.set_data(short(SensorID.BSEC2, bytes([10, 20, 30, 40, 2])))
    assert sensor.gas_estimates == (10, 20, 30, 40)
    assert sensor.accuracy == 2
    assert sensor.new_data_flag is True
    sensor.new_data_flag = False
    assert sensor.new_data_flag is False


def test_bsec2_collector():
    payload = struct.pack("<QhfHfB", 123456789, 256 * 2, 1013.5, 500 * 3, 2048.0, 7)
    sensor = SensorBSEC2Collector(SensorID.BSEC2_COLLECTOR)
    sensor.set_data(long(SensorID.BSEC2_COLLECTOR, payload))
    assert sensor.timestamp == 123456789
    assert sensor.temperature == pytest.approx(2.0)
    assert sensor.pressure == pytest.approx(1013.5)
    assert sensor.humidity == pytest.approx(3.0)
    assert sensor.gas == pytest.approx(2048.0)
    assert sensor.gas_index == 7


def test_orientation_uses_table_factor():
    sensor = SensorOrientation(SensorID.ORI)
    assert sensor.factor == pytest.approx(0.01098)
    sensor.set_data(short(SensorID.ORI, struct.pack("<hhh", 1000, -500, 0)))
    assert sensor.heading == pytest.approx(1000 * sensor.factor)
    assert sensor.pitch == pytest.approx(-500 * sensor.factor)
    assert sensor.roll == 0.0


def test_quaternion():
    sensor = SensorQuaternion(SensorID.RV)
    assert sensor.factor == pytest.approx(0.000061035)
    sensor.set_data(short(SensorID.RV, struct.pack("<hhhhH", 16384, 0, -16384, 0, 3)))
    assert sensor.x == pytest.approx(16384 * sensor.factor)
    assert sensor.z == pytest.approx(-sensor.x)
    assert sensor.accuracy == pytest.approx(3 * sensor.factor)


def test_xyz():
    sensor = SensorXYZ(SensorID.ACC)
    sensor.set_data(short(SensorID.ACC, struct.pack("<hhh", 1, -2, 3)))
    assert (sensor.x, sensor.y, sensor.z) == (1, -2, 3)
    assert str(sensor) == "XYZ values - X: 1   Y: -2   Z: 3\n"


def test_invalid_sensor_id():
    with pytest.raises(ValueError):
        SensorXYZ(256)


def test_manager_routes_and_flags():
    manager = SensorManager()
    acc = SensorXYZ(SensorID.ACC)
    gyro = SensorXYZ(SensorID.GYRO)
    manager.subscribe(acc)
    manager.subscribe(gyro)
    assert manager.process(short(SensorID.GYRO, struct.pack("<hhh", 4, 5, 6))) is True
    assert gyro.data_available is True
    assert acc.data_available is False
    assert (gyro.x, gyro.y, gyro.z) == (4, 5, 6)
    gyro.clear_data_available()
    assert gyro.data_available is False


def test_manager_unknown_id():
    manager = SensorManager()
    acc = SensorXYZ(SensorID.ACC)
    manager.subscribe(acc)
    assert manager.process(short(SensorID.MAG, struct.pack("<hhh", 1, 1, 1))) is False
    assert acc.data_available is False


def test_manager_first_match_only():
    manager = SensorManager()
    first = SensorXYZ(SensorID.ACC)
    second = SensorXYZ(SensorID.ACC)
    manager.subscribe(first)
    manager.subscribe(second)
    manager.process(short(SensorID.ACC, struct.pack("<hhh", 9, 9, 9)))
    assert first.x == 9
    assert second.x == 0


def test_manager_unsubscribe_moves_last_into_place():
    manager = SensorManager()
    a, b, c = SensorXYZ(1), SensorXYZ(3), SensorXYZ(4)
    for sensor in (a, b, c):
        manager.subscribe(sensor)
    manager.unsubscribe(a)
    assert manager.sensors == (c, b)
    manager.unsubscribe(SensorXYZ(99))
    assert len(manager) == 2
    assert manager.process(short(1, b"")) is False


def test_manager_capacity():
    manager = SensorManager()
    for sensor_id in range(10):
        manager.subscribe(SensorXYZ(sensor_id))
    with pytest.raises(OverflowError):
        manager.subscribe(SensorXYZ(50))
    assert len(manager) == 10


def test_manager_long_packets():
    manager = SensorManager()
    sensor = SensorBSEC2Collector(SensorID.BSEC2_COLLECTOR)
    manager.subscribe(sensor)
    manager.process(long(SensorID.BSEC2_COLLECTOR, struct.pack("<Q", 77)))
    assert sensor.timestamp == 77
    assert sensor.data_available is True