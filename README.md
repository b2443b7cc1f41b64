# bhy2sense

Decode the data that a BHI260/BHA260 smart sensor hub sends to its host:
fixed-length sensor data packets with typed little-endian readers, the table
of sensor IDs with their payload formats and scale factors, parsers for each
payload kind, sensor objects that keep the latest reading, and a manager
that routes packets to them. Pure Python, no dependencies.

## Install

    pip install bhy2sense

## Packets (`bhy2sense.packets`)

`SensorDataPacket(sensor_id, size, data)` has a 10-byte data area;
`SensorLongDataPacket` has a 21-byte one. Shorter data is padded with zeros,
longer data raises `ValueError`. `from_bytes(raw)` reads the wire form: ID
byte, size byte, then the payload.

Readers: `get_uint8`, `get_uint16`, `get_uint24`, `get_uint32`, `get_int8`,
`get_int16`, `get_int24`, `get_int32`, `get_float`, and on long packets
`get_uint64` and `get_int64`. A read that runs past the end of the data
area takes the missing bytes as zero instead of failing.

```python
from bhy2sense.packets import SensorDataPacket

packet = SensorDataPacket.from_bytes(bytes([4, 6, 0x10, 0x00, 0xF0, 0xFF, 0x00, 0x01]))
packet.get_int16(0)   # 16
packet.get_int16(2)   # -16
```

`SensorConfigurationPacket(sensor_id, sample_rate, latency)` packs to 9 bytes
with `to_bytes()` (ID byte, float32 rate, uint32 latency) and back with
`from_bytes()`.

## Sensor IDs (`bhy2sense.sensor_ids`)

`SensorID` and `SensorPayload` are `IntEnum`s, for example `SensorID.ACC`
and `SensorPayload.VECTOR3D`. `find_sensor(sensor_id)` returns the
`SensorSpec` (`id`, `payload`, `scale_factor`) or `None` for an unknown ID.
`is_long_sensor(sensor_id)` is true for sensors that send long packets
(BSEC, BSEC legacy, BSEC2 collector, KLIO).

## Parsing packets (`bhy2sense.data_parser`)

- `parse_3d_vector(packet)` returns a `DataXYZ`.
- `parse_euler(packet, scale_factor=1.0)` returns a `DataOrientation`.
- `parse_quaternion(packet, scale_factor)` returns a `DataQuaternion`.
- `parse_bsec(packet)` and `parse_bsec_legacy(packet)` return a `DataBSEC`.
- `parse_bsec2(packet)` returns a `DataBSEC2`.
- `parse_bsec2_collector(packet)` returns a `DataBSEC2Collector`.
- `parse_data(packet, scale_factor, payload_format)` decodes a scalar and
  scales it; event formats give `1.0`, non-scalar formats give `None`.
- `parse_activity(packet)` returns the 16-bit activity mask.

Each data class formats itself as a one-line summary with `str()`.

## Parsing raw FIFO frames (`bhy2sense.frames`)

`parse_temperature_celsius`, `parse_humidity`, `parse_pressure`,
`parse_altitude`, `parse_xyz` (`RawXYZ`), `parse_quaternion`
(`RawQuaternion`) and `parse_orientation` (`RawOrientation`) take frame
bytes; too few bytes raise `ValueError`.

## Sensors and dispatch (`bhy2sense.sensors`)

```python
from bhy2sense.sensors import SensorManager, SensorXYZ
from bhy2sense.sensor_ids import SensorID

manager = SensorManager()
accel = SensorXYZ(SensorID.ACC)
manager.subscribe(accel)
manager.process(packet)   # True: a subscribed sensor took it
accel.x, accel.data_available   # 16, True
accel.clear_data_available()
```

`process` hands the packet to the first subscribed sensor with the same ID
and returns whether one took it. A manager holds at most 10 sensors by
default; one more raises `OverflowError`. `unsubscribe` removes the first
sensor with the same ID.

Sensor classes:

- `Sensor`: scalar or event reading, format and `factor` from the sensor
  table; `value()` gives the reading, or for events `1.0` once per event.
- `SensorActivity`: `value` is the mask, `activity()` the message for its
  lowest set bit.
- `SensorOrientation`: `heading`, `pitch`, `roll`.
- `SensorQuaternion`: `x`, `y`, `z`, `w`, `accuracy`.
- `SensorXYZ`: `x`, `y`, `z`.
- `SensorBSEC`, `SensorBSEC2`, `SensorBSEC2Collector`: the BSEC outputs.

## Error codes (`bhy2sense.errors`)

`sensor_error_text(code)` returns the text for a firmware error code, an
empty string for `0`, and `"[Sensor error] Unknown error code"` for codes
not in the table; codes outside 0–255 raise `ValueError`.

## What this package does not do

It does not talk to a sensor hub. There is no SPI or I2C transport, no
host-interface commands, no firmware upload, and no way to configure sensors
on a device. Bring the bytes from your own transport.