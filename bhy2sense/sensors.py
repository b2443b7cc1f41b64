"""Virtual sensor objects and the manager that routes data packets to them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .data_parser import (
    DataBSEC,
    DataBSEC2,
    DataBSEC2Collector,
    DataOrientation,
    DataQuaternion,
    DataXYZ,
    parse_3d_vector,
    parse_activity,
    parse_bsec,
    parse_bsec2,
    parse_bsec2_collector,
    parse_bsec_legacy,
    parse_data,
    parse_euler,
    parse_quaternion,
)
from .packets import SensorDataPacket, SensorLongDataPacket
from .sensor_ids import SensorID, SensorPayload, find_sensor

MAX_SUBSCRIBED_SENSORS = 10
QUATERNION_SCALE_FACTOR = 0.000061035


class SensorClass(ABC):
    """Base of all virtual sensors: an id and a data-available flag."""

    def __init__(self, sensor_id: int) -> None:
        if not 0 <= int(sensor_id) <= 0xFF:
            raise ValueError(f"sensor id must fit in one byte, got {sensor_id}")
        self._id = int(sensor_id)
        self._data_available = False

    @property
    def id(self) -> int:
        return self._id

    @property
    def data_available(self) -> bool:
        return self._data_available

    def clear_data_available(self) -> None:
        self._data_available = False

    def _mark_data_available(self) -> None:
        self._data_available = True

    def set_data(self, packet: SensorDataPacket) -> None:
        """Update the reading from a short or long data packet."""
        if isinstance(packet, SensorLongDataPacket):
            self._set_long_data(packet)
        else:
            self._set_short_data(packet)

    def _set_short_data(self, packet: SensorDataPacket) -> None:
        """Short packets are ignored unless a sensor handles them."""

    def _set_long_data(self, packet: SensorLongDataPacket) -> None:
        """Long packets are ignored unless a sensor handles them."""

    @abstractmethod
    def __str__(self) -> str:
        ...


class Sensor(SensorClass):
    """A scalar or event sensor whose format and scale come from the sensor table."""

    def __init__(self, sensor_id: int) -> None:
        super().__init__(sensor_id)
        self._value = 0.0
        spec = find_sensor(self._id)
        self.factor: float = spec.scale_factor if spec else 0.0
        self._format: SensorPayload | None = spec.payload if spec else None

    @property
    def payload_format(self) -> SensorPayload | None:
        return self._format

    def value(self) -> float:
        """The last reading; for events, 1 once per detected event, else 0."""
        if self._format is SensorPayload.PEVENT:
            if self._value > 0:
                self._value = 0.0
                return 1.0
            return 0.0
        return self._value

    def _set_short_data(self, packet: SensorDataPacket) -> None:
        if self._format is None:
            return
        parsed = parse_data(packet, self.factor, self._format)
        if parsed is not None:
            self._value = parsed

    def __str__(self) -> str:
        if self._format is SensorPayload.PEVENT:
            return "Event detected\n" if self.value() else ""
        return f"Data value: {self._value:.3f}\n"


_ACTIVITY_MESSAGES = (
    "Still activity ended",
    "Walking activity ended",
    "Running activity ended",
    "On bicycle activity ended",
    "In vehicle activity ended",
    "Tilting activity ended",
    "In vehicle still ended",
    "",
    "Still activity started",
    "Walking activity started",
    "Running activity started",
    "On bicycle activity started",
    "IN vehicle activity started",
    "Tilting activity started",
    "In vehicle still started",
    "",
)
_NO_ACTIVITY = "Waiting to detect valid activity"


class SensorActivity(SensorClass):
    """Activity recognition: a 16-bit mask of started and ended activities."""

    def __init__(self, sensor_id: int) -> None:
        super().__init__(sensor_id)
        self.value = 0

    def _set_short_data(self, packet: SensorDataPacket) -> None:
        self.value = parse_activity(packet)

    def activity(self) -> str:
        """Message for the lowest set bit of the mask."""
        return next(
            (msg for bit, msg in enumerate(_ACTIVITY_MESSAGES) if self.value >> bit & 1),
            _NO_ACTIVITY,
        )

    def __str__(self) -> str:
        return self.activity()


class SensorBSEC(SensorClass):
    """BSEC air-quality output, current or legacy frame layout by sensor id."""

    def __init__(self, sensor_id: int) -> None:
        super().__init__(sensor_id)
        self.data = DataBSEC()

    iaq = property(lambda self: self.data.iaq)
    iaq_s = property(lambda self: self.data.iaq_s)
    b_voc_eq = property(lambda self: self.data.b_voc_eq)
    co2_eq = property(lambda self: self.data.co2_eq)
    accuracy = property(lambda self: self.data.accuracy)
    comp_t = property(lambda self: self.data.comp_t)
    comp_h = property(lambda self: self.data.comp_h)
    comp_g = property(lambda self: self.data.comp_g)

    def _set_long_data(self, packet: SensorLongDataPacket) -> None:
        if self._id == SensorID.BSEC:
            self.data = parse_bsec(packet)
        elif self._id == SensorID.BSEC_LEGACY:
            self.data = parse_bsec_legacy(packet)

    def __str__(self) -> str:
        return str(self.data)


class SensorBSEC2(SensorClass):
    """BSEC2 gas classifier output."""

    def __init__(self, sensor_id: int) -> None:
        super().__init__(sensor_id)
        self.data = DataBSEC2()
        self.new_data_flag = False

    gas_estimates = property(lambda self: self.data.gas_estimates)
    accuracy = property(lambda self: self.data.accuracy)

    def _set_short_data(self, packet: SensorDataPacket) -> None:
        if self._id == SensorID.BSEC2:
            self.data = parse_bsec2(packet)
            self.new_data_flag = True

    def __str__(self) -> str:
        return str(self.data)


class SensorBSEC2Collector(SensorClass):
    """Raw gas-sensor samples from the BSEC2 collector."""

    def __init__(self, sensor_id: int) -> None:
        super().__init__(sensor_id)
        self.data = DataBSEC2Collector()

    timestamp = property(lambda self: self.data.timestamp)
    temperature = property(lambda self: self.data.raw_temp)
    pressure = property(lambda self: self.data.raw_pressure)
    humidity = property(lambda self: self.data.raw_hum)
    gas = property(lambda self: self.data.raw_gas)
    gas_index = property(lambda self: self.data.gas_index)

    def _set_long_data(self, packet: SensorLongDataPacket) -> None:
        if self._id == SensorID.BSEC2_COLLECTOR:
            self.data = parse_bsec2_collector(packet)

    def __str__(self) -> str:
        return str(self.data)


class SensorOrientation(SensorClass):
    """Euler angles scaled by the factor from the sensor table."""

    def __init__(self, sensor_id: int) -> None:
        super().__init__(sensor_id)
        self.data = DataOrientation()
        spec = find_sensor(self._id)
        self.factor: float = spec.scale_factor if spec else 0.0

    heading = property(lambda self: self.data.heading)
    pitch = property(lambda self: self.data.pitch)
    roll = property(lambda self: self.data.roll)

    def _set_short_data(self, packet: SensorDataPacket) -> None:
        self.data = parse_euler(packet, self.factor)

    def __str__(self) -> str:
        return str(self.data)


class SensorQuaternion(SensorClass):
    """Rotation quaternion in fixed-point units of 2**-14."""

    def __init__(self, sensor_id: int) -> None:
        super().__init__(sensor_id)
        self.data = DataQuaternion()
        self._factor = QUATERNION_SCALE_FACTOR

    @property
    def factor(self) -> float:
        return self._factor

    x = property(lambda self: self.data.x)
    y = property(lambda self: self.data.y)
    z = property(lambda self: self.data.z)
    w = property(lambda self: self.data.w)
    accuracy = property(lambda self: self.data.accuracy)

    def _set_short_data(self, packet: SensorDataPacket) -> None:
        self.data = parse_quaternion(packet, self._factor)

    def __str__(self) -> str:
        return str(self.data)


class SensorXYZ(SensorClass):
    """Three-axis raw vector."""

    def __init__(self, sensor_id: int) -> None:
        super().__init__(sensor_id)
        self.data = DataXYZ()

    x = property(lambda self: self.data.x)
    y = property(lambda self: self.data.y)
    z = property(lambda self: self.data.z)

    def _set_short_data(self, packet: SensorDataPacket) -> None:
        self.data = parse_3d_vector(packet)

    def __str__(self) -> str:
        return str(self.data)


class SensorManager:
    """Holds subscribed sensors and hands each packet to the one with its id."""

    def __init__(self, capacity: int = MAX_SUBSCRIBED_SENSORS) -> None:
        self._capacity = capacity
        self._sensors: list[SensorClass] = []

    @property
    def sensors(self) -> tuple[SensorClass, ...]:
        return tuple(self._sensors)

    def __len__(self) -> int:
        return len(self._sensors)

    def subscribe(self, sensor: SensorClass) -> None:
        if len(self._sensors) >= self._capacity:
            raise OverflowError(f"cannot subscribe more than {self._capacity} sensors")
        self._sensors.append(sensor)

    def unsubscribe(self, sensor: SensorClass) -> None:
        """Remove the first sensor with the same id; the last one takes its place."""
        for i, existing in enumerate(self._sensors):
            if existing.id == sensor.id:
                last = self._sensors.pop()
                if i < len(self._sensors):
                    self._sensors[i] = last
                return

    def process(self, packet: SensorDataPacket) -> bool:
        """Deliver ``packet`` to the first sensor with its id; True if one took it."""
        for sensor in self._sensors:
            if sensor.id == packet.sensor_id:
                sensor.set_data(packet)
                sensor._mark_data_available()
                return True
        return False