"""Human-readable text for error codes reported by the sensor hub."""

from __future__ import annotations

from types import MappingProxyType

_PREFIX = "[Sensor error] "
UNKNOWN_SENSOR_ERROR = _PREFIX + "Unknown error code"

_SENSOR_ERRORS = {
    0x10: "Bootloader reports: Firmware Expected Version Mismatch",
    0x11: "Bootloader reports: Firmware Upload Failed: Bad Header CRC",
    0x12: "Bootloader reports: Firmware Upload Failed: SHA Hash Mismatch",
    0x13: "Bootloader reports: Firmware Upload Failed: Bad Image CRC",
    0x14: "Bootloader reports: Firmware Upload Failed: ECDSA Signature Verification Failed",
    0x15: "Bootloader reports: Firmware Upload Failed: Bad Public Key CRC",
    0x16: "Bootloader reports: Firmware Upload Failed: Signed Firmware Required",
    0x17: "Bootloader reports: Firmware Upload Failed: FW Header Missing",
    0x19: "Bootloader reports: Unexpected Watchdog Reset",
    0x1A: "ROM Version Mismatch",
    0x1B: "Bootloader reports: Fatal Firmware Error",
    0x1C: "Chained Firmware Error: Next Payload Not Found",
    0x1D: "Chained Firmware Error: Payload Not Valid",
    0x1E: "Chained Firmware Error: Payload Entries Invalid",
    0x1F: "Bootloader reports: Bootloader Error: OTP CRC Invalid",
    0x20: "Firmware Init Failed",
    0x21: "Sensor Init Failed: Unexpected Device ID",
    0x22: "Sensor Init Failed: No Response from Device",
    0x23: "Sensor Init Failed: Unknown",
    0x24: "Sensor Error: No Valid Data",
    0x25: "Slow Sample Rate",
    0x26: "Data Overflow (saturated sensor data)",
    0x27: "Stack Overflow",
    0x28: "Insufficient Free RAM",
    0x29: "Sensor Init Failed: Driver Parsing Error",
    0x2A: "Too Many RAM Banks Required",
    0x2B: "Invalid Event Specified",
    0x2C: "More than 32 On Change",
    0x2D: "Firmware Too Large",
    0x2F: "Invalid RAM Banks",
    0x30: "Math Error",
    0x40: "Memory Error",
    0x41: "SWI3 Error",
    0x42: "SWI4 Error",
    0x43: "Illegal Instruction Error",
    0x44: "Bootloader reports: Unhandled Interrupt Error / Exception / Postmortem Available",
    0x45: "Invalid Memory Access",
    0x50: "Algorithm Error: BSX Init",
    0x51: "Algorithm Error: BSX Do Step",
    0x52: "Algorithm Error: Update Sub",
    0x53: "Algorithm Error: Get Sub",
    0x54: "Algorithm Error: Get Phys",
    0x55: "Algorithm Error: Unsupported Phys Rate",
    0x56: "Algorithm Error: Cannot find BSX Driver",
    0x60: "Sensor Self-Test Failure",
    0x61: "Sensor Self-Test X Axis Failure",
    0x62: "Sensor Self-Test Y Axis Failure",
    0x64: "Sensor Self-Test Z Axis Failure",
    0x65: "FOC Failure",
    0x66: "Sensor Busy",
    0x6F: "Self-Test or FOC Test Unsupported",
    0x72: "No Host Interrupt Set",
    0x73: "Event ID Passed to Host Interface Has No Known Size",
    0x75: "Host Download Channel Underflow (Host Read Too Fast)",
    0x76: "Host Upload Channel Overflow (Host Wrote Too Fast)",
    0x77: "Host Download Channel Empty",
    0x78: "DMA Error",
    0x79: "Corrupted Input Block Chain",
    0x7A: "Corrupted Output Block Chain",
    0x7B: "Buffer Block Manager Error",
    0x7C: "Input Channel Not Word Aligned",
    0x7D: "Too Many Flush Events",
    0x7E: "Unknown Host Channel Error",
    0x81: "Decimation Too Large",
    0x90: "Master SPI/I2C Queue Overflow",
    0x91: "SPI/I2C Callback Error",
    0xA0: "Timer Scheduling Error",
    0xB0: "Invalid GPIO for Host IRQ",
    0xB1: "Error Sending Initialized Meta Events",
    0xC0: "Bootloader reports: Command Error",
    0xC1: "Bootloader reports: Command Too Long",
    0xC2: "Bootloader reports: Command Buffer Overflow",
    0xD0: "User Mode Error: Sys Call Invalid",
    0xD1: "User Mode Error: Trap Invalid",
    0xE1: "Firmware Upload Failed: Firmware header corrupt",
    0xE2: "Sensor Data Injection: Invalid input stream",
}

SENSOR_ERRORS = MappingProxyType(
    {code: _PREFIX + text for code, text in _SENSOR_ERRORS.items()}
)


def sensor_error_text(code):
    """Describe a firmware error code; 0 means no error and gives an empty string."""
    code = int(code)
    if not 0 <= code <= 0xFF:
        raise ValueError(f"sensor error code must fit in one byte, got {code}")
    if code == 0:
        return ""
    return SENSOR_ERRORS.get(code, UNKNOWN_SENSOR_ERROR)