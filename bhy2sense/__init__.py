"""Decoding of BHI260/BHA260 sensor hub packets, frames, sensor readings and error codes."""

__version__ = "0.1.0"