from .client import VelairClient
from .models import CommandResponse, DeviceMode, DeviceStatus, FanSpeed
from .codec import (
    device_mode_from_int,
    encode_fan_speed,
    fan_speed_from_int,
    to_display_string,
)
from .envelope import parse_command_response, parse_raw_status
from .exceptions import (
    VelairError,
    VelairTransportError,
    VelairProtocolError,
    VelairMalformedResponse,
    VelairInvalidValue,
    VelairDeviceError,
    VelairAmbiguousFailure,
)

__all__ = [
    "VelairClient",
    "CommandResponse",
    "DeviceMode",
    "DeviceStatus",
    "FanSpeed",
    "device_mode_from_int",
    "encode_fan_speed",
    "fan_speed_from_int",
    "to_display_string",
    "parse_command_response",
    "parse_raw_status",
    "VelairError",
    "VelairTransportError",
    "VelairProtocolError",
    "VelairMalformedResponse",
    "VelairInvalidValue",
    "VelairDeviceError",
    "VelairAmbiguousFailure",
]
