# =============================================================================
# velairctl Library – Wire Codec
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose, and non-infringement. In no event shall the
# authors or copyright holders be liable for any claim, damages, or other
# liability, whether in an action of contract, tort, or otherwise, arising from,
# out of, or in connection with the software or the use or other dealings in
# the software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license text should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

"""
Conversions between wire values and the library enums.

Every function here is pure: no I/O, no logging, no shared state.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from .exceptions import VelairInvalidValue
from .models import DEVICE_MODE_NAMES, FAN_SPEED_NAMES, DeviceMode, FanSpeed


# ---- Endpoints (path only) ----
STATUS_PATH = "/api/v/1/status"
NIGHT_MODE_PATH = "/api/v/1/set/feature/night"
FAN_SPEED_PATH = "/api/v/1/set/fan"
MODE_PATH_PREFIX = "/api/v/1/set/mode/"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

UNKNOWN = "unknown"


def _require_int(field: str, raw: Any) -> int:
    # bool is an int subclass; `true` is not a valid wire value.
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise VelairInvalidValue(field, raw)
    return raw


def fan_speed_from_int(raw: int) -> FanSpeed:
    """
    Convert a wire integer to a FanSpeed.

    Args:
        raw: Integer as reported by the unit (`RESULT.fs`).

    Returns:
        The matching FanSpeed.

    Raises:
        VelairInvalidValue: If `raw` is not an integer in [0, 4], or is a
            DeviceMode member.
    """
    if isinstance(raw, DeviceMode):
        raise VelairInvalidValue("fan speed", raw)
    raw = _require_int("fan speed", raw)
    if 0 <= raw <= 4:
        return FanSpeed(raw)
    raise VelairInvalidValue("fan speed", raw)


def device_mode_from_int(raw: int) -> DeviceMode:
    """
    Convert a wire integer to a DeviceMode.

    Only 0, 1, 3, 4 and 5 are valid. 2 is rejected like any other value.

    Raises:
        VelairInvalidValue: If `raw` does not name a mode, or is a FanSpeed
            member.
    """
    if isinstance(raw, FanSpeed):
        raise VelairInvalidValue("device mode", raw)
    raw = _require_int("device mode", raw)
    try:
        return DeviceMode(raw)
    except ValueError:
        raise VelairInvalidValue("device mode", raw) from None


def encode_fan_speed(speed: FanSpeed) -> int:
    """Wire value of a fan speed."""
    return int(speed)


def encode_night_mode(enable: bool) -> str:
    return "1" if enable else "0"


def to_display_string(value: Union[FanSpeed, DeviceMode, Any]) -> str:
    """
    Canonical lowercase name of a fan speed or device mode.

    Never raises: anything that is not a member of either enum (a plain
    int, None, ...) is rendered as "unknown".
    """
    # Both enums share integer values, so look up by type, not by value.
    if isinstance(value, FanSpeed):
        return FAN_SPEED_NAMES.get(value, UNKNOWN)
    if isinstance(value, DeviceMode):
        return DEVICE_MODE_NAMES.get(value, UNKNOWN)
    return UNKNOWN


def _as_fan_speed(speed: Union[FanSpeed, int]) -> FanSpeed:
    if isinstance(speed, FanSpeed):
        return speed
    return fan_speed_from_int(speed)


def _as_device_mode(mode: Union[DeviceMode, int]) -> DeviceMode:
    if isinstance(mode, DeviceMode):
        return mode
    return device_mode_from_int(mode)


def night_mode_form(enable: bool) -> Dict[str, str]:
    """Form body for the night mode command: `value=1` or `value=0`."""
    return {"value": encode_night_mode(enable)}


def fan_speed_form(speed: Union[FanSpeed, int]) -> Dict[str, str]:
    """
    Form body for the fan speed command: `value=<0..4>`.

    Raw integers are validated first and raise VelairInvalidValue when out
    of range, so an invalid speed never reaches the unit.
    """
    return {"value": str(encode_fan_speed(_as_fan_speed(speed)))}


def mode_path(mode: Union[DeviceMode, int]) -> str:
    """
    Path of the set-mode endpoint for `mode`.

    The mode is sent as a path segment, e.g. `/api/v/1/set/mode/cooling`.
    """
    return MODE_PATH_PREFIX + to_display_string(_as_device_mode(mode))
