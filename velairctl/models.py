# =============================================================================
# velairctl Library – Models
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

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict


class FanSpeed(IntEnum):
    """
    Fan speed of the unit.

    Values are the integers used on the wire (`RESULT.fs` and the `value`
    field of the set-fan command). Some units do not support every speed;
    the library cannot tell which.
    """

    AUTO = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    MAXIMUM = 4

    def __str__(self) -> str:
        return FAN_SPEED_NAMES[self]


class DeviceMode(IntEnum):
    """
    Operating mode of the unit.

    The wire encoding is not contiguous: 2 is not used by the firmware.
    Not all units support all modes.
    """

    HEATING = 0
    COOLING = 1
    DEHUMIDIFY = 3
    FAN_ONLY = 4
    AUTO = 5

    def __str__(self) -> str:
        return DEVICE_MODE_NAMES[self]


# Canonical lowercase names. The mode names double as URL path segments of
# the set-mode endpoint and must not change.
FAN_SPEED_NAMES: Dict[FanSpeed, str] = {
    FanSpeed.AUTO: "auto",
    FanSpeed.LOW: "low",
    FanSpeed.MEDIUM: "medium",
    FanSpeed.HIGH: "high",
    FanSpeed.MAXIMUM: "maximum",
}

DEVICE_MODE_NAMES: Dict[DeviceMode, str] = {
    DeviceMode.HEATING: "heating",
    DeviceMode.COOLING: "cooling",
    DeviceMode.DEHUMIDIFY: "dehumidification",
    DeviceMode.FAN_ONLY: "fanonly",
    DeviceMode.AUTO: "auto",
}


@dataclass(frozen=True)
class DeviceStatus:
    """
    Snapshot of the unit status, built from one `/api/v/1/status` response.

    Attributes:
        name: Device name configured on the unit (`setup.name`).
        fan_speed: Current fan speed.
        night_mode: True if night mode is enabled.
        power: True if the unit is switched on.
        set_point: Target temperature in degrees Celsius.
        temperature: Measured temperature in degrees Celsius.
        mode: Current operating mode.
    """

    name: str
    fan_speed: FanSpeed
    night_mode: bool
    power: bool
    set_point: int
    temperature: int
    mode: DeviceMode


@dataclass(frozen=True)
class CommandResponse:
    """
    Validated answer to a set command.

    A successful response only means the unit accepted the request at the
    protocol level. Some units report success for modes or speeds they do
    not actually support.

    Attributes:
        raw: Original response body text.
    """

    raw: str
