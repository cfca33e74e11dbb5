# =============================================================================
# velairctl Library – Response Envelope Decoder
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

import json
from typing import Any, Dict, Union

from .codec import device_mode_from_int, fan_speed_from_int
from .exceptions import (
    VelairAmbiguousFailure,
    VelairDeviceError,
    VelairMalformedResponse,
)
from .models import CommandResponse, DeviceStatus


RawBody = Union[bytes, bytearray, str]


def _load_object(data: RawBody) -> Dict[str, Any]:
    """
    Decode a response body into a JSON object.

    Raises:
        VelairMalformedResponse:
            If the body is not valid JSON or its top level is not an object.
    """
    try:
        obj = json.loads(data)
    except (ValueError, TypeError, RecursionError) as exc:
        # UnicodeDecodeError and JSONDecodeError are both ValueError;
        # RecursionError comes from deeply nested arrays or objects.
        raise VelairMalformedResponse(f"response is not valid JSON: {exc}") from exc

    if not isinstance(obj, dict):
        raise VelairMalformedResponse(
            f"expected a JSON object, got {type(obj).__name__}"
        )
    return obj


def check_envelope(envelope: Dict[str, Any]) -> None:
    """
    Apply the success/error convention shared by every device response.

    A missing or null `success` counts as false, a missing or null `error`
    as empty.
    A non-empty `error` always wins, even next to `success: true`; some
    units do exactly that, e.g. for an unsupported mode.

    Raises:
        VelairMalformedResponse: `success` is not a boolean or `error` is
            not a string.
        VelairDeviceError: The envelope carries an error message.
        VelairAmbiguousFailure: `success` is false without any message.
    """
    success = envelope.get("success", False)
    error = envelope.get("error", "")
    if success is None:
        success = False
    if error is None:
        error = ""

    if not isinstance(success, bool):
        raise VelairMalformedResponse(f"'success' is not a boolean: {success!r}")
    if not isinstance(error, str):
        raise VelairMalformedResponse(f"'error' is not a string: {error!r}")

    if error:
        raise VelairDeviceError(error)
    if not success:
        raise VelairAmbiguousFailure()


def _section(envelope: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = envelope.get(key)
    if not isinstance(section, dict):
        raise VelairMalformedResponse(f"missing or invalid '{key}' object")
    return section


def _int_field(section: Dict[str, Any], key: str) -> int:
    value = section.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise VelairMalformedResponse(f"field '{key}' is not an integer: {value!r}")
    return value


def parse_raw_status(data: RawBody) -> DeviceStatus:
    """
    Parse the body of `/api/v/1/status` into a DeviceStatus.

    Expected shape:
        {"success": true,
         "RESULT": {"fs": 2, "nm": 1, "ps": 0, "sp": 22, "t": 25, "wm": 1},
         "setup": {"name": "LivingRoom"}}

    `sp` and `t` are taken as-is. `nm` and `ps` are true only when equal
    to 1; any other integer reads as false.

    Raises:
        VelairMalformedResponse, VelairDeviceError, VelairAmbiguousFailure:
            See check_envelope(); also raised for a missing field.
        VelairInvalidValue:
            If `fs` or `wm` is outside its enumeration.
    """
    envelope = _load_object(data)
    check_envelope(envelope)

    result = _section(envelope, "RESULT")
    setup = _section(envelope, "setup")

    name = setup.get("name")
    if not isinstance(name, str):
        raise VelairMalformedResponse(f"'setup.name' is not a string: {name!r}")

    fan_speed = fan_speed_from_int(_int_field(result, "fs"))
    mode = device_mode_from_int(_int_field(result, "wm"))

    return DeviceStatus(
        name=name,
        fan_speed=fan_speed,
        night_mode=_int_field(result, "nm") == 1,
        power=_int_field(result, "ps") == 1,
        set_point=_int_field(result, "sp"),
        temperature=_int_field(result, "t"),
        mode=mode,
    )


def parse_command_response(data: RawBody) -> CommandResponse:
    """
    Validate the answer to a set command.

    Returns:
        CommandResponse for an accepted command. It carries no device data.

    Raises:
        VelairMalformedResponse, VelairDeviceError, VelairAmbiguousFailure:
            See check_envelope().
    """
    envelope = _load_object(data)
    check_envelope(envelope)

    raw = data if isinstance(data, str) else bytes(data).decode("utf-8", errors="replace")
    return CommandResponse(raw=raw)
