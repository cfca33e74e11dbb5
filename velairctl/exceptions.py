# =============================================================================
# velairctl Library – Exceptions Module
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

from typing import Any, Optional


class VelairError(Exception):
    """
    Base exception for the library.

    Every exception raised by velairctl inherits from this class, so callers
    can catch `VelairError` to handle any library-specific failure at once.
    """
    pass


class VelairTransportError(VelairError):
    """
    Errors related to the transport layer.

    This includes:
      - Network unreachable / connection refused
      - Request timeouts
      - Any HTTP status other than 200 OK

    Attributes:
        status_code: HTTP status returned by the unit, or None when no
            response was received at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class VelairProtocolError(VelairError):
    """
    The unit answered, but the body does not follow the expected protocol.
    """
    pass


class VelairMalformedResponse(VelairProtocolError):
    """
    The response body is not JSON, or not a JSON object of the expected
    envelope shape (wrong types, missing `RESULT` fields, ...).
    """
    pass


class VelairInvalidValue(VelairProtocolError, ValueError):
    """
    An integer fell outside the valid domain of its enumeration.

    Attributes:
        field: Name of the value being decoded ("fan speed", "device mode").
        value: The offending raw value, kept for diagnosis.
    """

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"invalid {field} {value!r}")
        self.field = field
        self.value = value


class VelairDeviceError(VelairError):
    """
    The unit explicitly reported an error string.

    Raised whenever the envelope carries a non-empty `error`, regardless of
    the value of its `success` flag.

    Attributes:
        message: Error text exactly as sent by the device.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"error from device {message}")
        self.message = message


class VelairAmbiguousFailure(VelairError):
    """
    The unit reported `success=false` without any error message.
    """

    def __init__(self, message: str = "unsuccessful request but no error defined") -> None:
        super().__init__(message)
