# =============================================================================
# VelairClient - HTTP client for Velair VSD air conditioners
# -----------------------------------------------------------------------------
# Copyright (c) Alejandro Feránandez Rodríguez. All rights reserved.
#
# This source code is released under the GEL 3.0 License.
#
# DISCLAIMER:
# This software is provided "AS IS", without warranty of any kind, express or
# implied, including but not limited to the warranties of merchantability,
# fitness for a particular purpose and noninfringement. In no event shall the
# authors or copyright holders be liable for any claim, damages or other
# liability, whether in an action of contract, tort or otherwise, arising from,
# out of or in connection with the software or the use or other dealings in the
# software.
#
# LICENSE – GEL 3.0:
# You may use, copy, modify, and distribute this code according to the terms of
# the GEL 3.0 License. A full copy of the license should accompany any
# redistribution. If the license text is missing, see: https://gel-license.org
#  @author
#    Alejandro Fernández Rodríguez — github.com/afernandezLuc
#  @version 1.0.0
#  @date 2026-01-07
# =============================================================================

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

import requests

from .codec import (
    FAN_SPEED_PATH,
    FORM_CONTENT_TYPE,
    NIGHT_MODE_PATH,
    STATUS_PATH,
    fan_speed_form,
    mode_path,
    night_mode_form,
)
from .envelope import parse_command_response, parse_raw_status
from .exceptions import VelairTransportError
from .models import CommandResponse, DeviceMode, DeviceStatus, FanSpeed

_logger = logging.getLogger(__name__)


class VelairClient:
    """
    Minimal HTTP client for Uflex Velair VSD air conditioners.

    The unit exposes a small JSON API under `/api/v/1/`. Every endpoint is
    reached with GET; commands that take a value send it as a form-encoded
    body (`value=<n>`), while the mode command puts the mode name in the path.

    Every response is wrapped in the same envelope:
        {"success": bool, "error": "..."}
    which is validated by velairctl.envelope before anything is returned.

    One request per call: no retries, no caching, no authentication.
    """

    def __init__(
        self,
        base_url: str,
        timeout_s: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a VelairClient.

        Args:
            base_url:
                Base URL of the unit, e.g. 'http://192.168.1.60'. Trailing
                slashes are removed.
            timeout_s:
                HTTP request timeout in seconds.
            session:
                Optional preconfigured requests.Session (custom adapters,
                proxies, a mock in tests). If not provided, a new session is
                created and owned by the client.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s

        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self) -> "VelairClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if it was created by this client."""
        if self._owns_session:
            self.session.close()

    def url(self, path: str) -> str:
        """
        Full URL for an endpoint path.

        Returns:
            e.g. 'http://192.168.1.60/api/v/1/status'.
        """
        return f"{self.base_url}{path}"

    def _get(self, path: str, form: Optional[Dict[str, str]] = None) -> bytes:
        """
        Perform one GET request and return the raw body of a 200 response.

        Raises:
            VelairTransportError:
                On network errors, timeouts or any status other than 200.
        """
        url = self.url(path)
        headers = {"Content-Type": FORM_CONTENT_TYPE} if form is not None else None

        _logger.debug("GET %s form=%s", url, form)
        try:
            r = self.session.get(
                url,
                data=form,
                headers=headers,
                timeout=self.timeout_s,
            )
        except requests.RequestException as exc:
            raise VelairTransportError(f"HTTP error requesting {url}: {exc}") from exc

        _logger.debug("GET %s -> %s", url, r.status_code)
        if r.status_code != 200:
            raise VelairTransportError(
                f"unexpected HTTP status code {r.status_code}",
                status_code=r.status_code,
            )

        return r.content

    def get_status(self) -> DeviceStatus:
        """
        Read the current status of the unit.

        Returns:
            DeviceStatus snapshot.

        Raises:
            VelairTransportError:
                On network errors or a non-200 response.
            VelairMalformedResponse, VelairDeviceError, VelairAmbiguousFailure,
            VelairInvalidValue:
                See velairctl.envelope.parse_raw_status().
        """
        return parse_raw_status(self._get(STATUS_PATH))

    def set_night_mode(self, enable: bool) -> None:
        """
        Enable or disable night mode.
        """
        self._command(NIGHT_MODE_PATH, night_mode_form(enable))

    def set_fan_speed(self, speed: Union[FanSpeed, int]) -> None:
        """
        Set the fan speed.

        The unit may report success without actually changing the speed if
        it does not support it.

        Raises:
            VelairInvalidValue:
                If `speed` is a raw integer outside [0, 4]. Nothing is sent.
        """
        self._command(FAN_SPEED_PATH, fan_speed_form(speed))

    def set_mode(self, mode: Union[DeviceMode, int]) -> None:
        """
        Set the operating mode.

        Some units return success for modes they do not implement (for
        instance dehumidification), so success does not guarantee a change.

        Raises:
            VelairInvalidValue:
                If `mode` is a raw integer that names no mode. Nothing is sent.
        """
        self._command(mode_path(mode))

    def _command(self, path: str, form: Optional[Dict[str, str]] = None) -> CommandResponse:
        body = self._get(path, form)
        return parse_command_response(body)
