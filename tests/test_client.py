"""Tests for VelairClient HTTP transport using a mocked requests.Session."""

from unittest.mock import Mock

import pytest
import requests

from velairctl import VelairClient
from velairctl.exceptions import (
    VelairAmbiguousFailure,
    VelairDeviceError,
    VelairInvalidValue,
    VelairTransportError,
)
from velairctl.models import DeviceMode, FanSpeed

BASE_URL = "http://192.168.1.60"
FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}

STATUS_BODY = (
    b'{"success":true,"RESULT":{"fs":4,"nm":0,"ps":1,"sp":24,"t":27,"wm":5},'
    b'"setup":{"name":"Bedroom"}}'
)


def _session(body=b'{"success":true}', status_code=200):
    response = Mock(status_code=status_code, content=body)
    session = Mock(spec=requests.Session)
    session.get.return_value = response
    return session


def test_base_url_trailing_slash_removed():
    client = VelairClient(BASE_URL + "//", session=_session())
    assert client.url("/api/v/1/status") == BASE_URL + "/api/v/1/status"


def test_get_status():
    session = _session(STATUS_BODY)
    client = VelairClient(BASE_URL, timeout_s=2.5, session=session)

    status = client.get_status()

    assert status.name == "Bedroom"
    assert status.fan_speed is FanSpeed.MAXIMUM
    assert status.mode is DeviceMode.AUTO
    assert status.power is True
    assert status.night_mode is False
    session.get.assert_called_once_with(
        BASE_URL + "/api/v/1/status", data=None, headers=None, timeout=2.5
    )


@pytest.mark.parametrize("enable,value", [(True, "1"), (False, "0")])
def test_set_night_mode(enable, value):
    session = _session()
    VelairClient(BASE_URL, session=session).set_night_mode(enable)

    session.get.assert_called_once_with(
        BASE_URL + "/api/v/1/set/feature/night",
        data={"value": value},
        headers=FORM_HEADERS,
        timeout=5.0,
    )


def test_set_fan_speed():
    session = _session()
    VelairClient(BASE_URL, session=session).set_fan_speed(FanSpeed.LOW)

    session.get.assert_called_once_with(
        BASE_URL + "/api/v/1/set/fan",
        data={"value": "1"},
        headers=FORM_HEADERS,
        timeout=5.0,
    )


def test_set_fan_speed_invalid_is_not_sent():
    session = _session()
    with pytest.raises(VelairInvalidValue):
        VelairClient(BASE_URL, session=session).set_fan_speed(9)
    session.get.assert_not_called()


def test_set_mode():
    session = _session()
    VelairClient(BASE_URL, session=session).set_mode(DeviceMode.DEHUMIDIFY)

    session.get.assert_called_once_with(
        BASE_URL + "/api/v/1/set/mode/dehumidification",
        data=None,
        headers=None,
        timeout=5.0,
    )


def test_set_mode_invalid_is_not_sent():
    session = _session()
    with pytest.raises(VelairInvalidValue):
        VelairClient(BASE_URL, session=session).set_mode(2)
    session.get.assert_not_called()


def test_command_reads_response_body():
    session = _session(b'{"success":true,"error":"unsupported"}')
    with pytest.raises(VelairDeviceError) as excinfo:
        VelairClient(BASE_URL, session=session).set_mode(DeviceMode.COOLING)
    assert excinfo.value.message == "unsupported"


def test_command_ambiguous_failure():
    session = _session(b'{"success":false}')
    with pytest.raises(VelairAmbiguousFailure):
        VelairClient(BASE_URL, session=session).set_night_mode(True)


def test_non_ok_status():
    session = _session(b"", status_code=500)
    with pytest.raises(VelairTransportError) as excinfo:
        VelairClient(BASE_URL, session=session).get_status()
    assert excinfo.value.status_code == 500
    assert "unexpected HTTP status code 500" in str(excinfo.value)


def test_network_error():
    session = _session()
    session.get.side_effect = requests.ConnectionError("refused")
    with pytest.raises(VelairTransportError) as excinfo:
        VelairClient(BASE_URL, session=session).set_fan_speed(FanSpeed.AUTO)
    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_context_manager_keeps_injected_session_open():
    session = _session()
    with VelairClient(BASE_URL, session=session) as client:
        client.set_night_mode(False)
    session.close.assert_not_called()


def test_context_manager_closes_own_session(monkeypatch):
    own = _session()
    monkeypatch.setattr(requests, "Session", lambda: own)
    with VelairClient(BASE_URL):
        pass
    own.close.assert_called_once_with()


def test_wrong_enum_is_not_sent():
    session = _session()
    client = VelairClient(BASE_URL, session=session)
    with pytest.raises(VelairInvalidValue):
        client.set_fan_speed(DeviceMode.COOLING)  # type: ignore[arg-type]
    with pytest.raises(VelairInvalidValue):
        client.set_mode(FanSpeed.HIGH)  # type: ignore[arg-type]
    session.get.assert_not_called()
