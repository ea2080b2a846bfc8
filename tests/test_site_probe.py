from unittest.mock import MagicMock, patch

import requests

from site_probe import probe_site


def _response(status, reason="OK"):
    r = MagicMock()
    r.status_code = status
    r.reason = reason
    return r


@patch("site_probe.requests.get")
def test_probe_up(get):
    get.return_value = _response(200)

    result = probe_site("https://www.saucedemo.com", timeout=3)

    get.assert_called_once_with("https://www.saucedemo.com", timeout=3)
    assert result.ok
    assert result.status == 200
    assert result.latency_ms >= 0


@patch("site_probe.requests.get")
def test_probe_http_error_is_not_ok(get):
    get.return_value = _response(503, "Service Unavailable")

    result = probe_site("https://www.saucedemo.com")

    assert not result.ok
    assert result.status == 503
    assert result.error == "503 Service Unavailable"


@patch("site_probe.requests.get")
def test_probe_network_error_is_reported(get):
    get.side_effect = requests.ConnectionError("name resolution failed")

    result = probe_site("https://www.saucedemo.com")

    assert not result.ok
    assert result.status is None
    assert "name resolution failed" in result.error
