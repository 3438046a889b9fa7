from __future__ import annotations

import io
import json
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from pointwallet import cli


def _fake_response(payload) -> MagicMock:
    resp = MagicMock()
    resp.read.return_value = json.dumps(payload).encode("utf-8")
    resp.__enter__.return_value = resp
    return resp


def test_join_url():
    assert cli._join_url("http://host:8080/", "point/1") == "http://host:8080/point/1"
    assert cli._join_url("http://host:8080", "/healthz") == "http://host:8080/healthz"
    assert cli._join_url("http://host", "https://other/x") == "https://other/x"


def test_charge_sends_raw_integer_body(capsys):
    with patch("pointwallet.cli.urllib.request.urlopen", return_value=_fake_response({"id": 1, "point": 10, "updateMillis": 5})) as urlopen:
        code = cli.main(["--base-url", "http://svc", "charge", "1", "10"])

    assert code == 0
    req = urlopen.call_args.args[0]
    assert req.full_url == "http://svc/point/1/charge"
    assert req.get_method() == "PATCH"
    assert req.data == b"10"
    assert json.loads(capsys.readouterr().out)["point"] == 10


def test_http_error_reports_code_and_message(capsys):
    error = urllib.error.HTTPError(
        url="http://svc/point/1/use",
        code=400,
        msg="Bad Request",
        hdrs=None,
        fp=io.BytesIO(b'{"code": "400", "message": "insufficient points"}'),
    )
    with patch("pointwallet.cli.urllib.request.urlopen", side_effect=error):
        code = cli.main(["--base-url", "http://svc", "use", "1", "10"])

    assert code == 1
    assert "HTTP 400: 400 insufficient points" in capsys.readouterr().err


def test_amount_must_be_an_integer():
    with pytest.raises(SystemExit):
        cli.main(["charge", "1", "ten"])
