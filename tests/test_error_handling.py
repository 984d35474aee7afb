import requests

from core.error_handling import (
    AuthMissingError, PersistenceError, RemoteRejectedError, TransportError,
    format_log, from_requests_error, log_error,
)


def test_format_log_with_context():
    line = format_log("INFO", "upsert", "done", status_code=201)
    assert line == "[INFO] [upsert] done (status_code=201)"


def test_remote_rejected_carries_status():
    err = RemoteRejectedError("upsert", 422, "Invalid request")
    assert err.status_code == 422
    assert str(err) == "[upsert] HTTP 错误: 422 (Invalid request) - status_code=422"


def test_auth_missing_defaults():
    err = AuthMissingError()
    assert err.operation == "upsert"
    assert err.status_code is None


def test_log_error_for_known_and_unknown():
    assert log_error(PersistenceError("save", "disk full"), "save") == "[WARNING] [save] disk full"
    assert log_error(KeyError("x"), "load") == "[ERROR] [load] KeyError: 'x'"


def test_from_requests_error_mapping():
    assert from_requests_error(requests.exceptions.Timeout("t"), "upsert").reason == "请求超时"
    assert from_requests_error(requests.exceptions.SSLError("bad cert"), "upsert").reason == "SSL 握手失败"
    conn = from_requests_error(requests.exceptions.ConnectionError("refused"), "upsert")
    assert isinstance(conn, TransportError)
    assert conn.reason == "连接失败"

    resp = requests.Response()
    resp.status_code = 503
    http = from_requests_error(requests.exceptions.HTTPError(response=resp), "upsert")
    assert isinstance(http, RemoteRejectedError)
    assert http.status_code == 503
