import base64

import requests

from core.app_config import GitHubConfig
from core.upsert_client import RemoteUpsertClient


class DummyResp:
    def __init__(self, status, payload=None):
        self.status_code = status
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, get=None, put=None):
        # get / put: DummyResp 或异常实例
        self._get = get if get is not None else DummyResp(404, {"message": "Not Found"})
        self._put = put if put is not None else DummyResp(201, {"content": {"sha": "new-sha"}})
        self.calls = []

    def _respond(self, resp):
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self._respond(self._get)

    def put(self, url, **kwargs):
        self.calls.append(("PUT", url, kwargs))
        return self._respond(self._put)

    def close(self):
        pass


def make_config(**kwargs):
    values = dict(token="t0ken", owner="octo", repo="notes", branch="main")
    values.update(kwargs)
    return GitHubConfig(**values)


URL = "https://api.github.com/repos/octo/notes/contents/log.txt"


def test_create_omits_sha():
    session = FakeSession()
    client = RemoteUpsertClient(session=session)
    result = client.upsert("log.txt", b"hello", "Update log", make_config())

    assert result.success
    assert result.created
    assert result.status_code == 201
    assert result.content_sha == "new-sha"

    method, url, kwargs = session.calls[1]
    assert method == "PUT"
    assert url == URL
    body = kwargs["json"]
    assert "sha" not in body
    assert body["message"] == "Update log"
    assert body["branch"] == "main"
    assert base64.b64decode(body["content"]) == b"hello"


def test_update_sends_fetched_sha():
    session = FakeSession(
        get=DummyResp(200, {"sha": "abc123", "path": "log.txt"}),
        put=DummyResp(200, {"content": {"sha": "def456"}}),
    )
    client = RemoteUpsertClient(session=session)
    result = client.upsert("log.txt", b"more", "Update log", make_config())

    assert result.success
    assert not result.created
    assert session.calls[1][2]["json"]["sha"] == "abc123"


def test_get_is_authenticated_and_targets_branch():
    session = FakeSession()
    client = RemoteUpsertClient(session=session)
    client.upsert("log.txt", b"x", "msg", make_config(branch="daily"))

    method, url, kwargs = session.calls[0]
    assert method == "GET"
    assert url == URL
    assert kwargs["headers"]["Authorization"] == "token t0ken"
    assert kwargs["params"] == {"ref": "daily"}
    assert session.calls[1][2]["headers"]["Authorization"] == "token t0ken"
    assert session.calls[1][2]["json"]["branch"] == "daily"


def test_sha_fetch_transport_error_treated_as_create():
    session = FakeSession(get=requests.exceptions.ConnectionError("dns failure"))
    client = RemoteUpsertClient(session=session)
    result = client.upsert("log.txt", b"x", "msg", make_config())

    assert result.success
    assert "sha" not in session.calls[1][2]["json"]


def test_sha_fetch_bad_body_treated_as_create():
    for resp in (DummyResp(200, None), DummyResp(200, ["not", "a", "dict"]), DummyResp(200, {"sha": 5})):
        session = FakeSession(get=resp)
        assert RemoteUpsertClient(session=session).fetch_sha("log.txt", make_config()) is None


def test_missing_token_makes_no_request():
    session = FakeSession()
    client = RemoteUpsertClient(session=session)
    result = client.upsert("log.txt", b"x", "msg", make_config(token="  "))

    assert not result.success
    assert result.status_code is None
    assert "令牌" in result.error
    assert session.calls == []


def test_missing_repo_makes_no_request():
    session = FakeSession()
    client = RemoteUpsertClient(session=session)
    result = client.upsert("log.txt", b"x", "msg", make_config(repo=""))

    assert not result.success
    assert session.calls == []


def test_rejected_status_is_reported():
    session = FakeSession(
        get=DummyResp(200, {"sha": "stale"}),
        put=DummyResp(409, {"message": "log.txt does not match stale"}),
    )
    client = RemoteUpsertClient(session=session)
    result = client.upsert("log.txt", b"x", "msg", make_config())

    assert not result.success
    assert result.status_code == 409
    assert "409" in result.error
    assert "does not match" in result.error
    # 不重试
    assert [c[0] for c in session.calls] == ["GET", "PUT"]


def test_put_transport_error_is_reported():
    session = FakeSession(put=requests.exceptions.Timeout("read timed out"))
    client = RemoteUpsertClient(session=session)
    result = client.upsert("log.txt", b"x", "msg", make_config())

    assert not result.success
    assert result.status_code is None
    assert result.error == "请求超时"
    assert len(session.calls) == 2


def test_empty_message_uses_default():
    session = FakeSession()
    client = RemoteUpsertClient(session=session)
    client.upsert("log.txt", b"x", "", make_config(default_commit_message="auto"))
    assert session.calls[1][2]["json"]["message"] == "auto"


def test_submit_upsert_returns_future():
    session = FakeSession()
    client = RemoteUpsertClient(session=session)
    try:
        future = client.submit_upsert("log.txt", b"x", "msg", make_config())
        result = future.result(timeout=5)
    finally:
        client.close()
    assert result.success
    assert result.path == "log.txt"


def test_custom_base_url_and_nested_path():
    session = FakeSession()
    client = RemoteUpsertClient(session=session)
    config = make_config(api_base_url="https://ghe.example.com/api/v3/")
    client.upsert("/logs/2025/log.md", b"x", "msg", config)
    assert session.calls[0][1] == "https://ghe.example.com/api/v3/repos/octo/notes/contents/logs/2025/log.md"
