import json

from core.app_config import GitHubConfig, load_config, save_config
from core.paths import get_data_dir


def test_defaults():
    config = GitHubConfig()
    assert config.branch == "main"
    assert config.file_path == "log.txt"
    assert config.api_base_url == "https://api.github.com"
    assert not config.has_token()
    assert not config.is_complete()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "config.json"
    config = GitHubConfig(token="t", owner="octo", repo="notes", branch="dev", timeout=10)
    assert save_config(config, path)
    assert load_config(path) == config


def test_load_missing_or_corrupt_returns_defaults(tmp_path):
    assert load_config(tmp_path / "missing.json") == GitHubConfig()
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    assert load_config(bad) == GitHubConfig()


def test_from_dict_ignores_unknown_and_invalid(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "owner": " octo ",
        "repo": "notes",
        "timeout": "soon",
        "branch": None,
        "mode": "remote",
    }), encoding="utf-8")
    config = load_config(path)
    assert config.owner == "octo"
    assert config.repo == "notes"
    assert config.timeout == 30
    assert config.branch == "main"
    assert not hasattr(config, "mode")


def test_update_returns_new_object():
    config = GitHubConfig(owner="a")
    updated = config.update(owner="b", timeout=0)
    assert config.owner == "a"
    assert updated.owner == "b"
    assert updated.timeout == 30


def test_contents_url():
    config = GitHubConfig(owner="octo", repo="notes", file_path="log.txt")
    assert config.contents_url() == "https://api.github.com/repos/octo/notes/contents/log.txt"
    assert config.contents_url("a/b.md") == "https://api.github.com/repos/octo/notes/contents/a/b.md"
    assert config.contents_url("notes #1.md") == "https://api.github.com/repos/octo/notes/contents/notes%20%231.md"
    assert config.contents_url("日志/今天.md").endswith("/contents/%E6%97%A5%E5%BF%97/%E4%BB%8A%E5%A4%A9.md")


def test_repr_hides_token():
    assert "secret" not in repr(GitHubConfig(token="secret"))


def test_data_dir_default_and_env(tmp_path, monkeypatch):
    monkeypatch.delenv("DAILYGITLOG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_data_dir().name == ".dailygitlog"
    monkeypatch.setenv("DAILYGITLOG_HOME", str(tmp_path / "data"))
    assert get_data_dir() == (tmp_path / "data").resolve()
