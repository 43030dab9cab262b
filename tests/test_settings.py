import pytest
from pydantic import ValidationError

from treequery.config.settings import QuerySettings, load_settings


def test_defaults() -> None:
    settings = QuerySettings()
    assert settings.limit is None
    assert settings.bind_name == "match"
    assert settings.log_profile == "cli"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREEQUERY_LIMIT", "3")
    monkeypatch.setenv("TREEQUERY_BIND_NAME", "node")
    settings = load_settings()
    assert settings.limit == 3
    assert settings.bind_name == "node"


def test_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("TREEQUERY_LIMIT=7\n", encoding="utf-8")
    assert load_settings().limit == 7


def test_explicit_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREEQUERY_LIMIT", "3")
    assert load_settings(limit=5).limit == 5


def test_none_overrides_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREEQUERY_BIND_NAME", "node")
    assert load_settings(bind_name=None).bind_name == "node"


def test_limit_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        load_settings(limit=0)


def test_unknown_profile_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREEQUERY_LOG_PROFILE", "verbose")
    with pytest.raises(ValidationError):
        load_settings()
