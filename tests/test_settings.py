from pathlib import Path

import pytest
from pydantic import ValidationError

from servedoc.settings import DEFAULT_REMOTE_REPOSITORY, Settings


def test_defaults(monkeypatch):
    for name in ("SERVEDOC_PORT", "SERVEDOC_REMOTE_REPOSITORIES", "SERVEDOC_LOCAL_REPOSITORY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 8000
    assert settings.remote_repositories == [DEFAULT_REMOTE_REPOSITORY]
    assert settings.local_repository == Path.home() / ".m2" / "repository"
    assert settings.classifier == "javadoc"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SERVEDOC_PORT", "9100")
    monkeypatch.setenv("SERVEDOC_REMOTE_REPOSITORIES", '["https://a.example.com", "https://b.example.com"]')
    monkeypatch.setenv("SERVEDOC_LOCAL_REPOSITORY", str(tmp_path))
    monkeypatch.setenv("SERVEDOC_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.port == 9100
    assert settings.remote_repositories == ["https://a.example.com", "https://b.example.com"]
    assert settings.local_repository == tmp_path
    assert settings.log_level == "DEBUG"


def test_rejects_empty_repository_list():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, remote_repositories=[" "])
