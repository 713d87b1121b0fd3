import pytest
from pydantic import ValidationError

from readme_stamp.config import Settings


def test_defaults(monkeypatch):
    for name in ("GITHUB_TOKEN", "STAMP_PAGE_SIZE", "STAMP_ROLL_FORWARD", "STAMP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.token() is None
    assert settings.STAMP_PAGE_SIZE == 100
    assert settings.STAMP_ROLL_FORWARD is True
    assert settings.STAMP_LOG_LEVEL == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_dummy")
    monkeypatch.setenv("STAMP_PAGE_SIZE", "30")
    monkeypatch.setenv("STAMP_ROLL_FORWARD", "false")

    settings = Settings(_env_file=None)

    assert settings.token() == "ghp_dummy"
    assert "ghp_dummy" not in repr(settings)
    assert settings.STAMP_PAGE_SIZE == 30
    assert settings.STAMP_ROLL_FORWARD is False


def test_page_size_is_bounded(monkeypatch):
    monkeypatch.setenv("STAMP_PAGE_SIZE", "500")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
