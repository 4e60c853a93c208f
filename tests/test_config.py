from __future__ import annotations

import pytest
from pydantic import ValidationError

from gilded_rose.config import UpdaterConfig, load_config_from_env


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Defaults apply when no GILDED_ROSE_* variables are set."""
    monkeypatch.delenv("GILDED_ROSE_WARN_ON_UNKNOWN", raising=False)
    monkeypatch.delenv("GILDED_ROSE_LOG_LEVEL", raising=False)

    cfg = load_config_from_env()
    assert cfg.warn_on_unknown is False
    assert cfg.log_level == "INFO"


@pytest.mark.parametrize("raw,expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("off", False)])
def test_warn_on_unknown_from_env(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("GILDED_ROSE_WARN_ON_UNKNOWN", raw)
    assert load_config_from_env().warn_on_unknown is expected


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GILDED_ROSE_LOG_LEVEL", " debug ")
    assert load_config_from_env().log_level == "DEBUG"


def test_invalid_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unknown level names in the environment fall back to the default."""
    monkeypatch.setenv("GILDED_ROSE_LOG_LEVEL", "chatty")
    assert load_config_from_env().log_level == "INFO"


def test_explicit_config_validates_level() -> None:
    assert UpdaterConfig(log_level="warning").log_level == "WARNING"
    with pytest.raises(ValidationError):
        UpdaterConfig(log_level="chatty")
