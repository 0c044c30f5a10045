"""
Tests for runtime settings.
"""

import pytest

from modeljar.core.config import Settings, get_settings
from modeljar.exceptions import ConfigurationError


def test_defaults(monkeypatch):
    monkeypatch.delenv("MODELJAR_DEFAULT_OUTPUT", raising=False)
    settings = Settings()
    assert settings.default_output == "models.jar"
    assert settings.sniff_bytes == 4096
    assert settings.default_version == "1.0.0"


def test_environment_prefix(monkeypatch):
    monkeypatch.setenv("MODELJAR_DEFAULT_OUTPUT", "custom.jar")
    monkeypatch.setenv("MODELJAR_SNIFF_BYTES", "1024")
    settings = get_settings()
    assert settings.default_output == "custom.jar"
    assert settings.sniff_bytes == 1024


def test_built_by_prefers_explicit_value(monkeypatch):
    monkeypatch.setenv("USER", "shell-user")
    assert Settings(built_by="ci").resolve_built_by() == "ci"
    assert Settings(built_by="").resolve_built_by() == ""


def test_built_by_falls_back_to_user(monkeypatch):
    monkeypatch.delenv("MODELJAR_BUILT_BY", raising=False)
    monkeypatch.setenv("USER", "shell-user")
    assert Settings().resolve_built_by() == "shell-user"
    monkeypatch.delenv("USER")
    assert Settings().resolve_built_by() == ""


def test_overrides_ignore_none(monkeypatch):
    monkeypatch.setenv("MODELJAR_BUILT_BY", "from-env")
    assert get_settings(built_by=None).built_by == "from-env"
    assert get_settings(built_by="flag").built_by == "flag"


def test_invalid_settings_are_configuration_errors(monkeypatch):
    monkeypatch.setenv("MODELJAR_SNIFF_BYTES", "0")
    with pytest.raises(ConfigurationError):
        get_settings()
