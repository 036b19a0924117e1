"""Tests for environment-driven settings."""

from __future__ import annotations

from bigcommerce_management.config import Settings


def test_defaults(monkeypatch):
    for name in (
        "BC_STORE_HASH", "BC_ACCESS_TOKEN", "BC_API_VERSION", "BC_TIMEOUT",
        "BC_DEBUG", "BC_LOG_LEVEL", "BC_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.store_hash == ""
    assert s.access_token == ""
    assert s.api_version == 3
    assert s.timeout is None
    assert s.debug is False
    assert s.log_level == "INFO"


def test_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("BC_STORE_HASH", "abc123")
    monkeypatch.setenv("BC_ACCESS_TOKEN", "token")
    monkeypatch.setenv("BC_TIMEOUT", "2.5")
    monkeypatch.setenv("BC_DEBUG", "true")
    s = Settings(_env_file=None)
    assert s.store_hash == "abc123"
    assert s.access_token == "token"
    assert s.timeout == 2.5
    assert s.debug is True


def test_reads_logging_env(monkeypatch):
    monkeypatch.setenv("BC_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BC_LOG_FORMAT", "json")
    s = Settings(_env_file=None)
    assert s.log_level == "DEBUG"
    assert s.log_format == "json"


def test_import_builds_no_instance():
    import bigcommerce_management.config as config

    assert not hasattr(config, "settings")
