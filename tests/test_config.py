"""
Tests for environment-driven settings.
"""

import importlib

import pytest

import garf.core.config as config


@pytest.fixture(autouse=True)
def restore_config(monkeypatch):
    yield
    monkeypatch.undo()
    importlib.reload(config)


class TestCorsOrigins:
    """ALLOWED_CORS_ORIGINS comes only from the environment."""

    def test_defaults_to_no_origins(self, monkeypatch):
        monkeypatch.delenv("ALLOWED_CORS_ORIGINS", raising=False)
        assert importlib.reload(config).ALLOWED_CORS_ORIGINS == []

    def test_parses_and_dedupes(self, monkeypatch):
        monkeypatch.setenv(
            "ALLOWED_CORS_ORIGINS",
            "https://a.example, https://b.example,,https://a.example",
        )
        assert importlib.reload(config).ALLOWED_CORS_ORIGINS == [
            "https://a.example",
            "https://b.example",
        ]


class TestIntegerSettings:
    def test_page_size_from_env(self, monkeypatch):
        monkeypatch.setenv("PAGE_SIZE", "25")
        assert importlib.reload(config).PAGE_SIZE == 25

    def test_non_integer_rejected(self, monkeypatch):
        monkeypatch.setenv("MAX_SPEED", "fast")
        with pytest.raises(RuntimeError):
            importlib.reload(config)
