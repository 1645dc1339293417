"""Tests for configuration parsing, specifically MINIFIER_EXTRA_WHITELIST."""

import logging

from css_inline_minifier.config.settings import Settings, _parse_extra_whitelist, _safe_int
from css_inline_minifier.core.symbols import DEFAULT_ALPHABET


class TestParseExtraWhitelist:
    """Tests for _parse_extra_whitelist function."""

    def test_empty_environment_variable(self, monkeypatch):
        """Parser returns empty list when env var is not set."""
        monkeypatch.delenv("MINIFIER_EXTRA_WHITELIST", raising=False)

        assert _parse_extra_whitelist() == []

    def test_multiple_entries(self, monkeypatch):
        """Parser handles multiple entries with surrounding whitespace."""
        monkeypatch.setenv("MINIFIER_EXTRA_WHITELIST", "js-, is-active ,swiper")

        assert _parse_extra_whitelist() == ["js-", "is-active", "swiper"]

    def test_empty_entries_ignored(self, monkeypatch):
        """Parser ignores empty and whitespace-only entries."""
        monkeypatch.setenv("MINIFIER_EXTRA_WHITELIST", "js-,,  ,state-")

        assert _parse_extra_whitelist() == ["js-", "state-"]

    def test_only_commas(self, monkeypatch):
        """Parser returns empty list when input is only commas."""
        monkeypatch.setenv("MINIFIER_EXTRA_WHITELIST", ",,,")

        assert _parse_extra_whitelist() == []

    def test_inner_whitespace_logged(self, monkeypatch, caplog):
        """Entries containing whitespace are kept but reported."""
        monkeypatch.setenv("MINIFIER_EXTRA_WHITELIST", "two words")

        with caplog.at_level(logging.WARNING):
            assert _parse_extra_whitelist() == ["two words"]
        assert "can never match" in caplog.text


class TestSettings:
    """Tests for Settings defaults and integer parsing."""

    def test_defaults(self, monkeypatch):
        for var in ("MINIFIER_ALPHABET", "MINIFIER_OUTPUT_SUFFIX", "SERVER_PORT", "MAX_DOCUMENT_BYTES"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings()

        assert settings.alphabet == DEFAULT_ALPHABET
        assert settings.output_suffix == ".min"
        assert settings.server_port == 8000
        assert settings.max_document_bytes == 5 * 1024 * 1024

    def test_invalid_int_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("SERVER_PORT", "eighty")

        with caplog.at_level(logging.WARNING):
            assert _safe_int("SERVER_PORT", "8000") == 8000
        assert "Invalid value 'eighty'" in caplog.text

    def test_no_shared_instance_exported(self):
        import css_inline_minifier.config as config_module

        assert config_module.__all__ == ["Settings"]
        assert not hasattr(Settings, "server_url")
