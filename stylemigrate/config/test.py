"""Tests for configuration management."""

import logging

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_offset_reset_threshold,
    get_preserve_tokens,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("STYLE_MIGRATE_OFFSET_RESET_THRESHOLD", raising=False)
        assert get_environment(EnvVar.OFFSET_RESET_THRESHOLD) == 100

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("STYLE_MIGRATE_OFFSET_RESET_THRESHOLD", "999")
        assert get_environment(EnvVar.OFFSET_RESET_THRESHOLD, override=5) == 5

    @pytest.mark.unit
    def test_int_type_conversion(self, monkeypatch):
        """Integer type conversion from string."""
        monkeypatch.setenv("STYLE_MIGRATE_OFFSET_RESET_THRESHOLD", "250")
        result = get_environment(EnvVar.OFFSET_RESET_THRESHOLD)
        assert result == 250
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("STYLE_MIGRATE_OFFSET_RESET_THRESHOLD", "lots")
        assert get_environment(EnvVar.OFFSET_RESET_THRESHOLD) == 100

    @pytest.mark.unit
    def test_bool_type_conversion(self, monkeypatch):
        """Boolean type conversion for true and false spellings."""
        for value in ("false", "0", "no", "FALSE"):
            monkeypatch.setenv("STYLE_MIGRATE_PRESERVE_TOKENS", value)
            assert get_environment(EnvVar.PRESERVE_TOKENS) is False
        for value in ("true", "1", "Yes"):
            monkeypatch.setenv("STYLE_MIGRATE_PRESERVE_TOKENS", value)
            assert get_environment(EnvVar.PRESERVE_TOKENS) is True

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unparseable boolean falls back to the default."""
        monkeypatch.setenv("STYLE_MIGRATE_PRESERVE_TOKENS", "maybe")
        assert get_environment(EnvVar.PRESERVE_TOKENS) is True


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.OFFSET_RESET_THRESHOLD)
        assert isinstance(info, EnvConfig)
        assert info.name == "STYLE_MIGRATE_OFFSET_RESET_THRESHOLD"
        assert info.var_type is int
        assert info.category == "migration"


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_list_all(self):
        """No category returns every variable."""
        assert set(list_environment_variables()) == set(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Category filter narrows the list."""
        migration = list_environment_variables("migration")
        assert EnvVar.OFFSET_RESET_THRESHOLD in migration
        assert EnvVar.LOG_LEVEL not in migration


class TestConvenienceFunctions:
    """Tests for typed convenience accessors."""

    @pytest.mark.unit
    def test_log_level_parsing(self, monkeypatch):
        """Level names resolve to logging constants."""
        monkeypatch.setenv("STYLE_MIGRATE_LOG_LEVEL", "warning")
        assert get_log_level() == logging.WARNING

    @pytest.mark.unit
    def test_unknown_log_level_falls_back_to_info(self):
        """Unknown level name yields INFO."""
        assert get_log_level(override="chatty") == logging.INFO

    @pytest.mark.unit
    def test_offset_threshold_override(self):
        """Threshold accessor honours override."""
        assert get_offset_reset_threshold(override=42) == 42

    @pytest.mark.unit
    def test_preserve_tokens_default(self, monkeypatch):
        """Token preservation is on by default."""
        monkeypatch.delenv("STYLE_MIGRATE_PRESERVE_TOKENS", raising=False)
        assert get_preserve_tokens() is True
