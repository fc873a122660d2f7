"""Unit tests for the migration entry points."""

import logging

import pytest

from stylemigrate.convert import empty_unified_config
from stylemigrate.migration import (
    MigrationResult,
    is_unified_config,
    migrate,
    migrate_to_unified_system,
    migrate_validated,
    needs_migration,
    rollback,
)
from stylemigrate.tokens import UnifiedConfig


class TestIsUnifiedConfig:
    """Tests for is_unified_config and needs_migration."""

    @pytest.mark.unit
    def test_unified_document(self, unified_config):
        assert is_unified_config(unified_config)
        assert not needs_migration(unified_config)

    @pytest.mark.unit
    def test_unified_model(self):
        assert is_unified_config(UnifiedConfig())

    @pytest.mark.unit
    def test_legacy_document(self, legacy_config):
        assert not is_unified_config(legacy_config)
        assert needs_migration(legacy_config)

    @pytest.mark.unit
    def test_partially_migrated(self, partially_migrated_config):
        """A 1.5 document with design tokens still needs migration."""
        assert not is_unified_config(partially_migrated_config)
        assert needs_migration(partially_migrated_config)

    @pytest.mark.unit
    def test_version_without_tables(self):
        """Version 2.0 alone does not make a document unified."""
        assert not is_unified_config({"version": "2.0", "cover": {"components": []}})

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "2.0", []])
    def test_non_documents(self, value):
        assert not is_unified_config(value)
        assert not needs_migration(value)


class TestMigrate:
    """Tests for migrate function."""

    @pytest.mark.unit
    def test_legacy_document(self, legacy_config):
        config = migrate(legacy_config)
        assert config.version == "2.0"
        assert set(config.page_types) == {"cover", "page"}

    @pytest.mark.unit
    def test_none_returns_empty(self):
        assert migrate(None).to_document() == empty_unified_config().to_document()

    @pytest.mark.unit
    def test_unified_passthrough(self, unified_config):
        """Already unified documents are not migrated a second time."""
        config = migrate(unified_config)
        assert config.to_document() == unified_config
        assert config.page_types["cover"].components[0].typography == "title-large"

    @pytest.mark.unit
    def test_unified_passthrough_is_copy(self, unified_config):
        config = migrate(unified_config)
        config.design_tokens.typography["title-large"]["color"] = "red"
        assert (
            unified_config["designTokens"]["typography"]["title-large"]["color"]
            == "#ffffff"
        )

    @pytest.mark.unit
    def test_unified_model_copied(self):
        model = UnifiedConfig()
        config = migrate(model)
        assert config is not model
        assert config.to_document() == model.to_document()

    @pytest.mark.unit
    def test_invalid_positioning_token(self, unified_config, caplog):
        """A bad positioning token is dropped and its component recentered."""
        unified_config["designTokens"]["positioning"]["top-center"]["region"] = "up"
        with caplog.at_level(logging.WARNING, logger="migration"):
            config = migrate(unified_config)

        tokens = config.design_tokens
        cover_title = config.page_types["cover"].components[0]
        assert cover_title.positioning == "cover-title-positioning-0"
        assert tokens.positioning[cover_title.positioning].region == "center-center"
        assert cover_title.typography == "title-large"
        assert config.page_types["page"].components[0].positioning == "center-left"
        assert "top-center" not in tokens.positioning
        assert "no resolvable positioning" in caplog.text

    @pytest.mark.unit
    def test_invalid_typography_token(self, unified_config, caplog):
        """A reference to a dropped style token is cleared."""
        unified_config["designTokens"]["typography"]["title-large"] = "big"
        with caplog.at_level(logging.WARNING, logger="migration"):
            config = migrate(unified_config)

        cover_title = config.page_types["cover"].components[0]
        assert cover_title.typography is None
        assert cover_title.container == "glass-effect"
        assert cover_title.positioning == "top-center"
        assert "missing typography token 'title-large'" in caplog.text

    @pytest.mark.unit
    def test_internal_failure_is_contained(self, monkeypatch, legacy_config, caplog):
        """Unexpected errors are logged and the empty config is returned."""

        def _boom(_):
            raise RuntimeError("boom")

        monkeypatch.setattr(
            "stylemigrate.migration.lib.convert_legacy_to_unified", _boom
        )
        with caplog.at_level(logging.ERROR, logger="migration"):
            config = migrate(legacy_config)
        assert config.page_types == {}
        assert "boom" in caplog.text

    @pytest.mark.unit
    def test_alias(self):
        assert migrate_to_unified_system is migrate


class TestRollback:
    """Tests for rollback function."""

    @pytest.mark.unit
    def test_unified_document(self, unified_config):
        legacy = rollback(unified_config)
        assert legacy["cover"]["components"][0]["style"]["fontFamily"] == "Ribeye"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 5, {"pageTypes": []}])
    def test_unreadable_input(self, value):
        assert rollback(value) == {}

    @pytest.mark.unit
    def test_internal_failure_is_contained(self, monkeypatch, unified_config):
        def _boom(_):
            raise RuntimeError("boom")

        monkeypatch.setattr(
            "stylemigrate.migration.lib.convert_unified_to_legacy", _boom
        )
        assert rollback(unified_config) == {}


class TestMigrateValidated:
    """Tests for migrate_validated function."""

    @pytest.mark.unit
    def test_valid_document(self, customized_legacy_config):
        result = migrate_validated(customized_legacy_config)

        assert isinstance(result, MigrationResult)
        assert result.success
        assert result.validation.is_valid
        assert result.from_version == "1.0"
        assert result.config.page_types["cover"].components[0].id == "custom-title"

    @pytest.mark.unit
    def test_invalid_document_blocked(self):
        """Invalid documents are reported and not migrated."""
        result = migrate_validated(
            {"cover": {"components": [{"type": "text", "style": "bad"}]}}
        )

        assert not result.success
        assert result.config is None
        assert result.validation.errors == [
            "Missing component id",
            "Invalid style format",
        ]
        assert result.from_version is None

    @pytest.mark.unit
    def test_warnings_do_not_block(self):
        result = migrate_validated({"cover": {}, "page": {"components": []}})
        assert result.success
        assert result.validation.warnings == ["Page type cover has no components"]

    @pytest.mark.unit
    def test_none(self):
        result = migrate_validated(None)
        assert not result.success
        assert len(result.validation.errors) == 1

    @pytest.mark.unit
    def test_unified_document(self, unified_config):
        result = migrate_validated(unified_config)
        assert result.success
        assert result.from_version == "2.0"
        assert result.validation.issues == []
        assert result.config.to_document() == unified_config
