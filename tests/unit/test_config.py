"""Unit tests for Settings."""

from forum.config import Settings


class TestSettings:
    """Tests for loading settings from the environment."""

    def test_nested_database_settings_from_env(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://forum@db/forum")
        monkeypatch.setenv("DATABASE__POOL_SIZE", "20")

        # Act
        settings = Settings()

        # Assert
        assert settings.database.url == "postgresql+asyncpg://forum@db/forum"
        assert settings.database.pool_size == 20
        assert settings.database.is_sqlite is False

    def test_defaults_use_local_sqlite(self, monkeypatch):
        monkeypatch.delenv("DATABASE__URL", raising=False)
        monkeypatch.delenv("DATABASE__CREATE_SCHEMA", raising=False)

        settings = Settings(_env_file=None)

        assert settings.database.is_sqlite is True
        assert settings.database.create_schema is False

    def test_only_service_sections_are_configured(self):
        """Settings hold the server, database and telemetry sections."""
        assert set(Settings.model_fields) == {
            "environment",
            "debug",
            "git_sha",
            "host",
            "port",
            "database",
            "observability",
        }
