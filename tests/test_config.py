"""Tests for environment-driven settings."""

import pytest

from kasir_api.app.core.config import STORAGE_MEMORY, Settings, load_settings

ENV_NAMES = ["PORT", "HOST", "DB_CONN", "STORAGE_BACKEND", "DB_REQUIRED", "LOG_LEVEL", "LOG_FILE"]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch also undoes variables that load_dotenv adds.
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings()
        assert settings.port == 8080
        assert settings.host == "0.0.0.0"
        assert settings.db_conn == ""
        assert settings.storage_backend == STORAGE_MEMORY
        assert settings.db_required is False
        assert settings.bind_address == "0.0.0.0:8080"

    def test_reads_environment(self, clean_env):
        clean_env.setenv("PORT", "9000")
        clean_env.setenv("DB_CONN", "sqlite:///x.db")
        clean_env.setenv("STORAGE_BACKEND", " Database ")
        clean_env.setenv("DB_REQUIRED", "yes")
        settings = Settings()
        assert settings.port == 9000
        assert settings.db_conn == "sqlite:///x.db"
        assert settings.storage_backend == "database"
        assert settings.db_required is True

    def test_invalid_port_raises(self, clean_env):
        clean_env.setenv("PORT", "eighty")
        with pytest.raises(ValueError):
            Settings()


class TestLoadSettings:
    def test_reads_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=7070\nDB_CONN=sqlite:///from_file.db\n", encoding="utf-8")
        settings = load_settings(str(env_file))
        assert settings.port == 7070
        assert settings.db_conn == "sqlite:///from_file.db"

    def test_environment_wins_over_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=7070\n", encoding="utf-8")
        clean_env.setenv("PORT", "6060")
        assert load_settings(str(env_file)).port == 6060

    def test_missing_env_file_is_ignored(self, clean_env, tmp_path):
        assert load_settings(str(tmp_path / "absent.env")).port == 8080
