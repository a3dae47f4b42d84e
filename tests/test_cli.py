"""Tests for the top-level CLI commands."""

import pytest

from bookkeeper.cli.main import cli
from bookkeeper.config import Settings


def test_init_db(cli_runner, tmp_path):
    """Test creating a fresh database."""
    db_path = tmp_path / "nested" / "books.db"
    result = cli_runner.invoke(cli, ["--db-path", str(db_path), "init-db"])

    assert result.exit_code == 0
    assert "Database ready" in result.output
    assert db_path.exists()


def test_countries(cli_runner, temp_db):
    """Test listing the seeded countries."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "countries"])

    assert result.exit_code == 0
    assert "US  United States" in result.output


def test_db_path_from_environment(cli_runner, temp_db, monkeypatch):
    """Test that BOOKKEEPER_DB_PATH selects the database."""
    monkeypatch.setenv("BOOKKEEPER_DB_PATH", temp_db.database_path)
    result = cli_runner.invoke(cli, ["countries"])

    assert result.exit_code == 0
    assert "AR  Argentina" in result.output


def test_serve_uses_settings(cli_runner, temp_db, monkeypatch):
    """Test that serve binds to the configured host and port."""
    calls = {}

    def fake_run(self, host=None, port=None, **options):
        calls["host"] = host
        calls["port"] = port

    monkeypatch.setattr("flask.Flask.run", fake_run)
    monkeypatch.setenv("BOOKKEEPER_PORT", "9090")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "serve", "--host", "0.0.0.0"]
    )

    assert result.exit_code == 0
    assert calls == {"host": "0.0.0.0", "port": 9090}
    assert "http://0.0.0.0:9090/api" in result.output


def test_settings_defaults(monkeypatch, tmp_path):
    """Test the configuration defaults."""
    monkeypatch.delenv("BOOKKEEPER_HOST", raising=False)
    monkeypatch.delenv("BOOKKEEPER_PORT", raising=False)
    monkeypatch.delenv("BOOKKEEPER_LOG_LEVEL", raising=False)

    settings = Settings.from_environment(database_path=str(tmp_path / "a.db"))

    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.log_level == "WARNING"
    assert settings.database_path == str(tmp_path / "a.db")


def test_settings_rejects_bad_port(monkeypatch, tmp_path):
    """Test that a malformed port is reported."""
    monkeypatch.setenv("BOOKKEEPER_PORT", "eighty")

    with pytest.raises(ValueError, match="BOOKKEEPER_PORT"):
        Settings.from_environment(database_path=str(tmp_path / "a.db"))
