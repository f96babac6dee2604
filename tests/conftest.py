"""Shared pytest fixtures for the i18n-layout test suite."""

from pathlib import Path

import pytest

import i18n_layout.config as config
import i18n_layout.logger as app_logger


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config and log files at a per-test directory."""
    config_dir = tmp_path / "_config"
    log_dir = tmp_path / "_logs"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config.json")
    monkeypatch.setattr(app_logger, "LOG_DIR", log_dir)
    monkeypatch.setattr(app_logger, "LOG_FILE", log_dir / "app.log")
    app_logger.refresh_loggers()
    yield config_dir
    # Back to the default (off) mode so handlers never point at a removed directory
    monkeypatch.undo()
    app_logger.refresh_loggers()


@pytest.fixture
def make_files(tmp_path):
    """Create files (with '{}' content) relative to tmp_path and return tmp_path."""

    def _make(*relative_paths: str) -> Path:
        for relative in relative_paths:
            file_path = tmp_path / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text("{}", encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def app():
    from i18n_layout.web import create_app

    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
