"""Tests for settings and logging setup."""

import logging

import pytest

from software_engineers_api.app.core.config import Settings
from software_engineers_api.app.core.logging_config import setup_logging
from software_engineers_api.app.main import create_app


def test_settings_defaults():
    s = Settings()

    assert s.project_name
    assert isinstance(s.port, int)
    assert isinstance(s.seed_demo_data, bool)


def test_create_app_uses_given_settings():
    app = create_app(Settings(project_name="Engineers", api_version="2.0.0"))

    assert app.title == "Engineers"
    assert app.version == "2.0.0"
    assert app.state.software_engineer_repository.count() == 0


def test_each_app_gets_its_own_repository():
    first = create_app(Settings())
    second = create_app(Settings())

    first.state.software_engineer_repository.create("Pawa", [])

    assert second.state.software_engineer_repository.count() == 0


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logging_applies_level_on_every_call(root_logger):
    setup_logging("WARNING")
    assert root_logger.level == logging.WARNING

    setup_logging("debug")
    assert root_logger.level == logging.DEBUG


def test_setup_logging_falls_back_to_info(root_logger):
    setup_logging("LOUD")

    assert root_logger.level == logging.INFO


def test_setup_logging_adds_file_handler_once(root_logger, tmp_path):
    logfile = tmp_path / "api.log"

    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))

    file_handlers = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1

    logging.getLogger("software_engineers_api.test").info("hello file")
    file_handlers[0].flush()
    assert "hello file" in logfile.read_text(encoding="utf-8")


def test_debug_setting_raises_log_level_without_fastapi_debug(root_logger):
    app = create_app(Settings(debug=True, log_level="WARNING"))

    assert root_logger.level == logging.DEBUG
    assert app.debug is False


def test_create_app_follows_log_level_setting(root_logger):
    create_app(Settings(log_level="ERROR"))

    assert root_logger.level == logging.ERROR
