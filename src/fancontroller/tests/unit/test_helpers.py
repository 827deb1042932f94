"""
Unit tests for logging setup and app data path helpers.
"""
import logging
from logging.handlers import RotatingFileHandler

import pytest

from fancontroller import constants
from fancontroller.utils import helpers


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(constants.app.APP_NAME)
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_logging_adds_file_and_console_handlers(clean_logger, tmp_path, monkeypatch):
    monkeypatch.delenv(constants.app.ENV_VAR_PROD_MODE, raising=False)
    logger = helpers.setup_logging(tmp_path)

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(tmp_path / constants.logs.LOG_FILENAME)
    assert file_handlers[0].maxBytes == constants.logs.MAX_LOG_SIZE
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG


def test_setup_logging_is_idempotent(clean_logger, tmp_path):
    helpers.setup_logging(tmp_path)
    helpers.setup_logging(tmp_path)
    assert len(clean_logger.handlers) == 2


def test_production_mode_raises_levels(clean_logger, tmp_path, monkeypatch):
    monkeypatch.setenv(constants.app.ENV_VAR_PROD_MODE, "true")
    logger = helpers.setup_logging(tmp_path)
    assert logger.level == constants.logs.PRODUCTION_LOG_LEVEL
    assert all(h.level == constants.logs.PRODUCTION_LOG_LEVEL for h in logger.handlers)


def test_app_data_path_is_created(tmp_path, monkeypatch):
    monkeypatch.setattr(helpers.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    path = helpers.get_app_data_path()
    assert path == tmp_path / constants.app.APP_NAME
    assert path.is_dir()
