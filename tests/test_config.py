import logging

import pytest

from deadline_engine.config import EngineConfig, configure_logging, load_config
from deadline_engine.schema import ReminderOffset


def test_defaults():
    assert load_config({}) == EngineConfig()
    assert EngineConfig().default_offset is ReminderOffset.D3


def test_reads_environment():
    config = load_config(
        {
            "DEADLINE_ENGINE_LOCALE": "ko",
            "DEADLINE_ENGINE_REMINDER_OFFSET": "12h",
            "DEADLINE_ENGINE_LOG_LEVEL": "debug",
        }
    )
    assert config.locale == "ko"
    assert config.default_offset is ReminderOffset.H12
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "environ",
    [
        {"DEADLINE_ENGINE_LOCALE": "fr"},
        {"DEADLINE_ENGINE_REMINDER_OFFSET": "2d"},
        {"DEADLINE_ENGINE_LOG_LEVEL": "loud"},
    ],
)
def test_invalid_values(environ):
    with pytest.raises(ValueError):
        load_config(environ)


def test_configure_logging_is_idempotent():
    logger = configure_logging("INFO")
    handlers = len(logger.handlers)
    assert configure_logging("DEBUG") is logger
    assert len(logger.handlers) == handlers
    assert logger.level == logging.DEBUG
