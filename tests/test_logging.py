import logging

import pytest

from levelgate import logger as levelgate_logger, set_verbosity

@pytest.fixture(autouse=True)
def restore_level():
    original_level = levelgate_logger.level
    yield
    levelgate_logger.setLevel(original_level)

def test_package_logger_defaults():
    assert levelgate_logger.name == "levelgate"
    assert levelgate_logger.handlers

@pytest.mark.parametrize("level", [logging.DEBUG, logging.INFO, logging.ERROR])
def test_set_verbosity(level):
    set_verbosity(level)
    assert levelgate_logger.level == level

@pytest.mark.parametrize("level", [0, 15, 99, "DEBUG"])
def test_set_verbosity_rejects_invalid_levels(level):
    with pytest.raises(ValueError, match="Invalid logging level"):
        set_verbosity(level)

def test_trace_messages_at_debug(caplog):
    set_verbosity(logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger="levelgate"):
        from levelgate import normalize_level
        normalize_level("info")
    assert any("normalize_level" in record.getMessage() for record in caplog.records)
