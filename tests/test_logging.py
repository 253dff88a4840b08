import logging

import pytest
import structlog

from nice_number.logging import configure_logging, get_logger


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    structlog.reset_defaults()


def test_configure_logging_renders_json(restore_logging):
    configure_logging("debug")
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_get_logger_is_backed_by_stdlib(capsys):
    logger = get_logger("nice_number.tests")
    logger.debug("quiet_event", detail="x")
    assert capsys.readouterr().out == ""
