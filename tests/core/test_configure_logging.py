# tests/core/test_configure_logging.py
import logging

import pytest

from htmlwalker.html_utils import load
from htmlwalker.utils.configure_logging import LIBRARY_LOGGER, LogWithTqdm, configure_logger

TOUCHED_LOGGERS = ("htmlwalker.dom.traverser", "urllib3")


@pytest.fixture
def library_logger():
    """Restores the 'htmlwalker' logger tree after each test."""
    lib = logging.getLogger(LIBRARY_LOGGER)
    handlers, level, propagate = list(lib.handlers), lib.level, lib.propagate
    yield lib
    lib.handlers[:] = handlers
    lib.setLevel(level)
    lib.propagate = propagate
    for name in TOUCHED_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_configure_logger_uses_configured_level(library_logger):
    """Without arguments the level comes from debug.level in settings.json."""
    lib = configure_logger()
    assert lib is library_logger
    assert lib.level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_configure_logger_only_touches_library_logger(library_logger):
    root = logging.getLogger()
    root_handlers = list(root.handlers)

    configure_logger("debug")

    assert root.handlers == root_handlers
    assert library_logger.level == logging.DEBUG
    assert library_logger.propagate is False
    assert [type(h) for h in library_logger.handlers if isinstance(h, LogWithTqdm)] == [LogWithTqdm]


def test_repeated_calls_do_not_stack_handlers(library_logger):
    configure_logger("INFO")
    configure_logger("INFO")
    assert len([h for h in library_logger.handlers if isinstance(h, LogWithTqdm)]) == 1


def test_module_levels_and_silenced_loggers(library_logger):
    configure_logger(
        "INFO",
        module_levels={"htmlwalker.dom.traverser": "DEBUG", "somebody.else": "DEBUG"},
        silenced_loggers={"urllib3": "CRITICAL"},
    )
    assert logging.getLogger("htmlwalker.dom.traverser").level == logging.DEBUG
    assert logging.getLogger("somebody.else").level == logging.NOTSET
    assert logging.getLogger("urllib3").level == logging.CRITICAL


def test_load_with_log_level_reports_traversal(library_logger, capsys):
    """Library records are written through tqdm to stderr."""
    document = load(log_level="DEBUG").from_html("<a><b></b></a>")
    document.visit(lambda element, parents: True)

    err = capsys.readouterr().err
    assert "visited 3 nodes" in err
    assert "[htmlwalker.dom.traverser:" in err
