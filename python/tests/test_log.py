from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from tilesolver.log import configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("tilesolver")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


@pytest.mark.parametrize(
    "verbosity, level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    ids=["default", "-v", "-vv", "-vvvvv"],
)
def test_verbosity_levels(package_logger: logging.Logger, verbosity: int, level: int) -> None:
    configure_logging(verbosity)
    assert package_logger.level == level


def test_single_rich_handler_and_no_propagation(package_logger: logging.Logger) -> None:
    configure_logging(1)
    configure_logging(1)
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0], RichHandler)
    assert package_logger.propagate is False


def test_records_are_not_repeated_by_the_root_logger(package_logger: logging.Logger) -> None:
    root_stream = io.StringIO()
    root_handler = logging.StreamHandler(root_stream)
    logging.getLogger().addHandler(root_handler)
    out = io.StringIO()
    try:
        configure_logging(1, console=Console(file=out, width=120))
        logging.getLogger("tilesolver.engine.search.driver").info("goal reached")
    finally:
        logging.getLogger().removeHandler(root_handler)
    assert "goal reached" in out.getvalue()
    assert root_stream.getvalue() == ""
