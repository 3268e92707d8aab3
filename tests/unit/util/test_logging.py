"""Unit tests for logging setup."""

import logging

import pytest

from voter.config import Settings
from voter.util.logging import setup_logging


@pytest.mark.parametrize(
    "environment,debug,expected",
    [
        ("development", False, logging.INFO),
        ("test", False, logging.INFO),
        ("production", False, logging.WARNING),
        ("production", True, logging.DEBUG),
    ],
)
def test_setup_logging_level(environment, debug, expected):
    setup_logging(Settings(environment=environment, debug=debug))

    assert logging.getLogger("voter").level == expected
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
