"""Unit tests for logging setup."""

import logging

from chatter.config import AuthSettings, Settings
from chatter.util.logging import log_level


def test_log_level_by_environment():
    production = Settings(
        environment="production",
        auth=AuthSettings(jwt_secret="production-secret"),
    )

    assert log_level(Settings(debug=True)) == logging.DEBUG
    assert log_level(Settings(environment="test")) == logging.WARNING
    assert log_level(production) == logging.INFO
