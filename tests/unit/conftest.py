import logging

import pytest


@pytest.fixture(autouse=True)
def _configure_logging_for_tests() -> None:
    """
    Automatically configure logging for all unit tests so that structlog
    events and module loggers go through the same stdlib handlers.
    """
    from srfax.core.common.logging_utils import configure_logging
    from srfax.core.config.app_config import LoggingConfig, LogLevel

    configure_logging(LoggingConfig(level=LogLevel.DEBUG))
    logging.getLogger("httpx").setLevel(logging.WARNING)
