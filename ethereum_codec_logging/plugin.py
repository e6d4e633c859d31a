"""
Pytest plugin that configures the codec logging for a test session.

Registered from the root `conftest.py`.
"""

import pytest

from .logging import LogLevel, configure_logging


def pytest_addoption(parser):  # noqa: D103
    logging_group = parser.getgroup("codec-logging", "Arguments related to codec logging.")
    logging_group.addoption(
        "--codec-log-level",
        action="store",
        default=None,
        type=LogLevel.from_cli,
        dest="codec_log_level",
        help=(
            "The logging level to use in the test session: DEBUG, VERBOSE, INFO, WARNING, "
            "ERROR or CRITICAL. An integer in [0, 50] may be also provided."
        ),
    )
    logging_group.addoption(
        "--codec-log-file",
        action="store",
        default=None,
        dest="codec_log_file",
        help="Write the codec log output to the given file.",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Initialize logging for pytest sessions when a level or file was requested."""
    log_level = config.getoption("codec_log_level", default=None)
    log_file = config.getoption("codec_log_file", default=None)
    if log_level is None and log_file is None:
        return
    # pytest captures stdout itself, only the file handler is useful here
    configure_logging(log_level=log_level, log_file=log_file, log_to_stdout=False)
