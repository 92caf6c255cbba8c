"""Pytest configuration and shared fixtures."""

import io
import logging

import pytest
from click.testing import CliRunner

from lineprobe.cli import cli
from lineprobe.context import LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def clean_log_level_env(monkeypatch):
    """Keep a developer's $LINEPROBE_LOG_LEVEL from leaking into tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to a previous CliRunner's stderr."""
    yield
    logger = logging.getLogger("lineprobe")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional stdin text.

    Usage:
        result = invoke([], input_data="42\\nhello\\n")
        result = invoke(["tokens"], input_data="a b c")

    Use ``result.stdout`` for exact probe output; ``result.output`` also
    carries anything written to stderr.
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def text_stream():
    """Build an in-memory text stream that splits lines on \\n only."""

    def _make(data):
        return io.StringIO(data, newline="\n")

    return _make


class ScriptedSource:
    """Text source whose readline() replays scripted lines or raises errors."""

    def __init__(self, *steps):
        self.steps = list(steps)

    def readline(self):
        step = self.steps.pop(0) if self.steps else ""
        if isinstance(step, BaseException):
            raise step
        return step


@pytest.fixture
def scripted_source():
    """Provide the ScriptedSource class for simulating failing input."""
    return ScriptedSource
