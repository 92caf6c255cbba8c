"""Lineprobe context for passing state between commands."""

import logging
import os
import sys
from typing import Optional

import click

from .models import ProbeSettings

LOG_LEVEL_ENV = "LINEPROBE_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_settings(verbose: bool = False) -> ProbeSettings:
    """Resolve runtime settings.

    Resolution order:
    1. --verbose CLI flag (forces DEBUG)
    2. $LINEPROBE_LOG_LEVEL environment variable
    3. WARNING

    Reads fresh from the environment each time.

    Args:
        verbose: Value of the --verbose CLI flag

    Returns:
        Validated ProbeSettings

    Raises:
        pydantic.ValidationError: If the environment names an unknown level
    """
    if verbose:
        return ProbeSettings(log_level="DEBUG")

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        return ProbeSettings(log_level=env_level)

    return ProbeSettings()


def configure_logging(settings: ProbeSettings) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process (as under CliRunner) do not stack handlers.
    """
    logger = logging.getLogger("lineprobe")
    for handler in list(logger.handlers):
        if getattr(handler, "_lineprobe", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._lineprobe = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    logger.propagate = False
    return logger


class ProbeContext:
    """Per-invocation state shared between the group and its commands."""

    def __init__(self):
        self.settings: Optional[ProbeSettings] = None


pass_context = click.make_pass_decorator(ProbeContext, ensure=True)
