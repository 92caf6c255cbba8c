"""CLI helper utilities shared across commands."""

import sys

import click

from ..errors import StreamCheckError

# 128 + SIGABRT: what a shell reports for a process killed by a failed assert()
EXIT_ASSERTION = 134


def abort_on_check(error: StreamCheckError) -> None:
    """Report a failed stream check and exit like an aborted assertion.

    Raises:
        SystemExit: Always, with EXIT_ASSERTION
    """
    sys.stdout.flush()
    click.echo(f"Assertion failed: {error}", err=True)
    sys.exit(EXIT_ASSERTION)
