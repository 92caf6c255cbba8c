"""Probe command - read an integer token, then a line, from stdin."""

import logging
import sys

import click

from ...context import pass_context
from ...errors import StreamCheckError
from ...probe import run_probe
from ..helpers import abort_on_check

logger = logging.getLogger(__name__)


@click.command()
@pass_context
def probe(ctx):
    """Read an integer and the following line from stdin, print {int}{line}.

    Whitespace after the integer, newlines included, is skipped before the
    line is read. Output has no trailing newline.

    Examples:
        printf '42\\nhello\\n' | lineprobe probe    # {42}{hello}
        printf '0\\n\\n' | lineprobe                # {0}{}

    Exits with status 134 if the stream is left invalid after either read.
    """
    logger.debug("probe settings: %s", ctx.settings)
    try:
        run_probe(sys.stdin, sys.stdout)
    except StreamCheckError as e:
        abort_on_check(e)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
