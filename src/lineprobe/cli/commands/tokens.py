"""Tokens command - show how stdin splits into whitespace-delimited tokens."""

import sys

import click

from ...errors import StreamError
from ...stream import InputStream


@click.command()
def tokens():
    """Print every whitespace-delimited token on stdin as {token}.

    Examples:
        printf '1 two\\n  3\\n' | lineprobe tokens   # {1}{two}{3}
    """
    stream = InputStream(sys.stdin)
    try:
        for token in stream.tokens():
            sys.stdout.write(f"{{{token}}}")
    except StreamError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
