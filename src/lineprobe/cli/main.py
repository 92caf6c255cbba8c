"""Lineprobe CLI main entry point with global options."""

import sys

import click
from pydantic import ValidationError

from .. import __version__
from ..context import ProbeContext, configure_logging, resolve_settings


@click.group(invoke_without_command=True)
@click.option(
    "-v", "--verbose", is_flag=True, help="Log each read step to stderr"
)
@click.version_option(__version__, prog_name="lineprobe")
@click.pass_context
def cli(ctx, verbose):
    """lineprobe - token-then-line stdin read probe.

    Without a subcommand, runs ``probe``.
    """
    ctx.ensure_object(ProbeContext)

    try:
        settings = resolve_settings(verbose)
    except ValidationError as e:
        click.echo(f"Error: invalid settings: {e}", err=True)
        sys.exit(1)
    ctx.obj.settings = settings
    configure_logging(settings)

    if ctx.invoked_subcommand is None:
        ctx.invoke(probe)


# Register commands at module level so tests can import cli with commands attached
from .commands.probe import probe
from .commands.tokens import tokens

cli.add_command(probe)
cli.add_command(tokens)


def main():
    """Entry point for CLI."""
    cli(prog_name="lineprobe")


if __name__ == "__main__":
    main()
