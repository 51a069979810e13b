"""Conduit CLI main entry point with global options."""

import logging

import click

from ..context import DEFAULT_BACKEND_ENV, ConduitContext, resolve_default_backend


@click.group()
@click.option(
    "--default-backend",
    envvar=DEFAULT_BACKEND_ENV,
    help="Backend used when a config names none (overrides $CONDUIT_DEFAULT_BACKEND)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log plugin resolution to stderr")
@click.pass_context
def cli(ctx, default_backend, verbose):
    """Conduit - resolve targets and transport plugins."""
    ctx.ensure_object(ConduitContext)
    ctx.obj.default_backend = resolve_default_backend(default_backend)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Register commands at module level so tests can import cli with commands attached
from .commands.backends import backends
from .commands.options import options
from .commands.resolve import resolve

cli.add_command(resolve)
cli.add_command(options)
cli.add_command(backends)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
