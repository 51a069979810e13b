"""Backends command - list built-in, installed and registered backends."""

import click

from ...context import pass_context
from ...plugins import iter_builtin_backends, iter_installed_plugins


@click.command()
@pass_context
def backends(ctx):
    """List available backends."""
    rows = {name: "built-in" for name in iter_builtin_backends()}
    for name, dist_name in iter_installed_plugins():
        rows.setdefault(name, f"external ({dist_name})")
    for name in ctx.registry.names():
        rows.setdefault(name, "registered")

    if not rows:
        click.echo("No backends found")
        return

    width = max(len(name) for name in rows)
    for name, source in sorted(rows.items()):
        marker = " (default)" if name == ctx.default_backend else ""
        click.echo(f"{name:{width}}  {source}{marker}")
