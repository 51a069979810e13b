"""Options command - show the options a backend declares."""

import json
import sys

import click

from ...api import options as backend_options
from ...context import pass_context
from ...errors import PluginLoadError


@click.command()
@click.argument("backend")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@pass_context
def options(ctx, backend, output_format):
    """Show the options BACKEND declares."""
    try:
        schema = backend_options(backend, loader=ctx.loader)
    except PluginLoadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(schema, indent=2, default=repr))
        return

    if not schema:
        click.echo(f"Backend '{backend}' declares no options")
        return

    width = max(len(name) for name in schema)
    for name, spec in sorted(schema.items()):
        flag = "required" if spec["required"] else "optional"
        click.echo(f"{name:{width}}  {flag:8}  default: {spec['default']!r}")
