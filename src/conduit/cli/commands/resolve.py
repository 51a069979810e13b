"""Resolve command - show the configuration a target resolves to."""

import json
import sys

import click

from ...addressing import decompose_target
from ...config import target_config, validate_backend
from ...context import pass_context
from ...errors import UserError

# Matches the mask TargetAddress.__str__ uses
MASK = "***"


@click.command()
@click.argument("target", required=False)
@click.option("--backend", help="Backend to use (wins over the target scheme)")
@click.option("--host", help="Host to connect to (wins over the target host)")
@click.option(
    "--www-form-encoded-password",
    is_flag=True,
    help="Decode the password as a www-form value (+ and %XX escapes)",
)
@click.option("--show-password", is_flag=True, help="Print the password unmasked")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@pass_context
def resolve(
    ctx, target, backend, host, www_form_encoded_password, show_password, output_format
):
    """Resolve TARGET into backend and connection fields.

    Without TARGET, --backend or --host the configured default backend is
    reported.

    Examples:
        conduit resolve ssh://root@host.com:22
        conduit resolve 'winrm://Administrator@10.0.0.5' --format json
        conduit resolve --backend ssh --host 10.0.0.5
        conduit --default-backend mock resolve
    """
    config = {}
    if target:
        config["target"] = target
    if backend:
        config["backend"] = backend
    if host:
        config["host"] = host
    if www_form_encoded_password:
        config["www_form_encoded_password"] = True

    try:
        resolved = target_config(config)
        effective = validate_backend(resolved, ctx.default_backend)
    except UserError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if resolved.get("password") is not None and not show_password:
        resolved["password"] = MASK
        resolved["target"] = str(decompose_target(target))

    if output_format == "json":
        click.echo(json.dumps({"backend": effective, "config": resolved}, indent=2))
        return

    if resolved:
        width = max(len(key) for key in resolved)
        for key, value in resolved.items():
            click.echo(f"{key:{width}}  {'' if value is None else value}")
        click.echo("")
    click.echo(f"Effective backend: {effective}")
