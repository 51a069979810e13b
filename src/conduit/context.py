"""Conduit context for passing state between CLI commands."""

import os
from typing import Optional

import click

from .config.types import DEFAULT_BACKEND
from .plugins import PluginLoader, PluginRegistry, default_registry

DEFAULT_BACKEND_ENV = "CONDUIT_DEFAULT_BACKEND"


def resolve_default_backend(option: Optional[str]) -> str:
    """Resolve the fallback backend.

    Resolution order:
    1. --default-backend CLI flag
    2. $CONDUIT_DEFAULT_BACKEND environment variable
    3. "local"
    """
    if option:
        return option
    return os.environ.get(DEFAULT_BACKEND_ENV) or DEFAULT_BACKEND


class ConduitContext:
    """Composition root owning the plugin registry and loader."""

    def __init__(self, registry: Optional[PluginRegistry] = None):
        self.registry = registry if registry is not None else default_registry()
        self.loader = PluginLoader(self.registry)
        self.default_backend = DEFAULT_BACKEND


pass_context = click.make_pass_decorator(ConduitContext, ensure=True)
