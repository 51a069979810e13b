"""Transport plugin machinery: base classes, registry, loader, discovery."""

from .base import CommandResult, Connection, Option, Transport, plugin
from .discovery import iter_builtin_backends, iter_installed_plugins
from .loader import (
    BuiltinStrategy,
    ExternalPackageStrategy,
    PluginLoader,
    ResolutionStrategy,
)
from .registry import (
    PluginDescriptor,
    PluginRegistry,
    default_registry,
    reset_registry,
)

__all__ = [
    "BuiltinStrategy",
    "CommandResult",
    "Connection",
    "ExternalPackageStrategy",
    "Option",
    "PluginDescriptor",
    "PluginLoader",
    "PluginRegistry",
    "ResolutionStrategy",
    "Transport",
    "default_registry",
    "iter_builtin_backends",
    "iter_installed_plugins",
    "plugin",
    "reset_registry",
]
