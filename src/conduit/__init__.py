"""conduit: one front door for local, remote and mock transports."""

from .api import create, load_transport, options
from .config import ConfigKey, target_config, validate_backend
from .errors import ClientError, ConduitError, PluginLoadError, UserError
from .plugins import (
    CommandResult,
    Connection,
    Option,
    PluginRegistry,
    Transport,
    default_registry,
    plugin,
    reset_registry,
)

__all__ = [
    "__version__",
    "ClientError",
    "CommandResult",
    "ConduitError",
    "ConfigKey",
    "Connection",
    "Option",
    "PluginLoadError",
    "PluginRegistry",
    "Transport",
    "UserError",
    "create",
    "default_registry",
    "load_transport",
    "options",
    "plugin",
    "reset_registry",
    "target_config",
    "validate_backend",
]

__version__ = "0.1.0"
