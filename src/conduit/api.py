"""Library entry points: create transports and inspect their options."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .config import normalize_keys, target_config, validate_backend
from .config.types import DEFAULT_BACKEND
from .plugins import PluginDescriptor, PluginLoader, PluginRegistry, Transport

logger = logging.getLogger(__name__)


def _loader(
    registry: Optional[PluginRegistry], loader: Optional[PluginLoader]
) -> PluginLoader:
    if loader is not None:
        return loader
    return PluginLoader(registry)


def load_transport(
    name: Any,
    *,
    registry: Optional[PluginRegistry] = None,
    loader: Optional[PluginLoader] = None,
) -> PluginDescriptor:
    """Return the plugin descriptor for backend ``name``, loading it if needed.

    Raises:
        PluginLoadError: If the plugin cannot be found
    """
    return _loader(registry, loader).resolve(name)


def create(
    backend: Any,
    config: Optional[Mapping[Any, Any]] = None,
    *,
    default: Any = DEFAULT_BACKEND,
    registry: Optional[PluginRegistry] = None,
    loader: Optional[PluginLoader] = None,
) -> Transport:
    """Create a transport from a backend name or a configuration mapping.

    Examples:
        create("local")
        create("ssh", {"host": "example.com", "user": "root"})
        create({"target": "ssh://root@example.com:22"})

    Raises:
        UserError: If the configuration names no usable backend
        PluginLoadError: If the backend's plugin cannot be found
    """
    if isinstance(backend, Mapping):
        conf = target_config(backend)
        name = validate_backend(conf, default)
    else:
        conf = normalize_keys(config)
        name = backend

    descriptor = load_transport(name, registry=registry, loader=loader)
    logger.debug("Creating %r transport", descriptor.name)
    return descriptor.transport_class(conf)


def options(
    name: Any,
    *,
    registry: Optional[PluginRegistry] = None,
    loader: Optional[PluginLoader] = None,
) -> Dict[str, Dict[str, Any]]:
    """Return the option schema a backend declares (``{}`` if none).

    Raises:
        PluginLoadError: If the plugin cannot be found
    """
    return load_transport(name, registry=registry, loader=loader).option_schema()


__all__ = ["create", "load_transport", "options"]
