"""Backend-name registry for transport plugins (logic module)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from .base import Option, Transport

logger = logging.getLogger(__name__)


@dataclass
class PluginDescriptor:
    """A registered transport plugin."""

    name: str
    transport_class: type
    options: Dict[str, "Option"] = field(default_factory=dict)

    @classmethod
    def from_transport(cls, transport_class: type["Transport"]) -> "PluginDescriptor":
        """Build a descriptor from a Transport subclass."""
        return cls(
            name=transport_class.name,
            transport_class=transport_class,
            options=dict(transport_class.options),
        )

    def option_schema(self) -> Dict[str, Dict[str, object]]:
        """Return the options as ``{name: {"required": ..., "default": ...}}``."""
        return {name: opt.as_dict() for name, opt in self.options.items()}


class PluginRegistry:
    """Registry that maps backend names to plugin descriptors.

    Names are case-sensitive. Registering a name twice replaces the earlier
    entry, so plugins can be redefined (and tests can install stand-ins).
    The registry does no locking; callers sharing one across threads must
    serialize access themselves.
    """

    def __init__(self):
        self._plugins: Dict[str, PluginDescriptor] = {}

    def register(self, descriptor: PluginDescriptor) -> None:
        if descriptor.name in self._plugins:
            logger.debug("Replacing registered plugin %r", descriptor.name)
        else:
            logger.debug("Registering plugin %r", descriptor.name)
        self._plugins[descriptor.name] = descriptor

    def lookup(self, name: str) -> Optional[PluginDescriptor]:
        """Find a descriptor by exact name, or None."""
        return self._plugins.get(name)

    def names(self) -> List[str]:
        return sorted(self._plugins)

    def reset(self) -> None:
        """Forget every registered plugin (primarily for tests)."""
        self._plugins.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)


_DEFAULT_REGISTRY = PluginRegistry()


def default_registry() -> PluginRegistry:
    """Return the process-wide registry plugins register into by default."""
    return _DEFAULT_REGISTRY


def reset_registry() -> None:
    """Reset the process-wide registry (primarily for tests)."""
    _DEFAULT_REGISTRY.reset()


__all__ = [
    "PluginDescriptor",
    "PluginRegistry",
    "default_registry",
    "reset_registry",
]
