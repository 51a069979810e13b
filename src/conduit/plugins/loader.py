"""Load transport plugins that are not registered yet (logic module).

Resolution runs an ordered list of strategies and stops at the first one
that leaves the requested backend in the registry:

1. Built-in module: ``conduit.transports.<name>``
2. External package: distribution ``conduit-<name>``, imported as
   ``conduit_<name>``

Hyphens in backend names become underscores in module names, so backend
``test-fixture`` loads ``conduit_test_fixture``.
"""

from __future__ import annotations

import importlib
import logging
import re
from types import ModuleType
from typing import List, Optional, Sequence

from ..errors import PluginLoadError
from .base import Transport
from .registry import PluginDescriptor, PluginRegistry, default_registry

logger = logging.getLogger(__name__)

BUILTIN_PACKAGE = "conduit.transports"
EXTERNAL_PREFIX = "conduit-"

_MODULE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def module_basename(name: str) -> Optional[str]:
    """Return the module name for a backend, or None if it cannot form one."""
    candidate = name.replace("-", "_")
    if not _MODULE_NAME_PATTERN.match(candidate):
        return None
    return candidate


class ResolutionStrategy:
    """Import the module a backend name maps to under one naming convention."""

    label = "plugin"

    def module_name(self, name: str) -> Optional[str]:
        raise NotImplementedError

    def load(self, name: str) -> Optional[ModuleType]:
        """Import the module for ``name``; None when it does not exist.

        Import errors raised while executing an existing module propagate.
        """
        module_name = self.module_name(name)
        if module_name is None:
            logger.debug("Backend %r cannot name a %s module", name, self.label)
            return None

        logger.debug("Trying %s module %s for backend %r", self.label, module_name, name)
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name and _is_same_or_parent(exc.name, module_name):
                logger.debug("No %s module %s", self.label, module_name)
                return None
            raise


class BuiltinStrategy(ResolutionStrategy):
    """Built-in transports shipped in ``conduit.transports``."""

    label = "built-in"

    def __init__(self, package: str = BUILTIN_PACKAGE):
        self.package = package

    def module_name(self, name: str) -> Optional[str]:
        base = module_basename(name)
        return f"{self.package}.{base}" if base else None


class ExternalPackageStrategy(ResolutionStrategy):
    """Separately installed plugin distributions named ``conduit-<name>``."""

    label = "external"

    def __init__(self, prefix: str = EXTERNAL_PREFIX):
        self.prefix = prefix

    def distribution_name(self, name: str) -> str:
        return f"{self.prefix}{name}"

    def module_name(self, name: str) -> Optional[str]:
        return module_basename(self.distribution_name(name))


def default_strategies() -> List[ResolutionStrategy]:
    return [BuiltinStrategy(), ExternalPackageStrategy()]


class PluginLoader:
    """Resolve backend names to plugin descriptors, loading them on demand.

    Example usage:
        loader = PluginLoader(registry)
        descriptor = loader.resolve("ssh")
        transport = descriptor.transport_class(config)
    """

    def __init__(
        self,
        registry: Optional[PluginRegistry] = None,
        strategies: Optional[Sequence[ResolutionStrategy]] = None,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.strategies = (
            list(strategies) if strategies is not None else default_strategies()
        )

    def resolve(self, name) -> PluginDescriptor:
        """Return the descriptor for ``name``, loading the plugin if needed.

        Raises:
            PluginLoadError: If no strategy yields a plugin of that name
        """
        name = str(name)
        descriptor = self.registry.lookup(name)
        if descriptor is not None:
            return descriptor

        for strategy in self.strategies:
            module = strategy.load(name)
            if module is None:
                continue
            descriptor = self.registry.lookup(name) or self._register_from_module(
                module, name
            )
            if descriptor is not None:
                logger.debug("Loaded %s plugin %r from %s", strategy.label, name, module.__name__)
                return descriptor
            logger.debug("Module %s did not provide backend %r", module.__name__, name)

        raise PluginLoadError(name)

    def _register_from_module(
        self, module: ModuleType, name: str
    ) -> Optional[PluginDescriptor]:
        """Register a transport class found in an already-imported module.

        Modules register their transports once, when first imported; after a
        registry reset the cached module is scanned instead.
        """
        for obj in vars(module).values():
            if (
                isinstance(obj, type)
                and issubclass(obj, Transport)
                and obj.__dict__.get("name") == name
            ):
                descriptor = PluginDescriptor.from_transport(obj)
                self.registry.register(descriptor)
                return descriptor
        return None


def _is_same_or_parent(missing: str, module_name: str) -> bool:
    return module_name == missing or module_name.startswith(missing + ".")


__all__ = [
    "BUILTIN_PACKAGE",
    "BuiltinStrategy",
    "EXTERNAL_PREFIX",
    "ExternalPackageStrategy",
    "PluginLoader",
    "ResolutionStrategy",
    "default_strategies",
    "module_basename",
]
