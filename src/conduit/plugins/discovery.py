"""Discovery of built-in and installed external transport plugins."""

from __future__ import annotations

import importlib
import pkgutil
import re
from collections.abc import Iterator
from importlib.metadata import distributions

from .loader import BUILTIN_PACKAGE, EXTERNAL_PREFIX

_RE = re.compile(r"[-_.]+")


def pep503_name(dist_name: str) -> str:
    """Return the PEP 503 normalised project name."""

    return _RE.sub("-", dist_name.strip().lower())


def iter_installed_plugins(prefix: str = EXTERNAL_PREFIX) -> Iterator[tuple[str, str]]:
    """Yield ``(backend_name, distribution_name)`` for installed plugins.

    A distribution is a plugin if its normalised name starts with ``prefix``
    and has something after it. Duplicates are skipped using first-come wins
    semantics.
    """

    seen: set[str] = set()
    for dist in distributions():
        metadata = getattr(dist, "metadata", None)
        name = metadata.get("Name") if metadata is not None else None
        if not name:
            continue

        normalised = pep503_name(name)
        if not normalised.startswith(prefix) or normalised == prefix:
            continue

        backend = normalised[len(prefix):]
        if backend in seen:
            continue
        seen.add(backend)
        yield backend, name


def iter_builtin_backends(package: str = BUILTIN_PACKAGE) -> Iterator[str]:
    """Yield backend names of the transports shipped in ``package``."""

    pkg = importlib.import_module(package)
    for info in pkgutil.iter_modules(pkg.__path__):
        if not info.name.startswith("_"):
            yield info.name.replace("_", "-")
