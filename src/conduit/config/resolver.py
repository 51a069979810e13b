"""Resolve target strings into canonical configuration mappings."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Hashable, Mapping

from ..addressing import decompose_target
from ..errors import UserError
from .types import CONNECTION_FIELDS, DEFAULT_BACKEND, ConfigMapping

logger = logging.getLogger(__name__)


def canonical_key(key: Hashable) -> str:
    """Return the canonical string form of a configuration key."""

    if isinstance(key, Enum):
        return str(key.value)
    if isinstance(key, bytes):
        return key.decode("utf-8")
    return str(key)


def normalize_keys(config: Mapping[Any, Any] | None) -> ConfigMapping:
    """Copy ``config`` with every key in canonical form.

    Keys that collapse to the same name follow normal mapping semantics: the
    one seen last wins.
    """

    if not config:
        return {}
    return {canonical_key(key): value for key, value in config.items()}


def target_config(config: Mapping[Any, Any] | None = None) -> ConfigMapping:
    """Resolve the ``target`` field of ``config`` into connection fields.

    Fields the caller already set are never overwritten. Once a target with a
    scheme or a host is supplied, every connection field is present in the
    result, set to None where neither the caller nor the target gave a value.
    A bare reference such as "wrong" names neither and is left unresolved.
    The input mapping is left untouched.

    Raises:
        UserError: If ``target`` is not a valid URI
    """

    conf = normalize_keys(config)
    target = conf.get("target")
    if not isinstance(target, str) or not target:
        return conf

    address = decompose_target(
        target,
        www_form_encoded_password=bool(conf.get("www_form_encoded_password")),
    )
    if address.backend is None and address.host is None:
        logger.debug("Target %r names no backend or host; leaving config as is", target)
        return conf

    for key, value in address.fields().items():
        if key not in conf:
            conf[key] = value
    for key, value in address.parameters.items():
        conf.setdefault(canonical_key(key), value)

    # An empty path resets to None (e.g. to drop a backend's default path)
    if conf.get("path") is not None and str(conf["path"]) == "":
        conf["path"] = None

    logger.debug("Resolved target %s to backend %r", address, conf["backend"])
    return conf


def validate_backend(
    config: Mapping[Any, Any] | None, default: Any = DEFAULT_BACKEND
) -> Any:
    """Return the backend a configuration should use.

    An explicit ``backend`` always wins and is returned unchanged. Without
    one, ``default`` is used unless the config points somewhere (``target``
    or ``host``), which cannot be served without knowing the backend.

    Raises:
        UserError: If a target or host is given without a backend
    """

    conf = normalize_keys(config)
    backend = conf.get("backend")
    if backend:
        return backend

    if conf.get("target") is None and conf.get("host") is None:
        return default

    raise UserError(
        "Cannot determine backend from target configuration "
        f"{conf.get('target') or conf.get('host')!r}. "
        "Valid example: ssh://192.168.0.1"
    )


__all__ = ["canonical_key", "normalize_keys", "target_config", "validate_backend"]
