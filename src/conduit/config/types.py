"""Shared typing definitions for the config package."""

from enum import Enum
from typing import Any, Dict, Tuple


class ConfigKey(str, Enum):
    """Canonical configuration keys.

    Members compare equal to their string values and are normalized to plain
    strings by the resolver, so ``{ConfigKey.HOST: ...}`` and ``{"host": ...}``
    describe the same setting.
    """

    TARGET = "target"
    BACKEND = "backend"
    HOST = "host"
    USER = "user"
    PASSWORD = "password"
    PORT = "port"
    PATH = "path"
    WWW_FORM_ENCODED_PASSWORD = "www_form_encoded_password"


ConfigMapping = Dict[str, Any]

# Fields a target string can provide, in merge order
CONNECTION_FIELDS: Tuple[str, ...] = (
    "backend",
    "host",
    "user",
    "password",
    "port",
    "path",
)

DEFAULT_BACKEND = "local"

__all__ = ["CONNECTION_FIELDS", "ConfigKey", "ConfigMapping", "DEFAULT_BACKEND"]
