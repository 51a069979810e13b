"""Config layer facade: key normalization, target resolution, backends."""

from .resolver import canonical_key, normalize_keys, target_config, validate_backend
from .types import CONNECTION_FIELDS, DEFAULT_BACKEND, ConfigKey, ConfigMapping

__all__ = [
    "CONNECTION_FIELDS",
    "ConfigKey",
    "ConfigMapping",
    "DEFAULT_BACKEND",
    "canonical_key",
    "normalize_keys",
    "target_config",
    "validate_backend",
]
