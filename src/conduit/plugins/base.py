"""Base classes for transport plugins.

A plugin subclasses the base returned by :func:`plugin`, names its backend
and declares its options::

    class SshTransport(conduit.plugin(1), name="ssh"):
        options = {
            "host": Option(required=True),
            "port": Option(default=22),
        }

        def connection(self):
            return SshConnection(self.config)

Naming the class registers it in the default registry (or the registry given
with the ``registry=`` class keyword) as soon as the class is defined.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional

from pydantic import BaseModel

from ..config import normalize_keys
from ..errors import ClientError, UserError
from .registry import PluginDescriptor, PluginRegistry, default_registry

PLUGIN_API_VERSIONS = (1,)


class Option(BaseModel):
    """Declared transport option."""

    required: bool = False
    default: Any = None

    def as_dict(self) -> Dict[str, Any]:
        return {"required": self.required, "default": self.default}


class CommandResult(BaseModel):
    """Result of running a command over a connection."""

    stdout: str = ""
    stderr: str = ""
    exit_status: int = 0


class Connection:
    """An open connection produced by a transport.

    Subclasses implement :meth:`run_command`; everything else is optional.
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None):
        self.config: Dict[str, Any] = dict(config or {})

    def run_command(self, cmd: str) -> CommandResult:
        raise NotImplementedError(
            f"{type(self).__name__} does not implement run_command()"
        )

    def close(self) -> None:
        """Release any resources held by the connection."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False


class Transport:
    """Base class for transport plugins (plugin API version 1)."""

    name: ClassVar[Optional[str]] = None
    options: ClassVar[Dict[str, Option]] = {}

    def __init_subclass__(
        cls,
        name: Optional[str] = None,
        registry: Optional[PluginRegistry] = None,
        **kwargs: Any,
    ):
        super().__init_subclass__(**kwargs)

        # Merge option schemas down the class hierarchy
        merged: Dict[str, Option] = {}
        for base in reversed(cls.__mro__[1:]):
            merged.update(getattr(base, "options", None) or {})
        merged.update(cls.__dict__.get("options", {}))
        cls.options = merged

        name = name or cls.__dict__.get("name")
        if name is None:
            # Unnamed subclasses inherit the parent's name but stay unregistered
            return

        cls.name = name
        target = registry if registry is not None else default_registry()
        target.register(PluginDescriptor.from_transport(cls))

    def __init__(self, config: Optional[Mapping[Any, Any]] = None):
        self.config = self.merge_options(normalize_keys(config))
        self.validate_options(self.config)

    @classmethod
    def default_options(cls) -> Dict[str, Any]:
        return {key: opt.default for key, opt in cls.options.items()}

    @classmethod
    def merge_options(cls, config: Mapping[str, Any]) -> Dict[str, Any]:
        """Fill in defaults for every option the config leaves unset."""
        merged = dict(config)
        for key, default in cls.default_options().items():
            if merged.get(key) is None:
                merged[key] = default
        return merged

    @classmethod
    def validate_options(cls, config: Mapping[str, Any]) -> None:
        missing: List[str] = [
            key
            for key, opt in cls.options.items()
            if opt.required and config.get(key) is None
        ]
        if missing:
            raise ClientError(
                f"You must provide a value for {', '.join(missing)} "
                f"to use the {cls.name or cls.__name__} transport."
            )

    def connection(self) -> Connection:
        raise NotImplementedError(
            f"{type(self).__name__} does not implement connection()"
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} backend={self.name!r}>"


def plugin(version: int = 1) -> type[Transport]:
    """Return the transport base class for plugin API ``version``.

    Raises:
        UserError: If the version is not supported
    """
    if version not in PLUGIN_API_VERSIONS:
        raise UserError(
            f"Unsupported plugin API version {version!r}; "
            f"supported: {', '.join(str(v) for v in PLUGIN_API_VERSIONS)}"
        )
    return Transport


__all__ = [
    "CommandResult",
    "Connection",
    "Option",
    "PLUGIN_API_VERSIONS",
    "Transport",
    "plugin",
]
