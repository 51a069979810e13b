"""Exception hierarchy shared by the resolver, loader and transports."""


class ConduitError(Exception):
    """Base class for conduit errors."""


class UserError(ConduitError):
    """Raised for invalid caller input (bad target, missing backend, ...)."""


class PluginLoadError(UserError):
    """Raised when a transport plugin cannot be found or loaded."""

    def __init__(self, transport_name: str, message: str | None = None):
        self.transport_name = transport_name
        if message is None:
            message = (
                f"Can't find conduit plugin {transport_name}. "
                "Please install it first."
            )
        super().__init__(message)


class ClientError(UserError):
    """Raised when a transport is given invalid or incomplete options."""


__all__ = ["ClientError", "ConduitError", "PluginLoadError", "UserError"]
