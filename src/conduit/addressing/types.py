"""Address types for target decomposition."""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class TargetAddress:
    """Components of a decomposed target string.

    The TargetAddress represents one user-supplied target following the syntax:
        scheme://[user[:password]@]host[:port][/path][?parameters]

    Examples:
        "ssh://root@host.com:22/tmp" → TargetAddress(backend="ssh", host="host.com", user="root", port=22, path="/tmp")
        "mock://[abc::def]:123" → TargetAddress(backend="mock", host="abc::def", port=123)
        "mock:" → TargetAddress(backend="mock")
    """

    raw: str
    """Original target string provided by the user."""

    backend: Optional[str] = None
    """URI scheme, used as the backend name.

    None for scheme-less references such as "wrong" or "//host:22".
    """

    host: Optional[str] = None
    """Host component. IPv6 literals are stored without brackets."""

    user: Optional[str] = None

    password: Optional[str] = None
    """Password from userinfo, form-decoded when requested."""

    port: Optional[int] = None
    """Explicit port. There is no per-scheme default."""

    path: Optional[str] = None
    """Path component verbatim, None when empty."""

    parameters: Dict[str, str] = field(default_factory=dict)
    """Query string parameters from the ? operator.

    Examples: {"shell": "bash"}, {"sudo": "true"}
    """

    def fields(self) -> Dict[str, object]:
        """Return the canonical connection fields in merge order."""
        return {
            "backend": self.backend,
            "host": self.host,
            "user": self.user,
            "password": self.password,
            "port": self.port,
            "path": self.path,
        }

    def __str__(self) -> str:
        """Human-readable representation (password masked)."""
        if self.backend is None and self.host is None:
            return self.raw
        parts = [f"{self.backend}://" if self.backend else "//"]
        if self.user is not None or self.password is not None:
            parts.append(self.user or "")
            if self.password is not None:
                parts.append(":***")
            parts.append("@")
        if self.host is not None:
            parts.append(f"[{self.host}]" if ":" in self.host else self.host)
        if self.port is not None:
            parts.append(f":{self.port}")
        if self.path is not None:
            parts.append(self.path)
        if self.parameters:
            param_str = "&".join(f"{k}={v}" for k, v in self.parameters.items())
            parts.append(f"?{param_str}")
        return "".join(parts)
