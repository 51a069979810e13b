"""Target addressing for conduit.

A target packs backend, credentials, host, port and path into one string:

Syntax:
    scheme://[user[:password]@]host[:port][/path][?parameters]
    scheme:

Examples:
    ssh://root@host.com:22              # SSH backend
    winrm://Administrator@10.0.0.5      # Windows remote
    mock://[abc::def]:123               # IPv6 host, brackets stripped
    local://                            # Local machine
"""

from .parser import decompose_target
from .types import TargetAddress

__all__ = ["TargetAddress", "decompose_target"]
