"""External transport plugin used by the loader tests."""

from .transport import Transport

__all__ = ["Transport"]
