"""Exception hierarchy shared by every utilkit module."""

from __future__ import annotations


class UtilityError(Exception):
    """Base class for errors raised by utilkit helpers."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

    def as_dict(self) -> dict:
        """Return a serializable representation."""
        payload = {"error": type(self).__name__, "message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidArgumentError(UtilityError, ValueError):
    """Raised when an argument has the wrong shape or value."""


class UtilityRuntimeError(UtilityError, RuntimeError):
    """Raised when the environment prevents an operation from completing."""
