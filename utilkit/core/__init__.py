"""Core primitives shared across utilkit modules."""

from .exceptions import InvalidArgumentError, UtilityError, UtilityRuntimeError
from .models import Distance, TimezoneInfo

__all__ = [
    "UtilityError",
    "InvalidArgumentError",
    "UtilityRuntimeError",
    "Distance",
    "TimezoneInfo",
]
