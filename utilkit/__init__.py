"""Top-level package for utilkit, a collection of general purpose helpers."""

from . import arrays, conversion, dates, environment, filesystem, http, image, numbers, strings
from .config import encoding_scope, get_encoding, set_encoding
from .core import InvalidArgumentError, UtilityError, UtilityRuntimeError

__version__ = "2.0.0"

__all__ = [
    "arrays",
    "conversion",
    "dates",
    "environment",
    "filesystem",
    "http",
    "image",
    "numbers",
    "strings",
    "encoding_scope",
    "get_encoding",
    "set_encoding",
    "InvalidArgumentError",
    "UtilityError",
    "UtilityRuntimeError",
]
