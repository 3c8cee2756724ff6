"""HTTP enumerations: status codes and request methods."""

from .methods import Method
from .status_codes import StatusCode, StatusCodeCategory

__all__ = ["Method", "StatusCode", "StatusCodeCategory"]
