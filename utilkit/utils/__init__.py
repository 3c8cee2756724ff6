"""Internal helpers shared by the utilkit modules."""

from .formatting import fixed_point, format_number, natural_sort_key
from .geo import EARTH_RADIUS_METERS, haversine_meters
from .io import count_non_empty_lines, detect_encoding, read_text
from .validation import require_directory, require_file, require_non_empty

__all__ = [
    "fixed_point",
    "format_number",
    "natural_sort_key",
    "EARTH_RADIUS_METERS",
    "haversine_meters",
    "count_non_empty_lines",
    "detect_encoding",
    "read_text",
    "require_directory",
    "require_file",
    "require_non_empty",
]
