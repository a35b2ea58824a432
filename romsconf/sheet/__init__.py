"""Parameter sheet assembly and value formatting."""

from .formatting import format_scalar, format_value, join_file_list
from .loader import build_sheet, load_sheet

__all__ = [
    "build_sheet",
    "format_scalar",
    "format_value",
    "join_file_list",
    "load_sheet",
]
