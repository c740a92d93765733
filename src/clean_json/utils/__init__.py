"""Utility functions for clean-json."""

from .positions import error_snippet, find_token_outside_strings, line_column
from .size_calculator import byte_size, format_bytes

__all__ = [
    "byte_size",
    "error_snippet",
    "find_token_outside_strings",
    "format_bytes",
    "line_column",
]
