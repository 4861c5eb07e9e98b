"""Parsing utilities for ABAP sources and ATC locations."""

from parse.location import extract_method_name, extract_start_line
from parse.method_ranges import MethodRange, parse_method_ranges

__all__ = [
    "MethodRange",
    "extract_method_name",
    "extract_start_line",
    "parse_method_ranges",
]
