"""
Search tools for minigrep.

This module contains the line filter and the run routine that reads a file,
filters its lines and prints the matches.
"""

from .line_filter import filter_lines, search, search_case_insensitive, split_lines
from .runner import read_contents, run

__all__ = [
    'filter_lines',
    'read_contents',
    'run',
    'search',
    'search_case_insensitive',
    'split_lines',
]
