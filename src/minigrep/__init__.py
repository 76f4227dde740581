"""
minigrep - Core Package

A small command-line tool that searches a file for lines containing a query,
with optional case-insensitive matching.
"""

__version__ = "0.1.0"
__author__ = "minigrep Team"
