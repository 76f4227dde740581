"""
Data models for minigrep.

This module contains the configuration value consumed by a search run.
"""

from .config import SearchConfig

__all__ = ['SearchConfig']
