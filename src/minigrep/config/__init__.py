"""
Configuration resolution package for minigrep.

This package turns process arguments and environment variables into a
validated SearchConfig.
"""

from .parser import (
    CASE_INSENSITIVE_ENV,
    ConfigParser,
    parse_config,
)
from ..errors import (
    ConfigurationError,
    MissingQueryError,
    MissingFilenameError,
)

__all__ = [
    'CASE_INSENSITIVE_ENV',
    'ConfigParser',
    'ConfigurationError',
    'MissingQueryError',
    'MissingFilenameError',
    'parse_config',
]
