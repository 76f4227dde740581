"""
Exception types for minigrep.

Configuration errors are raised while resolving arguments; search errors are
raised while loading the file to be searched. Library code never prints on
error, the command-line entry point turns these into messages and exit codes.
"""

import os
from pathlib import Path
from typing import Union


class MinigrepError(Exception):
    """Base class for all minigrep errors."""
    pass


class ConfigurationError(MinigrepError):
    """Raised when the search configuration cannot be resolved."""
    pass


class MissingQueryError(ConfigurationError):
    """Raised when no query argument was supplied."""

    def __init__(self, message: str = "Didn't get a query string"):
        super().__init__(message)


class MissingFilenameError(ConfigurationError):
    """Raised when no filename argument was supplied."""

    def __init__(self, message: str = "Didn't get a filename"):
        super().__init__(message)


class SearchError(MinigrepError):
    """
    Raised when the file to be searched cannot be loaded.

    Attributes:
        path: Path of the file that failed to load, as given
    """

    def __init__(self, message: str, path: Union[str, Path]):
        super().__init__(message)
        self.path = os.fspath(path)


class FileOpenError(SearchError):
    """Raised when the file does not exist or is not accessible."""
    pass


class FileReadError(SearchError):
    """Raised when an I/O failure occurs while reading the file."""
    pass


class InvalidTextEncodingError(SearchError):
    """Raised when the file content is not valid UTF-8 text."""
    pass
