"""
Argument and environment resolver for minigrep.

This module builds a SearchConfig from the process arguments and the
environment. The environment is passed in as a mapping so callers (and tests)
can resolve a configuration without touching the real process environment.
"""

import os
import logging
from typing import Mapping, Optional, Sequence

from ..errors import MissingFilenameError, MissingQueryError
from ..models.config import SearchConfig


logger = logging.getLogger(__name__)

CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"


class ConfigParser:
    """
    Positional argument resolver.

    The first argument is the program name and is skipped, the second is the
    query and the third is the filename. Anything after that is ignored.
    Case sensitivity is on unless CASE_INSENSITIVE is present in the
    environment; its value is not inspected.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the resolver.

        Args:
            environ: Environment mapping to consult. Defaults to os.environ.
        """
        self.environ = os.environ if environ is None else environ
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def parse_args(self, args: Sequence[str]) -> SearchConfig:
        """
        Resolve a SearchConfig from process arguments.

        Args:
            args: Process arguments, program name first

        Returns:
            The resolved SearchConfig

        Raises:
            MissingQueryError: If no query argument was supplied
            MissingFilenameError: If no filename argument was supplied
        """
        remaining = iter(args)
        next(remaining, None)  # program name

        query = next(remaining, None)
        if query is None:
            raise MissingQueryError()

        filename = next(remaining, None)
        if filename is None:
            raise MissingFilenameError()

        extra = list(remaining)
        if extra:
            self.logger.debug(f"Ignoring {len(extra)} extra argument(s)")

        config = SearchConfig(
            query=query,
            filename=filename,
            case_sensitive=self.is_case_sensitive(),
        )
        self.logger.debug(f"Resolved configuration: {config}")
        return config

    def is_case_sensitive(self) -> bool:
        """Return False if CASE_INSENSITIVE is set to any value, True otherwise."""
        return CASE_INSENSITIVE_ENV not in self.environ


def parse_config(args: Sequence[str], environ: Optional[Mapping[str, str]] = None) -> SearchConfig:
    """
    Convenience function to resolve a configuration.

    Args:
        args: Process arguments, program name first
        environ: Environment mapping (optional, defaults to os.environ)

    Returns:
        The resolved SearchConfig

    Raises:
        ConfigurationError: If the query or filename is missing
    """
    parser = ConfigParser(environ=environ)
    return parser.parse_args(args)
