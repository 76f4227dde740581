"""CLI entrypoint."""

import os
import sys
import logging
from typing import Mapping, Optional, Sequence

from .config.parser import ConfigParser
from .errors import ConfigurationError, SearchError
from .tools.runner import run


LOG_LEVEL_ENV = "MINIGREP_LOG_LEVEL"


def configure_logging(environ: Mapping[str, str]) -> None:
    """Send diagnostic logging to stderr at the level named by MINIGREP_LOG_LEVEL."""
    level_name = environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run minigrep and return the process exit status.

    Args:
        argv: Process arguments, program name first (default: sys.argv)
        environ: Environment mapping (default: os.environ)

    Returns:
        0 on success, 1 on any error
    """
    argv = sys.argv if argv is None else argv
    environ = os.environ if environ is None else environ
    configure_logging(environ)

    try:
        config = ConfigParser(environ=environ).parse_args(argv)
    except ConfigurationError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    try:
        run(config)
    except SearchError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0


def entrypoint() -> None:
    sys.exit(main())
