"""
Run orchestration for minigrep.

This module loads the file named by a SearchConfig, filters its lines and
writes the matches to an output stream. The whole file is read before any
filtering starts, so a read failure produces no output.
"""

import os
import sys
import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

from ..errors import FileOpenError, FileReadError, InvalidTextEncodingError
from ..models.config import SearchConfig
from .line_filter import filter_lines


logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def read_contents(path: Union[str, Path]) -> str:
    """
    Read a whole file as UTF-8 text.

    Args:
        path: Path of the file to read

    Returns:
        Decoded file contents

    Raises:
        FileOpenError: If the file cannot be opened
        FileReadError: If reading the opened file fails
        InvalidTextEncodingError: If the content is not valid UTF-8
    """
    path = os.fspath(path)

    try:
        f = open(path, 'rb')
    except OSError as e:
        raise FileOpenError(f"Cannot open '{path}': {e.strerror or e}", path) from e

    with f:
        try:
            data = f.read()
        except OSError as e:
            raise FileReadError(f"Cannot read '{path}': {e.strerror or e}", path) from e

    try:
        contents = data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise InvalidTextEncodingError(f"'{path}' is not valid {ENCODING} text: {e.reason}", path) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return contents


def run(config: SearchConfig, out: Optional[TextIO] = None) -> List[str]:
    """
    Search the configured file and print matching lines.

    Args:
        config: Resolved search configuration
        out: Stream to write matches to (default: sys.stdout)

    Returns:
        The matching lines, in file order

    Raises:
        SearchError: If the file cannot be opened, read or decoded
    """
    contents = read_contents(config.filename)

    results = filter_lines(config.query, contents, case_sensitive=config.case_sensitive)
    logger.info(f"{len(results)} matching line(s) in {config.filename}")

    out = sys.stdout if out is None else out
    for line in results:
        out.write(f"{line}\n")

    return results
