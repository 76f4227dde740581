"""
Line filter for minigrep.

Splits file contents into lines and keeps, in their original order, the lines
that contain the query as a contiguous substring.
"""

from typing import List


def split_lines(contents: str) -> List[str]:
    """
    Split contents into lines.

    Only "\\n" terminates a line; a "\\r" directly before it is dropped so
    CRLF files split cleanly. A "\\r" ending an unterminated last line is
    kept. Contents ending with a terminator do not produce a trailing empty
    line.

    Args:
        contents: Full text to split

    Returns:
        List of lines without terminators
    """
    if not contents:
        return []

    lines = contents.split("\n")
    last = lines.pop()

    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)

    return lines


def search(query: str, contents: str) -> List[str]:
    """
    Case-sensitive search.

    Args:
        query: Text to search for
        contents: Full text to search

    Returns:
        Lines of contents containing query, in original order

    Example:
        >>> search("duct", "Rust:\\nsafe, fast, productive.\\nPick three.\\nDuct tape.")
        ['safe, fast, productive.']
    """
    return [line for line in split_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """
    Case-insensitive search.

    The query and each line are lowercased before the containment test, the
    line is returned as it appears in contents.

    Args:
        query: Text to search for
        contents: Full text to search

    Returns:
        Lines of contents containing query regardless of case, in original order

    Example:
        >>> search_case_insensitive("rUsT", "Rust:\\nsafe, fast, productive.\\nPick three.\\nTrust me.")
        ['Rust:', 'Trust me.']
    """
    query = query.lower()
    return [line for line in split_lines(contents) if query in line.lower()]


def filter_lines(query: str, contents: str, case_sensitive: bool = True) -> List[str]:
    """Dispatch to search or search_case_insensitive."""
    if case_sensitive:
        return search(query, contents)
    return search_case_insensitive(query, contents)
