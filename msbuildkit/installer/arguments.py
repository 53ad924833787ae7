"""
Installer command-line argument handling.

Argument strings follow Windows conventions: tokens are separated by
whitespace, double quotes group a token that contains spaces, and
backslashes are ordinary characters. Quoted and unquoted pieces that touch
form one token, so `"C:\\Program Files"\\MSBuild` is a single path.
"""

import logging
import shlex
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

INSTALL_PATH_FLAG = "--installPath"


def _split_loosely(arguments: str) -> List[str]:
    tokens = (token.replace('"', "") for token in arguments.split())
    return [token for token in tokens if token]


def split_arguments(arguments: Optional[str]) -> List[str]:
    """
    Split an argument string into tokens.

    An unbalanced double quote does not fail: the string is then split on
    whitespace and every double quote is dropped.

    Args:
        arguments: Argument string, may be None

    Returns:
        Tokens with quotes removed

    Example:
        >>> split_arguments('--quiet --installPath "C:\\\\Program Files\\\\MSBuild"')
        ['--quiet', '--installPath', 'C:\\\\Program Files\\\\MSBuild']
    """
    if not arguments or not arguments.strip():
        return []
    lexer = shlex.shlex(arguments, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    lexer.quotes = '"'
    lexer.escape = ""
    try:
        return list(lexer)
    except ValueError as e:
        logger.warning(f"Cannot parse installer arguments ({e}), splitting on whitespace")
        return _split_loosely(arguments)


def extract_install_path(arguments: Optional[str]) -> Optional[str]:
    """
    Get the value of the first --installPath flag.

    Args:
        arguments: Installer argument string, may be None

    Returns:
        The install path, or None if the flag is absent or has no value
    """
    tokens = split_arguments(arguments)
    for index, token in enumerate(tokens):
        if token == INSTALL_PATH_FLAG:
            if index + 1 < len(tokens):
                return tokens[index + 1]
            return None
    return None


def ensure_arguments(base: Optional[str], to_add: Sequence[str]) -> str:
    """
    Append flags that are not already present.

    Args:
        base: Existing argument string, kept unchanged
        to_add: Flags to ensure, in order

    Returns:
        Argument string containing every flag of `to_add`

    Example:
        >>> ensure_arguments("--quiet", ["--wait", "--norestart"])
        '--quiet --wait --norestart'
    """
    result = base if base and base.strip() else ""
    present = set(split_arguments(result))
    for argument in to_add:
        if argument in present:
            continue
        result = f"{result} {argument}" if result else argument
        present.add(argument)
    return result
