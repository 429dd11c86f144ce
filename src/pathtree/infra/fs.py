from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides user data directory resolution, path normalization and the
line-oriented reader that feeds path listings into the ingestion engine.
"""

import logging
import os
from typing import List, Optional

from pathtree.domain.errors import SourceReadError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "PathTree"
UNIX_APP_DIR_NAME = ".pathtree"
DEFAULT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/PathTree
    - Linux/Mac: ~/.pathtree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a file path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# LINE SOURCE API
# -----------------------------------------------------------------------------

def split_lines(text: str) -> List[str]:
    """Split a listing into lines, dropping line terminators only."""
    return text.splitlines()


def read_path_lines(file_path: str, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """
    Read a newline-delimited path listing from disk.

    Each returned entry is one line with its terminator removed. Blank
    lines are preserved so that line numbers stay aligned with the source.

    Args:
        file_path: Listing file to read.
        encoding: Text encoding of the listing.

    Returns:
        List[str]: The raw lines, in file order.

    Raises:
        SourceReadError: If the file is missing, unreadable or not decodable.
    """
    try:
        with open(file_path, "r", encoding=encoding) as f:
            lines = split_lines(f.read())
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read path listing '{file_path}': {e}")
        raise SourceReadError(file_path, str(e)) from e

    logger.debug(f"Read {len(lines)} lines from {file_path}")
    return lines
