from __future__ import annotations

"""
Path Line Parser.

Turns one raw listing line into a Node descriptor ready for insertion.
Only minimal normalization is applied: a single leading "." component and
a single trailing empty component are dropped.
"""

import logging
from typing import List

from pathtree.domain.errors import MalformedPathError
from pathtree.domain.tree_models import PATH_SEPARATOR, Node, NodeData

logger = logging.getLogger(__name__)

CURRENT_DIR = "."
EXTENSION_MARKER = "."


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_components(line: str) -> List[str]:
    """
    Split a raw path into its trimmed component list.

    Args:
        line: Raw slash-delimited path.

    Returns:
        List[str]: Components after dropping a leading "." and a trailing "".

    Raises:
        MalformedPathError: If nothing remains, or any component is empty.
    """
    parts = line.split(PATH_SEPARATOR)

    if parts[0] == CURRENT_DIR:
        parts = parts[1:]
    if parts and parts[-1] == "":
        parts = parts[:-1]

    if not parts:
        raise MalformedPathError(line, "no path components")
    if any(p == "" for p in parts):
        raise MalformedPathError(line, "empty path component")

    return parts


def looks_like_file(name: str) -> bool:
    """
    Classify a component as a file when it contains a dot anywhere.

    Heuristic: extension-less files are reported as directories and dotted
    directory names as files.
    """
    return EXTENSION_MARKER in name


def parse_path(line: str) -> Node:
    """
    Build a Node descriptor from a raw listing line.

    The node's depth is the number of trimmed components, its path is
    their slash join, and its name is the last component.

    Args:
        line: Raw input as read from the source.

    Returns:
        Node: A childless File or Directory node.

    Raises:
        MalformedPathError: If the line has no usable components.
    """
    parts = split_components(line)
    logger.debug(f"Split: {parts}")

    data = NodeData.from_line(line)
    depth = len(parts)
    path = PATH_SEPARATOR.join(parts)
    name = parts[-1]

    if looks_like_file(name):
        return Node.new_file(data, depth, path, name)
    return Node.new_directory(data, depth, path, name)
