from __future__ import annotations

"""
Path Tree.

Owns the synthetic root and implements descent-matching insertion and
pre-order lookups. Ancestors must be inserted before their descendants;
a node whose ancestor chain is missing is reported as orphaned and is not
added to the tree.
"""

import logging
from typing import Callable, Iterator, List, Optional, TextIO

from pathtree.core.analysis.tree_renderer import render_lines, write_lines
from pathtree.domain.tree_models import InsertResult, InsertStatus, Node

logger = logging.getLogger(__name__)


class PathTree:
    """
    Hierarchical tree of paths rooted at a synthetic "root" directory.

    The root is created lazily by the first insertion. Not safe for
    concurrent mutation; callers sharing a tree across threads must
    serialize inserts.
    """

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def walk(self) -> Iterator[Node]:
        """Yield every node in pre-order, starting at the root."""
        if self.root is None:
            return iter(())
        return self.root.walk()

    # -------------------------------------------------------------------------
    # Insertion
    # -------------------------------------------------------------------------

    def insert(self, node: Node) -> InsertResult:
        """
        Attach a node under the existing node matching its parent path.

        Starting at the root, the node is appended when its depth is exactly
        one below the cursor. Otherwise the cursor moves to the first child
        whose name equals the next component of the node's path. If no such
        child exists the node is dropped and reported as orphaned.

        Args:
            node: A childless or populated node with depth, path and name set.

        Returns:
            InsertResult: Whether and where the node was attached.
        """
        if self.root is None:
            self.root = Node.new_root()
            logger.debug("Created synthetic root node.")

        components = node.components()
        cursor = self.root

        while True:
            if node.depth == cursor.depth + 1:
                cursor.children.append(node)
                logger.debug(f"Added child '{node.path}' under '{cursor.path}'.")
                return InsertResult(InsertStatus.ATTACHED, node.path, parent_path=cursor.path)

            if node.depth <= cursor.depth or cursor.depth >= len(components):
                logger.debug(f"Depth mismatch for '{node.path}' at '{cursor.path}'.")
                return InsertResult(InsertStatus.ORPHANED, node.path)

            to_find = components[cursor.depth]
            logger.debug(f"To find: {to_find}")

            match = next((c for c in cursor.children if c.name == to_find), None)
            if match is None:
                logger.debug(f"No child '{to_find}' under '{cursor.path}'; dropping '{node.path}'.")
                return InsertResult(InsertStatus.ORPHANED, node.path, missing_component=to_find)

            logger.debug(f"Found child: {match.name}")
            cursor = match

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def find_by_name(self, name: str) -> Optional[Node]:
        """
        Return a copy of the first node in pre-order named `name`.

        Returns:
            Optional[Node]: An independent clone, or None if absent.
        """
        logger.debug(f"Searching for node: {name}")
        return self._find_first(lambda n: n.name == name)

    def find_by_path(self, path: str) -> Optional[Node]:
        """Return a copy of the first node whose normalized path equals `path`."""
        logger.debug(f"Searching for path: {path}")
        return self._find_first(lambda n: n.path == path)

    def find_by_depth(self, depth: int) -> Optional[Node]:
        """Return a copy of the first node in pre-order at `depth`."""
        logger.debug(f"Searching for depth: {depth}")
        return self._find_first(lambda n: n.depth == depth)

    def _find_first(self, predicate: Callable[[Node], bool]) -> Optional[Node]:
        for node in self.walk():
            if predicate(node):
                logger.debug(f"Found node: {node.name}")
                return node.clone()
        return None

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def render(self) -> List[str]:
        """Render the whole tree as a list of lines."""
        return render_lines(self.root)

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Write the whole tree to a text sink (stdout by default)."""
        write_lines(self.render(), stream)
