from __future__ import annotations

"""
Path Tree Data Models.

Defines the vertex type of the hierarchical path tree and the outcome
object returned by insertions. Nodes own their children outright: there
are no parent pointers and no shared sub-trees.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, TextIO, Tuple

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

ROOT_NAME = "root"
ROOT_PATH = "/"
PATH_SEPARATOR = "/"
INDENT_UNIT = "  "


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(Enum):
    """Classification of a tree vertex. Only affects rendering."""
    FILE = "File"
    DIRECTORY = "Directory"


@dataclass(frozen=True)
class NodeData:
    """
    Raw input retained for diagnostics.

    Attributes:
        original_path: The untrimmed input line.
        original_length: Character length of the untrimmed input.
    """
    original_path: str
    original_length: int

    @classmethod
    def from_line(cls, line: str) -> "NodeData":
        return cls(original_path=line, original_length=len(line))


@dataclass
class Node:
    """
    A single vertex (file or directory) of the path tree.

    Attributes:
        kind: File or Directory, fixed at construction.
        data: Original input line and its length.
        depth: Distance from the synthetic root (root = 0).
        path: Normalized slash-joined path, used for descent matching.
        name: Last path component, used for display and lookup.
        children: Owned child nodes in insertion order.
    """
    kind: NodeKind
    data: NodeData
    depth: int
    path: str
    name: str
    children: List["Node"] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def new_root(cls) -> "Node":
        """Create the synthetic root directory (depth 0, path "/")."""
        return cls(
            kind=NodeKind.DIRECTORY,
            data=NodeData.from_line(ROOT_PATH),
            depth=0,
            path=ROOT_PATH,
            name=ROOT_NAME,
        )

    @classmethod
    def new_file(cls, data: NodeData, depth: int, path: str, name: str) -> "Node":
        return cls(kind=NodeKind.FILE, data=data, depth=depth, path=path, name=name)

    @classmethod
    def new_directory(cls, data: NodeData, depth: int, path: str, name: str) -> "Node":
        return cls(kind=NodeKind.DIRECTORY, data=data, depth=depth, path=path, name=name)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def original_path(self) -> str:
        return self.data.original_path

    @property
    def original_length(self) -> int:
        return self.data.original_length

    def components(self) -> List[str]:
        """Split the normalized path into its components."""
        return self.path.split(PATH_SEPARATOR)

    def clone(self) -> "Node":
        """
        Return a fully independent copy of this node and its subtree.

        Copies level by level with an explicit stack so deep subtrees do
        not hit the recursion limit.
        """
        copy_root = self._copy_fields()
        stack: List[Tuple[Node, Node]] = [(self, copy_root)]
        while stack:
            source, target = stack.pop()
            for child in source.children:
                child_copy = child._copy_fields()
                target.children.append(child_copy)
                stack.append((child, child_copy))
        return copy_root

    def _copy_fields(self) -> "Node":
        return Node(
            kind=self.kind,
            data=self.data,
            depth=self.depth,
            path=self.path,
            name=self.name,
        )

    def walk(self) -> Iterator["Node"]:
        """
        Yield this node and every descendant in pre-order.

        One child's subtree is exhausted before the next sibling is visited.
        Uses an explicit stack so deep trees do not hit the recursion limit.
        """
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def render_lines(self) -> List[str]:
        """
        Render this node and its subtree as indented text lines.

        Two spaces per depth level; kind and name first, then the children
        count (directories only), path and depth. Files are leaves for
        display purposes, so children held by a File are not rendered.
        Indentation follows each node's own depth, so a cloned subtree keeps
        the indentation it had inside the tree.
        """
        lines: List[str] = []
        stack: List[Node] = [self]
        while stack:
            current = stack.pop()
            ds = INDENT_UNIT * current.depth

            lines.append(f"{ds}{current.kind.value}: {current.name}")
            if current.is_directory:
                lines.append(f"{ds} Children: {len(current.children)}")
            lines.append(f"{ds} Path: {current.path}")
            lines.append(f"{ds} Depth: {current.depth}")

            if current.is_directory:
                stack.extend(reversed(current.children))
        return lines

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Write this node and its subtree to a text sink (stdout by default)."""
        out = stream if stream is not None else sys.stdout
        for line in self.render_lines():
            out.write(line + "\n")


# -----------------------------------------------------------------------------
# INSERTION OUTCOME
# -----------------------------------------------------------------------------

class InsertStatus(Enum):
    ATTACHED = "attached"
    ORPHANED = "orphaned"


@dataclass(frozen=True)
class InsertResult:
    """
    Outcome of a single PathTree.insert call.

    Attributes:
        status: Whether the node was attached or dropped.
        path: Normalized path of the node being inserted.
        parent_path: Path of the node it was attached under (attached only).
        missing_component: First path component with no matching child
            (orphaned only).
    """
    status: InsertStatus
    path: str
    parent_path: Optional[str] = None
    missing_component: Optional[str] = None

    @property
    def attached(self) -> bool:
        return self.status is InsertStatus.ATTACHED

    def __bool__(self) -> bool:
        return self.attached
