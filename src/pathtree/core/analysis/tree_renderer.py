from __future__ import annotations

"""
Tree Renderer.

Collects the indented text dump of Node sub-trees into line lists and
writes them to text sinks, so the core never prints on its own. The
per-node format itself lives with the Node model.
"""

import sys
from typing import List, Optional, TextIO

from pathtree.domain.tree_models import Node

EMPTY_TREE_MESSAGE = "No root node."

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_node(node: Node, lines: List[str]) -> None:
    """
    Append the pre-order dump of a node and its subtree to an accumulator.

    Args:
        node: Subtree root to render.
        lines: Accumulator list for output strings.
    """
    lines.extend(node.render_lines())


def render_lines(node: Optional[Node]) -> List[str]:
    """Render a subtree, or the empty-tree message when there is none."""
    if node is None:
        return [EMPTY_TREE_MESSAGE]
    lines: List[str] = []
    render_node(node, lines)
    return lines


def write_lines(lines: List[str], stream: Optional[TextIO] = None) -> None:
    """Write rendered lines to a text sink (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    for line in lines:
        out.write(line + "\n")


def write_node(node: Optional[Node], stream: Optional[TextIO] = None) -> None:
    write_lines(render_lines(node), stream)
