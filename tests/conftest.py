from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Puts the 'src' directory on sys.path and provides shared path listings
and pre-built trees used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from pathtree.core.analysis.path_parser import parse_path  # noqa: E402
from pathtree.core.analysis.path_tree import PathTree  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def crate_listing() -> List[str]:
    """
    A small Rust crate listing in ancestors-first order.

    Structure:
    /root
      /src
        node.rs
        main.rs
      Cargo.toml
    """
    return [
        "./src/",
        "./src/node.rs",
        "./src/main.rs",
        "./Cargo.toml",
    ]


@pytest.fixture
def crate_tree(crate_listing: List[str]) -> PathTree:
    """A PathTree populated from the crate listing."""
    tree = PathTree()
    for line in crate_listing:
        assert tree.insert(parse_path(line)).attached
    return tree


@pytest.fixture
def listing_file(tmp_path: Path, crate_listing: List[str]) -> Path:
    """Write the crate listing to a paths.txt file."""
    path = tmp_path / "paths.txt"
    path.write_text("\n".join(crate_listing) + "\n", encoding="utf-8")
    return path
