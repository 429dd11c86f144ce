from __future__ import annotations

"""
Integration tests for the ingestion pipeline.

Runs a realistic listing through file reading, parsing, insertion and
rendering, and checks the resulting tree and report together.
"""

from pathlib import Path

from pathtree.core.analysis.path_tree import PathTree
from pathtree.core.pipeline.engine import run_pipeline
from pathtree.domain.tree_models import NodeKind

LISTING = """\
./
./Cargo.toml
./src/
./src/node.rs
./src/main.rs
./tests/
./tests/fixtures/
./tests/fixtures/paths.txt
./tests/tree.rs
./docs/guide/intro.md
"""


def test_listing_builds_expected_tree(tmp_path: Path) -> None:
    listing = tmp_path / "paths.txt"
    listing.write_text(LISTING, encoding="utf-8")
    tree = PathTree()

    result = run_pipeline(
        {"input_path": str(listing), "find_name": "paths.txt", "find_depth": 3},
        tree=tree,
    )

    assert result.ok
    assert result.total_lines == 10
    assert result.attached == 8
    # "./" has no components, the docs entry has no ancestors
    assert [(i.line_number, i.kind.value) for i in result.issues] == [
        (1, "malformed"),
        (10, "orphaned"),
    ]

    assert [c.name for c in tree.root.children] == ["Cargo.toml", "src", "tests"]
    fixtures = tree.find_by_path("tests/fixtures")
    assert fixtures.kind is NodeKind.DIRECTORY
    assert [c.path for c in fixtures.children] == ["tests/fixtures/paths.txt"]

    assert result.lookups["name:paths.txt"] == [
        "      File: paths.txt",
        "       Path: tests/fixtures/paths.txt",
        "       Depth: 3",
    ]
    assert result.lookups["depth:3"] == result.lookups["name:paths.txt"]


def test_rerun_is_deterministic(tmp_path: Path) -> None:
    listing = tmp_path / "paths.txt"
    listing.write_text(LISTING, encoding="utf-8")

    first = run_pipeline({"input_path": str(listing)})
    second = run_pipeline({"input_path": str(listing)})

    assert first.tree_lines == second.tree_lines
    assert first.tree_lines
