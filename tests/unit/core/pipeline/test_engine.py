from __future__ import annotations

"""
Unit tests for the ingestion engine.

Verifies per-line error isolation, orphan reporting, source selection
and lookup execution.
"""

from pathlib import Path
from unittest.mock import patch

from pathtree.core.analysis.path_tree import PathTree
from pathtree.core.pipeline.engine import ingest_lines, load_lines, run_lookups, run_pipeline
from pathtree.domain.ingest_models import IssueKind


def test_ingest_continues_after_bad_lines() -> None:
    """TC-01: Malformed and orphaned lines are recorded, the rest attached."""
    tree = PathTree()
    lines = ["src/", "", "src/main.rs", "lib/util.rs", "/", "README.md"]

    total, attached, issues = ingest_lines(lines, tree)

    assert total == 6
    assert attached == 3
    assert [(i.line_number, i.kind) for i in issues] == [
        (2, IssueKind.MALFORMED),
        (4, IssueKind.ORPHANED),
        (5, IssueKind.MALFORMED),
    ]
    assert issues[1].detail == "missing ancestor 'lib'"
    assert tree.find_by_name("README.md") is not None


def test_ingest_into_existing_tree(crate_tree: PathTree) -> None:
    total, attached, issues = ingest_lines(["src/lib.rs"], crate_tree)

    assert (total, attached, issues) == (1, 1, [])
    assert len(crate_tree.find_by_name("src").children) == 3


def test_load_lines_prefers_url() -> None:
    cfg = {"input_path": "ignored.txt", "source_url": "https://example.com/paths.txt"}
    with patch(
        "pathtree.core.pipeline.engine.fetch_path_lines", return_value=["a/"]
    ) as fetch:
        label, lines = load_lines(cfg)

    fetch.assert_called_once_with("https://example.com/paths.txt")
    assert label == "https://example.com/paths.txt"
    assert lines == ["a/"]


def test_run_lookups_labels(crate_tree: PathTree) -> None:
    cfg = {"find_name": "main.rs", "find_path": "nope", "find_depth": 1}
    lookups = run_lookups(crate_tree, cfg)

    assert lookups["name:main.rs"][0] == "    File: main.rs"
    assert lookups["path:nope"] is None
    assert lookups["depth:1"][0] == "  Directory: src"


def test_run_pipeline_from_file(listing_file: Path) -> None:
    """TC-02: A full run reads, builds, renders and looks up."""
    tree = PathTree()
    result = run_pipeline(
        {"input_path": str(listing_file), "find_name": "main.rs"}, tree=tree
    )

    assert result.ok and result.clean
    assert result.source == str(listing_file)
    assert result.total_lines == 4
    assert result.attached == 4
    assert result.tree_lines[0] == "Directory: root"
    assert result.lookups["name:main.rs"] is not None
    assert tree.find_by_path("src/main.rs") is not None


def test_run_pipeline_without_display(listing_file: Path) -> None:
    result = run_pipeline({"input_path": str(listing_file), "display_tree": False})

    assert result.tree_lines == []


def test_run_pipeline_missing_source(tmp_path: Path) -> None:
    """TC-03: An unreadable source yields an error result, not an exception."""
    result = run_pipeline({"input_path": str(tmp_path / "absent.txt")})

    assert not result.ok
    assert "absent.txt" in result.error
    assert result.total_lines == 0


def test_run_pipeline_rejects_non_http_url() -> None:
    result = run_pipeline({"source_url": "ftp://example.com/paths.txt"})

    assert not result.ok
    assert "http" in result.error


def test_run_pipeline_reports_orphans(tmp_path: Path) -> None:
    listing = tmp_path / "paths.txt"
    listing.write_text("a/b/c.txt\n", encoding="utf-8")

    result = run_pipeline({"input_path": str(listing)})

    assert result.ok
    assert not result.clean
    assert result.attached == 0
    assert [i.raw for i in result.orphaned] == ["a/b/c.txt"]
