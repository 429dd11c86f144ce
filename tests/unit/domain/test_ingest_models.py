from __future__ import annotations

"""Unit tests for the ingestion report models."""

from pathtree.domain.ingest_models import (
    IssueKind,
    LineIssue,
    create_error_result,
    create_success_result,
)


def test_success_result_partitions_issues() -> None:
    issues = [
        LineIssue(1, "", IssueKind.MALFORMED, "no path components"),
        LineIssue(2, "a/b.txt", IssueKind.ORPHANED, "missing ancestor 'a'"),
    ]
    result = create_success_result("paths.txt", total_lines=3, attached=1, issues=issues)

    assert result.ok
    assert not result.clean
    assert [i.line_number for i in result.malformed] == [1]
    assert [i.line_number for i in result.orphaned] == [2]


def test_clean_result() -> None:
    result = create_success_result("paths.txt", total_lines=1, attached=1, issues=[])

    assert result.clean
    assert result.tree_lines == []
    assert result.lookups == {}


def test_error_result() -> None:
    result = create_error_result("boom", "paths.txt")

    assert not result.ok
    assert not result.clean
    assert result.error == "boom"
