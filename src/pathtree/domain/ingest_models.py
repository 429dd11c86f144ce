from __future__ import annotations

"""
Ingestion Domain Data Models.

Defines the report objects exchanged between the ingestion engine and the
interface layer. A report lists every line that did not end up in the tree
so callers never have to assume that all paths were attached.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------


class IssueKind(str, Enum):
    MALFORMED = "malformed"
    ORPHANED = "orphaned"


@dataclass(frozen=True)
class LineIssue:
    """
    A single input line that was not attached to the tree.

    Attributes:
        line_number: 1-based position in the source.
        raw: The line as read from the source.
        kind: Malformed (unparseable) or orphaned (missing ancestor).
        detail: Human readable reason.
    """
    line_number: int
    raw: str
    kind: IssueKind
    detail: str


@dataclass(frozen=True)
class IngestResult:
    """
    Unified result of one ingestion run.

    Attributes:
        ok: False only when the source itself could not be read.
        error: Description of the source failure, if any.
        source: File path or URL the lines were read from.
        total_lines: Number of lines consumed.
        attached: Number of nodes attached to the tree.
        issues: Every malformed or orphaned line, in input order.
        tree_lines: Rendered dump of the whole tree.
        lookups: Outcome of each requested lookup, keyed by query label.
    """
    ok: bool
    error: str
    source: str
    total_lines: int = 0
    attached: int = 0
    issues: List[LineIssue] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)
    lookups: Dict[str, Optional[List[str]]] = field(default_factory=dict)

    @property
    def malformed(self) -> List[LineIssue]:
        return [i for i in self.issues if i.kind is IssueKind.MALFORMED]

    @property
    def orphaned(self) -> List[LineIssue]:
        return [i for i in self.issues if i.kind is IssueKind.ORPHANED]

    @property
    def clean(self) -> bool:
        """True when the source was read and every line was attached."""
        return self.ok and not self.issues


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, source: str) -> IngestResult:
    """Create a result for a run whose source could not be read."""
    return IngestResult(ok=False, error=error, source=source)


def create_success_result(
        source: str,
        total_lines: int,
        attached: int,
        issues: List[LineIssue],
        tree_lines: Optional[List[str]] = None,
        lookups: Optional[Dict[str, Any]] = None,
) -> IngestResult:
    """
    Create a result for a run whose source was fully consumed.

    Args:
        source: File path or URL that was read.
        total_lines: Number of lines consumed.
        attached: Number of nodes attached.
        issues: Malformed and orphaned lines.
        tree_lines: Rendered tree dump.
        lookups: Lookup outcomes keyed by query label.

    Returns:
        IngestResult: An immutable success result.
    """
    return IngestResult(
        ok=True,
        error="",
        source=source,
        total_lines=total_lines,
        attached=attached,
        issues=list(issues),
        tree_lines=tree_lines or [],
        lookups=lookups or {},
    )
