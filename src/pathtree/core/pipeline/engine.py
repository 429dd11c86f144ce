from __future__ import annotations

"""
Ingestion pipeline.

Coordinates one run end to end:
1. Validates configuration.
2. Reads the path listing (local file or HTTP(S) URL).
3. Parses every line and inserts it into a PathTree, recording
   malformed and orphaned lines without aborting the run.
4. Renders the tree and runs the requested lookups.
"""

import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pathtree.core.analysis.path_parser import parse_path
from pathtree.core.analysis.path_tree import PathTree
from pathtree.core.analysis.tree_renderer import render_lines
from pathtree.core.pipeline.validator import validate_config
from pathtree.domain.config import NO_DEPTH
from pathtree.domain.errors import MalformedPathError, SourceReadError
from pathtree.domain.ingest_models import (
    IngestResult,
    IssueKind,
    LineIssue,
    create_error_result,
    create_success_result,
)
from pathtree.domain.tree_models import Node
from pathtree.infra.fs import normalize_path, read_path_lines
from pathtree.infra.network import fetch_path_lines, is_remote_source

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def ingest_lines(lines: Iterable[str], tree: PathTree) -> Tuple[int, int, List[LineIssue]]:
    """
    Parse and insert every line into `tree`.

    Args:
        lines: Raw listing lines, in source order.
        tree: Destination tree, mutated in place.

    Returns:
        Tuple[int, int, List[LineIssue]]: Lines consumed, nodes attached,
        and the issues found along the way.
    """
    total = 0
    attached = 0
    issues: List[LineIssue] = []

    for line_number, raw in enumerate(lines, start=1):
        total += 1
        logger.debug(f"Adding: {raw}")

        try:
            node = parse_path(raw)
        except MalformedPathError as e:
            logger.warning(f"Line {line_number}: {e}")
            issues.append(LineIssue(line_number, raw, IssueKind.MALFORMED, e.reason))
            continue

        outcome = tree.insert(node)
        if outcome.attached:
            attached += 1
            continue

        detail = "missing ancestor"
        if outcome.missing_component is not None:
            detail = f"missing ancestor '{outcome.missing_component}'"
        logger.warning(f"Line {line_number}: '{node.path}' not attached ({detail}).")
        issues.append(LineIssue(line_number, raw, IssueKind.ORPHANED, detail))

    logger.info(f"Ingested {total} lines: {attached} attached, {len(issues)} skipped.")
    return total, attached, issues


def load_lines(cfg: Dict[str, Any]) -> Tuple[str, List[str]]:
    """
    Read the listing named by the configuration.

    A non-empty `source_url` takes precedence over `input_path`.

    Returns:
        Tuple[str, List[str]]: The resolved source label and its lines.

    Raises:
        SourceReadError: If the source cannot be read.
    """
    url = cfg.get("source_url", "")
    if url:
        if not is_remote_source(url):
            raise SourceReadError(url, "only http:// and https:// URLs are supported")
        return url, fetch_path_lines(url)

    source = normalize_path(cfg.get("input_path", ""), os.getcwd())
    return source, read_path_lines(source)


def run_lookups(tree: PathTree, cfg: Dict[str, Any]) -> Dict[str, Optional[List[str]]]:
    """
    Execute the lookups requested by the configuration.

    Returns:
        Dict[str, Optional[List[str]]]: Rendered subtree per query label,
        or None when nothing matched.
    """
    lookups: Dict[str, Optional[List[str]]] = {}

    name = cfg.get("find_name", "")
    if name:
        lookups[f"name:{name}"] = _render_found(tree.find_by_name(name))

    path = cfg.get("find_path", "")
    if path:
        lookups[f"path:{path}"] = _render_found(tree.find_by_path(path))

    depth = cfg.get("find_depth", NO_DEPTH)
    if depth != NO_DEPTH:
        lookups[f"depth:{depth}"] = _render_found(tree.find_by_depth(depth))

    return lookups


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        tree: Optional[PathTree] = None,
) -> IngestResult:
    """
    Execute a full ingestion run.

    Args:
        config: Raw or partial configuration dictionary.
        tree: Optional tree to populate; a fresh one is used otherwise.

    Returns:
        IngestResult: Source status, counts, issues, dump and lookups.
    """
    logger.info("Ingestion started.")

    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    label = cfg.get("source_url") or cfg.get("input_path", "")
    try:
        label, lines = load_lines(cfg)
    except SourceReadError as e:
        logger.error(str(e))
        return create_error_result(str(e), label)

    tree = tree if tree is not None else PathTree()
    total, attached, issues = ingest_lines(lines, tree)

    tree_lines = render_lines(tree.root) if cfg["display_tree"] else []
    lookups = run_lookups(tree, cfg)

    return create_success_result(
        source=label,
        total_lines=total,
        attached=attached,
        issues=issues,
        tree_lines=tree_lines,
        lookups=lookups,
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_found(node: Optional[Node]) -> Optional[List[str]]:
    if node is None:
        return None
    return render_lines(node)
