from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, saved settings, command-line overrides), ingestion, and result
rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from pathtree.core.pipeline.engine import run_pipeline
from pathtree.core.pipeline.validator import validate_config
from pathtree.domain.config import get_default_config, load_config, save_config
from pathtree.domain.ingest_models import IngestResult
from pathtree.infra.logging import LoggingConfig, configure_logging, get_logger
from pathtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_SOURCE_ERROR = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on a clean run, 1 if some lines were skipped, 2 if the
        source could not be read.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve configuration (defaults vs saved state) plus overrides
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_file)

    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    )
    configure_logging(logging_conf)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        save_config(clean_conf, args.config_file)

    # 3. Ingestion
    try:
        result = run_pipeline(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 4. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    if not result.ok:
        return EXIT_SOURCE_ERROR
    return EXIT_OK if result.clean else EXIT_ISSUES

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into the base config."""
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: IngestResult) -> None:
    """Print the tree dump, lookup results and skipped lines."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    for line in result.tree_lines:
        print(line)

    for label, found in result.lookups.items():
        kind, _, query = label.partition(":")
        if found is None:
            print(f"Could not find {query}" if kind == "name" else f"Could not find {kind} {query}")
            continue
        for line in found:
            print(line)

    if result.issues:
        print(f"Skipped {len(result.issues)} of {result.total_lines} lines:", file=sys.stderr)
        for issue in result.issues:
            print(
                f"  line {issue.line_number} [{issue.kind.value}] {issue.raw!r}: {issue.detail}",
                file=sys.stderr,
            )

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
