from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the pathtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="pathtree",
        description="Build a file/directory tree from a list of slash-delimited paths.",
    )

    # --- Source ---
    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Path listing file, one path per line (default: paths.txt).",
    )
    source.add_argument(
        "--url",
        dest="source_url",
        default=None,
        help="Fetch the path listing from an HTTP(S) URL instead of a file.",
    )

    # --- Lookups ---
    p.add_argument(
        "--find",
        dest="find_name",
        default=None,
        help="Print the first node with this name.",
    )
    p.add_argument(
        "--find-path",
        dest="find_path",
        default=None,
        help="Print the node with this exact normalized path.",
    )
    p.add_argument(
        "--find-depth",
        dest="find_depth",
        type=int,
        default=None,
        help="Print the first node found at this depth (root is 0).",
    )

    # --- Output ---
    p.add_argument(
        "--no-display",
        action="store_true",
        help="Do not print the full tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the ingestion report as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Read settings from this JSON file instead of the user config.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any saved configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective settings for later runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file (rotated).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset options map to None so they never mask loaded values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["source_url"] = args.source_url
    # An explicit file disables a URL remembered from a saved session
    if args.input_path is not None:
        overrides["source_url"] = ""

    overrides["find_name"] = args.find_name
    overrides["find_path"] = args.find_path
    overrides["find_depth"] = args.find_depth
    overrides["log_file"] = args.log_file

    if args.no_display:
        overrides["display_tree"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
