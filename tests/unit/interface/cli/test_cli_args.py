from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Unset options mapping to None.
3. Mutual exclusion of the file and URL sources.
"""

import pytest

from pathtree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_lookup_flags_mapping() -> None:
    args = parse_args([
        "-i", "listing.txt",
        "--find", "main.rs",
        "--find-path", "src/main.rs",
        "--find-depth", "2",
        "--no-display",
        "--debug",
    ])

    overrides = args_to_overrides(args)

    assert overrides["input_path"] == "listing.txt"
    assert overrides["source_url"] == ""
    assert overrides["find_name"] == "main.rs"
    assert overrides["find_path"] == "src/main.rs"
    assert overrides["find_depth"] == 2
    assert overrides["display_tree"] is False
    assert overrides["log_level"] == "DEBUG"


def test_cli_defaults_map_to_none() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert overrides["input_path"] is None
    assert overrides["source_url"] is None
    assert overrides["find_depth"] is None
    assert "display_tree" not in overrides
    assert "log_level" not in overrides


def test_cli_url_source() -> None:
    overrides = args_to_overrides(parse_args(["--url", "https://example.com/p.txt"]))

    assert overrides["source_url"] == "https://example.com/p.txt"
    assert overrides["input_path"] is None


def test_cli_sources_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        parse_args(["-i", "a.txt", "--url", "https://example.com/p.txt"])


def test_cli_rejects_non_integer_depth() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--find-depth", "deep"])
