from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Integer options and the positional path.
3. Merge semantics of None vs explicit values.
"""

import pytest

from sizescan.interface.cli.app import _merge_config
from sizescan.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_cli_scan_options_mapping() -> None:
    args = parse_args(["/data", "-n", "25", "--workers", "4", "--debug", "--log-file", "scan.log"])

    overrides = args_to_overrides(args)

    assert overrides["input_path"] == "/data"
    assert overrides["top_n"] == 25
    assert overrides["max_workers"] == 4
    assert overrides["log_level"] == "DEBUG"
    assert overrides["log_file"] == "scan.log"


def test_cli_defaults_are_none() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert overrides["input_path"] is None
    assert overrides["top_n"] is None
    assert "log_level" not in overrides


def test_cli_rejects_non_integer_top() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--top", "many"])


def test_merge_ignores_none_overrides(mock_config_dict) -> None:
    merged = _merge_config(mock_config_dict, {"input_path": None, "top_n": 3, "unknown": 1})

    assert merged["input_path"] == mock_config_dict["input_path"]
    assert merged["top_n"] == 3
    assert "unknown" not in merged
