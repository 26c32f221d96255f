from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV string parsing logic.
3. Handling of boolean flags (store_true).
"""

from docsindex.interface.cli.app import _merge_config
from docsindex.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_simple_flags_mapping():
    args = parse_args(["--minimal", "--no-encode", "--sort", "--print-tree"])

    overrides = args_to_overrides(args)

    assert overrides["mode"] == "minimal"
    assert overrides["encode_links"] is False
    assert overrides["sort_entries"] is True
    assert overrides["print_tree"] is True


def test_cli_paths_and_values():
    args = parse_args([
        "-i", "site/docs",
        "-o", "out/tree.json",
        "--base", "site",
        "--nav-output", "out/nav.json",
        "--prefix", "/guide/",
        "--workers", "3",
    ])

    overrides = args_to_overrides(args)

    assert overrides["input_path"] == "site/docs"
    assert overrides["output_path"] == "out/tree.json"
    assert overrides["base_dir"] == "site"
    assert overrides["nav_output_path"] == "out/nav.json"
    assert overrides["link_prefix"] == "/guide/"
    assert overrides["workers"] == 3


def test_cli_csv_list_parsing():
    args = parse_args([
        "--md-ext", ".md, .mdx",
        "--exclude", "index.md,,README.md",
        "--exclude-pattern", "^draft-",
    ])

    overrides = args_to_overrides(args)

    assert overrides["markdown_extensions"] == [".md", ".mdx"]
    assert overrides["exclude_names"] == ["index.md", "README.md"]
    assert overrides["exclude_patterns"] == ["^draft-"]


def test_cli_empty_exclude_clears_defaults():
    overrides = args_to_overrides(parse_args(["--exclude", ""]))
    assert overrides["exclude_names"] == []


def test_cli_defaults_leave_config_untouched():
    """Flags that were not passed must not override file configuration."""
    overrides = args_to_overrides(parse_args([]))
    base = {"input_path": "docs", "mode": "full", "workers": 2}

    merged = _merge_config(base, overrides)

    assert merged == base
    assert "mode" not in overrides
    assert "exclude_names" not in overrides


def test_cli_runtime_flags():
    args = parse_args(["--dry-run", "--json", "--debug", "--use-defaults", "--config", "x.json"])

    assert args.dry_run is True
    assert args.json_output is True
    assert args.debug is True
    assert args.use_defaults is True
    assert args.config_file == "x.json"
