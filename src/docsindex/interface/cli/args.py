from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the docsindex CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="docsindex",
        description="Scan a documentation folder and write its JSON navigation index.",
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Documentation directory to scan.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Target JSON index file (overwritten).",
    )
    p.add_argument(
        "--base",
        dest="base_dir",
        default=None,
        help="Directory links are computed against (defaults to the input).",
    )
    p.add_argument(
        "--nav-output",
        dest="nav_output_path",
        default=None,
        help="Also write the top-level navigation menu to this JSON file.",
    )

    # --- Tree Shape ---
    p.add_argument(
        "--minimal",
        action="store_true",
        help="Emit names and children only (no links, metadata or extensions).",
    )
    p.add_argument(
        "--prefix",
        dest="link_prefix",
        default=None,
        help="Mount prefix prepended to links (default: /docs/).",
    )
    p.add_argument(
        "--no-encode",
        action="store_true",
        help="Do not percent-encode generated links.",
    )
    p.add_argument(
        "--sort",
        action="store_true",
        help="Order entries by name instead of filesystem listing order.",
    )
    p.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads used to read front-matter (default: 1).",
    )

    # --- Filtering ---
    p.add_argument(
        "--md-ext",
        dest="markdown_extensions",
        default=None,
        help="Comma-separated markdown extensions whose front-matter is parsed.",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_names",
        default=None,
        help="Comma-separated entry names to skip, in addition to index.md and OS artifacts.",
    )
    p.add_argument(
        "--exclude-pattern",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes of entry names to skip, in addition to the built-in ones.",
    )

    # --- Runtime ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Log an ASCII preview of the tree.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the tree without writing any file.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON configuration file (default: ./docsindex.json if present).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore configuration files and start from built-in defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["base_dir"] = args.base_dir
    overrides["nav_output_path"] = args.nav_output_path
    overrides["link_prefix"] = args.link_prefix
    overrides["workers"] = args.workers

    if args.minimal:
        overrides["mode"] = "minimal"
    if args.no_encode:
        overrides["encode_links"] = False
    if args.sort:
        overrides["sort_entries"] = True
    if args.print_tree:
        overrides["print_tree"] = True

    if args.markdown_extensions:
        overrides["markdown_extensions"] = _split_csv(args.markdown_extensions)
    if args.exclude_names is not None:
        overrides["exclude_names"] = _split_csv(args.exclude_names)
    if args.exclude_patterns is not None:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
