from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, JSON config file, CLI overrides), the indexing run and
result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from docsindex.core.pipeline.engine import run_indexer
from docsindex.core.pipeline.validator import validate_config
from docsindex.domain.config import DEFAULT_CONFIG_FILE, get_default_config, load_config_file
from docsindex.domain.index_models import IndexResult
from docsindex.infra.fs import normalize_path
from docsindex.infra.logging import LoggingConfig, configure_logging, get_logger
from docsindex.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 indexing failure, 2 bad input,
             130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 1. Base configuration (defaults vs config file)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        if args.config_file and not os.path.isfile(args.config_file):
            msg = f"Config file does not exist: {args.config_file}"
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2
        base_conf = load_config_file(args.config_file or DEFAULT_CONFIG_FILE)

    # 2. Command-line overrides
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 3. Pre-flight input verification
    input_path = normalize_path(clean_conf["input_path"], os.getcwd())
    if not os.path.isdir(input_path):
        msg = f"Input directory does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 4. Indexing run
    try:
        result = run_indexer(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.critical(f"Indexing failed unexpectedly: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 5. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-null overrides for known keys into the base configuration.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: IndexResult) -> None:
    """
    Print the run result to standard output (errors to stderr).
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.summary.get("dry_run"):
        print("DRY RUN COMPLETE (no files written)")
    else:
        print("INDEX GENERATED")
        print(f"Output: {result.output_path}")
        if result.nav_output_path:
            print(f"Navigation: {result.nav_output_path}")

    print(f"Directories: {result.directories}")
    print(f"Files: {result.files}")

    if result.warnings:
        print(f"Metadata warnings: {len(result.warnings)}")
        for w in result.warnings:
            print(f"  - {w.rel_path}: {w.error}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
