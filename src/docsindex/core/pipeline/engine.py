from __future__ import annotations

"""
Indexing pipeline.

This module coordinates one indexing run:
1. Validates configuration and resolves paths.
2. Builds the documentation tree.
3. Optionally renders an ASCII preview.
4. Serializes the tree to the JSON index.
5. Optionally derives the navigation menu from the written index.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from docsindex.core.analysis.tree_builder import build_tree
from docsindex.core.analysis.tree_renderer import render_tree
from docsindex.core.pipeline.validator import validate_config
from docsindex.core.pipeline.writer import write_json, write_tree
from docsindex.core.services.navigation import build_nav_entries, load_docs_tree
from docsindex.domain.errors import IndexBuildError, MetadataWarning
from docsindex.domain.index_models import (
    IndexResult,
    create_error_result,
    create_success_result,
)
from docsindex.domain.tree_models import count_nodes, tree_to_dicts
from docsindex.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_indexer(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> IndexResult:
    """
    Execute a full indexing run.

    Fatal problems (unreadable directories, symlink cycles, unwritable
    output) stop the run and come back as a failed result. Per-file
    metadata problems are reported in the result's warnings.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, build the tree without writing any file.

    Returns:
        IndexResult: Object containing status, counts and the tree payload.
    """
    logger.info("Indexing started.")

    cfg, cfg_warnings = validate_config(config, strict=False)
    for warning in cfg_warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    input_path = normalize_path(cfg["input_path"], cwd)
    output_path = normalize_path(cfg["output_path"], cwd)
    base_dir = normalize_path(cfg["base_dir"], input_path)
    nav_output_path = normalize_path(cfg["nav_output_path"], cwd) if cfg["nav_output_path"] else ""

    metadata_warnings: List[MetadataWarning] = []

    try:
        nodes = build_tree(
            input_path,
            base_dir=base_dir,
            mode=cfg["mode"],
            link_prefix=cfg["link_prefix"],
            encode_links=cfg["encode_links"],
            markdown_extensions=cfg["markdown_extensions"],
            exclude_names=cfg["exclude_names"],
            exclude_patterns=cfg["exclude_patterns"],
            sort_entries=cfg["sort_entries"],
            workers=cfg["workers"],
            warnings=metadata_warnings,
            skip_paths=[p for p in (output_path, nav_output_path) if p],
        )

        tree_lines: List[str] = []
        if cfg["print_tree"]:
            tree_lines = render_tree(nodes)
            logger.info("Tree Preview:\n" + "\n".join(tree_lines))

        tree = tree_to_dicts(nodes)

        if dry_run:
            logger.info("Dry run: skipping index serialization.")
        else:
            write_tree(nodes, output_path)

        if nav_output_path:
            nav_source = tree if dry_run else load_docs_tree(output_path)
            nav_entries = build_nav_entries(nav_source, reserved_titles=cfg["reserved_nav_titles"])
            if not dry_run:
                write_json(nav_entries, nav_output_path)

    except IndexBuildError as e:
        cause = f" ({e.cause})" if e.cause else ""
        logger.error(f"Indexing aborted at '{e.path}': {e.reason}{cause}")
        return create_error_result(str(e), cfg, input_path, summary_extra={"failed_path": e.path})

    directories, files = count_nodes(nodes)
    summary = {
        "directories": directories,
        "files": files,
        "top_level": len(nodes),
        "metadata_warnings": len(metadata_warnings),
        "dry_run": dry_run,
        "generated_files": {
            "index": None if dry_run else output_path,
            "nav": None if (dry_run or not nav_output_path) else nav_output_path,
        },
    }

    logger.info(f"Indexing completed: {directories} directories, {files} files.")
    return create_success_result(
        cfg,
        input_path,
        output_path,
        tree,
        directories,
        files,
        tree_lines=tree_lines,
        nav_output_path=nav_output_path,
        warnings=metadata_warnings,
        summary_extra=summary,
    )
