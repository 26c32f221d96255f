from __future__ import annotations

"""
Documentation Tree Builder.

Walks a documentation directory with an explicit work-list and assembles
the TreeNode hierarchy: titles, site links, front-matter metadata and
children, in directory listing order. Index pages and OS artifacts are
filtered out before any node is created.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from docsindex.core.analysis.frontmatter import extract_metadata, is_markdown
from docsindex.core.analysis.links import generate_link
from docsindex.core.pipeline.components.filters import (
    compile_patterns,
    default_exclude_names,
    default_exclude_patterns,
    is_excluded,
)
from docsindex.core.services.scanner import (
    DirEntryInfo,
    check_cycle,
    list_directory,
    resolve_identity,
)
from docsindex.domain.constants import DEFAULT_LINK_PREFIX, MARKDOWN_EXTENSIONS, TREE_MODES
from docsindex.domain.errors import IndexBuildError, MetadataWarning
from docsindex.domain.tree_models import Metadata, TreeNode
from docsindex.infra.fs import to_posix

logger = logging.getLogger(__name__)

# (directory path, children accumulator, real paths of the branch)
_WorkItem = Tuple[str, List[TreeNode], FrozenSet[str]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        input_path: str,
        *,
        base_dir: Optional[str] = None,
        mode: str = "full",
        link_prefix: str = DEFAULT_LINK_PREFIX,
        encode_links: bool = True,
        markdown_extensions: Optional[List[str]] = None,
        exclude_names: Optional[Iterable[str]] = None,
        exclude_patterns: Optional[List[str]] = None,
        sort_entries: bool = False,
        workers: int = 1,
        warnings: Optional[List[MetadataWarning]] = None,
        skip_paths: Optional[Iterable[str]] = None,
) -> List[TreeNode]:
    """
    Build the documentation tree rooted at input_path.

    Args:
        input_path: Documentation directory to scan.
        base_dir: Directory links are computed against (defaults to input_path).
        mode: "full" (links, metadata, extensions) or "minimal" (names only).
        link_prefix: Mount prefix prepended to links.
        encode_links: Percent-encode generated links.
        markdown_extensions: Extensions whose front-matter is parsed.
        exclude_names: Extra entry names to skip. Index pages and OS artifacts
            are always skipped.
        exclude_patterns: Extra regexes of entry names to skip, on top of the
            built-in artifact and tool directory patterns.
        sort_entries: Order children by name instead of listing order.
        workers: Threads used for metadata extraction within a directory.
        warnings: Optional accumulator for per-file metadata failures, filled
            in listing order.
        skip_paths: Files or directories left out of the walk (e.g. the
            index being written below input_path).

    Returns:
        List[TreeNode]: Top-level nodes of the documentation directory.

    Raises:
        IndexBuildError: If a directory cannot be read, a symlink cycle is
            found, or input_path lies outside base_dir.
        ValueError: If mode is unknown.
    """
    if mode not in TREE_MODES:
        raise ValueError(f"Unknown tree mode '{mode}'. Expected one of: {', '.join(TREE_MODES)}")

    root_path = os.path.abspath(input_path)
    base_path = os.path.abspath(base_dir) if base_dir else root_path
    if mode == "full":
        _ensure_within_base(root_path, base_path)

    names = set(default_exclude_names())
    if exclude_names:
        names.update(exclude_names)
    skipped = {os.path.normcase(os.path.abspath(p)) for p in (skip_paths or ())}
    exclude_rx = compile_patterns(default_exclude_patterns() + list(exclude_patterns or []))
    md_exts = markdown_extensions if markdown_extensions is not None else MARKDOWN_EXTENSIONS

    logger.info(f"Building {mode} documentation tree for: {root_path}")

    root_items: List[TreeNode] = []
    stack: List[_WorkItem] = [(root_path, root_items, frozenset({resolve_identity(root_path)}))]

    executor = None
    if workers > 1 and mode == "full":
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="MetadataWorker")

    try:
        while stack:
            dir_path, items, ancestors = stack.pop()
            entries = [
                e for e in list_directory(dir_path)
                if not is_excluded(e.name, names, exclude_rx)
                and os.path.normcase(e.path) not in skipped
            ]
            if sort_entries:
                entries.sort(key=lambda e: e.name)

            metadata: Dict[str, Optional[Metadata]] = {}
            if mode == "full":
                metadata = _collect_metadata(entries, root_path, md_exts, executor, warnings)

            pending: List[_WorkItem] = []
            for entry in entries:
                if entry.is_dir:
                    identity = check_cycle(entry, ancestors)
                    if entry.is_symlink:
                        logger.debug(f"Following directory link '{entry.path}' -> '{identity}'")
                    children: List[TreeNode] = []
                    items.append(_directory_node(entry, children, mode, base_path, link_prefix, encode_links))
                    pending.append((entry.path, children, ancestors | {identity}))
                else:
                    items.append(_file_node(
                        entry, metadata.get(entry.path), mode, base_path, link_prefix, encode_links
                    ))

            # Reversed so that directories are visited in listing order
            stack.extend(reversed(pending))
    finally:
        if executor:
            executor.shutdown(wait=True)

    return root_items

# -----------------------------------------------------------------------------
# NODE FACTORIES
# -----------------------------------------------------------------------------

def _directory_node(
        entry: DirEntryInfo,
        children: List[TreeNode],
        mode: str,
        base_path: str,
        link_prefix: str,
        encode_links: bool,
) -> TreeNode:
    if mode == "minimal":
        return TreeNode(title=entry.name, items=children)
    link = generate_link(base_path, entry.path, prefix=link_prefix, encode=encode_links, strip_ext=False)
    return TreeNode(title=entry.name, link=link, items=children)


def _file_node(
        entry: DirEntryInfo,
        metadata: Optional[Metadata],
        mode: str,
        base_path: str,
        link_prefix: str,
        encode_links: bool,
) -> TreeNode:
    if mode == "minimal":
        return TreeNode(title=entry.name)
    title, ext = os.path.splitext(entry.name)
    link = generate_link(base_path, entry.path, prefix=link_prefix, encode=encode_links)
    return TreeNode(title=title, link=link, metadata=metadata, fileExtension=ext)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _collect_metadata(
        entries: List[DirEntryInfo],
        root_path: str,
        extensions: List[str],
        executor: Optional[ThreadPoolExecutor],
        warnings: Optional[List[MetadataWarning]],
) -> Dict[str, Optional[Metadata]]:
    """Extract front-matter for the markdown files of one directory."""
    targets = [e for e in entries if not e.is_dir and is_markdown(e.name, extensions)]
    if not targets:
        return {}

    def _task(entry: DirEntryInfo) -> Tuple[Optional[Metadata], List[MetadataWarning]]:
        rel_path = to_posix(os.path.relpath(entry.path, root_path))
        issues: List[MetadataWarning] = []
        return extract_metadata(entry.path, extensions, issues, rel_path=rel_path), issues

    if executor:
        results = list(executor.map(_task, targets))
    else:
        results = [_task(e) for e in targets]

    # Listing order, independent of worker completion order
    if warnings is not None:
        for _, issues in results:
            warnings.extend(issues)

    return {entry.path: meta for entry, (meta, _) in zip(targets, results)}


def _ensure_within_base(root_path: str, base_path: str) -> None:
    try:
        common = os.path.commonpath([root_path, base_path])
    except ValueError:
        common = ""
    if common != base_path:
        raise IndexBuildError(root_path, f"Input directory is outside base directory '{base_path}'")
