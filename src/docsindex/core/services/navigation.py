from __future__ import annotations

"""
Navigation Builder.

Reads the serialized documentation index and derives the data the site
navigation needs: one top-level menu entry per section, the set of section
titles, and the children of a given section.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Set
from urllib.parse import quote

from docsindex.domain.constants import NAV_ACTIVE_MATCH, NAV_QUERY_PARAM, RESERVED_NAV_TITLES

logger = logging.getLogger(__name__)

DocsTree = List[Dict[str, Any]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_docs_tree(path: str) -> DocsTree:
    """
    Read a documentation index written by the serializer.

    Args:
        path: JSON index file.

    Returns:
        DocsTree: The list of top-level node dictionaries.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not JSON or not a list.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Docs tree in '{path}' is not a list (got {type(data).__name__}).")
    return data


def build_nav_entries(
        tree: DocsTree,
        *,
        reserved_titles: Optional[Iterable[str]] = None,
        active_match: str = NAV_ACTIVE_MATCH,
) -> List[Dict[str, str]]:
    """
    Map each top-level node to a navigation menu entry.

    Every entry links to "?name=<title>". Nodes whose title is reserved
    (e.g. "nav") are left out.

    Args:
        tree: Top-level node dictionaries.
        reserved_titles: Titles that never become menu entries.
        active_match: Path prefix marking the entry as active.

    Returns:
        List[Dict[str, str]]: Menu entries with text, link and activeMatch.
    """
    reserved = set(reserved_titles if reserved_titles is not None else RESERVED_NAV_TITLES)
    entries: List[Dict[str, str]] = []
    for node in tree:
        title = node.get("title") if isinstance(node, dict) else None
        if not isinstance(title, str):
            logger.warning(f"Skipping docs tree entry without a title: {node!r}")
            continue
        if title in reserved:
            continue
        entries.append({
            "text": title,
            "link": f"?{NAV_QUERY_PARAM}={quote(title, safe='')}",
            "activeMatch": active_match,
        })
    return entries


def get_title_set(tree: DocsTree, reserved_titles: Optional[Iterable[str]] = None) -> Set[str]:
    """
    Collect the top-level section titles, minus the reserved ones.
    """
    return {entry["text"] for entry in build_nav_entries(tree, reserved_titles=reserved_titles)}


def find_section_items(tree: DocsTree, dir_name: str) -> Optional[DocsTree]:
    """
    Return the children of the top-level node titled dir_name.

    Returns:
        Optional[DocsTree]: The section's items, or None if it does not exist
        or is not a directory.
    """
    for node in tree:
        if isinstance(node, dict) and node.get("title") == dir_name:
            return node.get("items")
    return None
