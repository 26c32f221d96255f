from __future__ import annotations

"""
Site Link Generator.

Derives the site-relative URL of a documentation entry from its location
below the base directory: extension stripped, mount prefix prepended once,
and optionally percent-encoded.
"""

import os
from urllib.parse import quote

from docsindex.domain.constants import DEFAULT_LINK_PREFIX
from docsindex.infra.fs import to_posix

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def strip_extension(name: str) -> str:
    """
    Remove the final extension of a file name ("a.b.md" -> "a.b").
    """
    stem, _ = os.path.splitext(name)
    return stem


def normalize_prefix(prefix: str) -> str:
    """
    Bring a mount prefix into "/segment/" form.

    Examples:
        "docs" -> "/docs/", "/docs" -> "/docs/", "" -> "/".
    """
    segment = (prefix or "").strip().strip("/")
    return f"/{segment}/" if segment else "/"


def generate_link(
        base_dir: str,
        node_path: str,
        *,
        prefix: str = DEFAULT_LINK_PREFIX,
        encode: bool = True,
        strip_ext: bool = True,
) -> str:
    """
    Compute the canonical site link of an entry.

    The prefix is only added when the relative path does not already begin
    with the prefix segment, so scanning from the project root and from the
    docs folder itself yield the same links.

    Args:
        base_dir: Directory links are computed against.
        node_path: Absolute path of the file or directory.
        prefix: Mount prefix (e.g. "/docs/").
        encode: Percent-encode the link for direct use in a URL.
        strip_ext: Drop the trailing extension (files only).

    Returns:
        str: Site-relative link, e.g. "/docs/vue/basics".

    Raises:
        ValueError: If node_path lies outside base_dir.
    """
    rel = os.path.relpath(os.path.abspath(node_path), os.path.abspath(base_dir))
    if rel == os.pardir or rel.startswith(os.pardir + os.sep) or os.path.isabs(rel):
        raise ValueError(f"Path '{node_path}' is outside base directory '{base_dir}'")

    rel = "" if rel == os.curdir else to_posix(rel)
    if strip_ext and rel:
        head, _, tail = rel.rpartition("/")
        tail = strip_extension(tail)
        rel = f"{head}/{tail}" if head else tail

    root = normalize_prefix(prefix)
    segment = root.strip("/")
    if segment and (rel == segment or rel.startswith(segment + "/")):
        link = "/" + rel
    else:
        link = root + rel

    if encode:
        link = quote(link, safe="/")
    return link
