from __future__ import annotations

"""
Index Serializer.

Turns the documentation tree into stable, diff-friendly JSON text and
persists it, replacing any previous content. Write failures are fatal.
"""

import json
import logging
from typing import Any, List

from docsindex.domain.errors import IndexWriteError
from docsindex.domain.tree_models import TreeNode, tree_to_dicts
from docsindex.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

def serialize_json(data: Any) -> str:
    """
    Render a JSON-compatible payload with a fixed layout.

    Two-space indentation, non-ASCII characters kept verbatim and a trailing
    newline, so identical input always yields byte-identical output.

    Raises:
        ValueError: If the payload holds inf or nan, which JSON cannot express.
    """
    return json.dumps(data, ensure_ascii=False, indent=2, allow_nan=False) + "\n"


def serialize_tree(nodes: List[TreeNode]) -> str:
    return serialize_json(tree_to_dicts(nodes))

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_json(data: Any, output_path: str) -> None:
    """
    Write a JSON payload to disk, overwriting the target.

    Args:
        data: JSON-compatible payload.
        output_path: Target file.

    Raises:
        IndexWriteError: If the directory or file cannot be written.
    """
    text = serialize_json(data)
    try:
        ensure_parent_dir(output_path)
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise IndexWriteError(output_path, f"Cannot write output ({e.strerror or e})", e) from e
    logger.info(f"Wrote {output_path}")


def write_tree(nodes: List[TreeNode], output_path: str) -> None:
    """
    Serialize the documentation tree to output_path.

    Raises:
        IndexWriteError: If the file cannot be written.
    """
    write_json(tree_to_dicts(nodes), output_path)
