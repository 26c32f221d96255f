from __future__ import annotations

"""
Indexer Result Data Models.

Defines the result object exchanged between the indexing pipeline and the
CLI layer, plus the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from docsindex.domain.errors import MetadataWarning

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexResult:
    """
    Unified result object of a complete indexing run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Normalized documentation directory that was scanned.
        output_path: Target path of the JSON index.
        mode: Tree builder mode ("full" or "minimal").
        directories: Number of directory nodes in the tree.
        files: Number of file nodes in the tree.
        tree: Serializable tree payload.
        tree_lines: ASCII rendering of the tree (when requested).
        nav_output_path: Path of the navigation JSON, if generated.
        warnings: Recoverable per-file metadata failures.
        summary: Execution summary and statistics.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str
    mode: str

    directories: int = 0
    files: int = 0

    tree: List[Dict[str, Any]] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)
    nav_output_path: str = ""

    warnings: List[MetadataWarning] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        input_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> IndexResult:
    """
    Create a failed indexing result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        input_path: The target documentation directory.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        IndexResult: An immutable error result object.
    """
    return IndexResult(
        ok=False,
        error=error,
        input_path=input_path,
        output_path=cfg.get("output_path", ""),
        mode=cfg.get("mode", "full"),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        output_path: str,
        tree: List[Dict[str, Any]],
        directories: int,
        files: int,
        tree_lines: Optional[List[str]] = None,
        nav_output_path: str = "",
        warnings: Optional[List[MetadataWarning]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> IndexResult:
    """
    Create a successful indexing result.

    Args:
        cfg: Final configuration used during execution.
        input_path: Normalized documentation directory.
        output_path: Absolute path of the JSON index.
        tree: Serializable tree payload.
        directories: Number of directory nodes.
        files: Number of file nodes.
        tree_lines: ASCII rendering of the tree.
        nav_output_path: Navigation JSON path, if written.
        warnings: Per-file metadata failures.
        summary_extra: Final execution metrics.

    Returns:
        IndexResult: An immutable success result object.
    """
    return IndexResult(
        ok=True,
        error="",
        input_path=input_path,
        output_path=output_path,
        mode=cfg.get("mode", "full"),
        directories=directories,
        files=files,
        tree=tree,
        tree_lines=tree_lines or [],
        nav_output_path=nav_output_path,
        warnings=warnings or [],
        summary=summary_extra or {},
    )
