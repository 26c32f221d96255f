from __future__ import annotations

"""
Filesystem Walker.

Lists the immediate entries of a directory and classifies them as files or
directories. Directory symlinks are followed; the caller tracks the real
paths of the directories on the current branch so that a link pointing back
to an ancestor is reported instead of being walked forever.
"""

import logging
import os
from dataclasses import dataclass
from typing import AbstractSet, List

from docsindex.domain.errors import DirectoryReadError, SymlinkCycleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirEntryInfo:
    """
    Minimal description of a directory entry.

    Attributes:
        name: Entry name.
        path: Absolute path of the entry.
        is_dir: True for directories (including symlinks to directories).
        is_symlink: True if the entry itself is a symbolic link.
    """
    name: str
    path: str
    is_dir: bool
    is_symlink: bool = False


# ==============================================================================
# PUBLIC API
# ==============================================================================

def list_directory(dir_path: str) -> List[DirEntryInfo]:
    """
    Return the entries of a directory in filesystem listing order.

    Args:
        dir_path: Directory to list.

    Returns:
        List[DirEntryInfo]: Immediate children of the directory.

    Raises:
        DirectoryReadError: If the directory is missing, unreadable or not
            a directory.
    """
    entries: List[DirEntryInfo] = []
    try:
        with os.scandir(dir_path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=True)
                    is_symlink = entry.is_symlink()
                except OSError as e:
                    # Broken link or racing deletion: index it as a plain file
                    logger.debug(f"Cannot stat '{entry.path}': {e}")
                    is_dir, is_symlink = False, True
                entries.append(DirEntryInfo(
                    name=entry.name,
                    path=os.path.join(dir_path, entry.name),
                    is_dir=is_dir,
                    is_symlink=is_symlink,
                ))
    except OSError as e:
        raise DirectoryReadError(dir_path, f"Cannot read directory ({e.strerror or e})", e) from e

    return entries


def resolve_identity(path: str) -> str:
    """
    Resolve the canonical location of a directory for cycle detection.
    """
    return os.path.normcase(os.path.realpath(path))


def check_cycle(entry: DirEntryInfo, ancestors: AbstractSet[str]) -> str:
    """
    Ensure that descending into a directory entry cannot loop.

    Args:
        entry: Directory entry about to be walked.
        ancestors: Real paths of the current directory and its ancestors.

    Returns:
        str: The real path of the entry, to extend the ancestor set with.

    Raises:
        SymlinkCycleError: If the entry resolves to one of its ancestors.
    """
    identity = resolve_identity(entry.path)
    if identity in ancestors:
        raise SymlinkCycleError(
            entry.path,
            f"Symlink cycle detected (points back to '{identity}')",
        )
    return identity
