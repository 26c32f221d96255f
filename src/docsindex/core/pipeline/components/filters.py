from __future__ import annotations

"""
Entry Exclusion Engine.

Decides which directory entries are left out of the documentation tree:
index pages (they feed their parent's page) and OS artifacts are always
skipped; user-supplied names and regular expressions extend those rules.
"""

import re
from typing import Iterable, List

from docsindex.domain.constants import (
    ARTIFACT_FILE_NAMES,
    DEFAULT_EXCLUDE_PATTERNS,
    INDEX_FILE_NAMES,
)

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_exclude_names() -> List[str]:
    """
    Get the exact entry names that never become tree nodes.

    Returns:
        List[str]: Index page and OS artifact file names.
    """
    return list(INDEX_FILE_NAMES) + list(ARTIFACT_FILE_NAMES)


def default_exclude_patterns() -> List[str]:
    """
    Get the default exclusion regexes.

    Covers AppleDouble files, editor backups and swap files, plus tool
    directories that live next to the documentation sources.

    Returns:
        List[str]: Regex patterns for common exclusions.
    """
    return list(DEFAULT_EXCLUDE_PATTERNS)

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are discarded rather than aborting the scan.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    Verify if a name matches at least one compiled regex pattern.
    """
    return any(rx.search(name) for rx in compiled_patterns)


def is_excluded(name: str, exclude_names: Iterable[str], exclude_rx: List[re.Pattern]) -> bool:
    """
    Check whether a directory entry should be left out of the tree.

    Args:
        name: Entry name (no directory component).
        exclude_names: Exact names to skip.
        exclude_rx: Compiled exclusion regexes.

    Returns:
        bool: True if the entry is excluded.
    """
    if name in exclude_names:
        return True
    return matches_any(name, exclude_rx)
