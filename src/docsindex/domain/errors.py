from __future__ import annotations

"""
Indexer Error Taxonomy.

Fatal failures derive from IndexBuildError and abort the whole run.
Per-file problems are recorded as MetadataWarning entries and never raised.
"""

from dataclasses import dataclass
from typing import Optional

# -----------------------------------------------------------------------------
# FATAL ERRORS
# -----------------------------------------------------------------------------

class IndexBuildError(Exception):
    """Build-aborting failure tied to a filesystem path."""

    def __init__(self, path: str, reason: str, cause: Optional[BaseException] = None):
        self.path = path
        self.reason = reason
        self.cause = cause
        super().__init__(f"{reason}: {path}")


class DirectoryReadError(IndexBuildError):
    """A directory listing could not be obtained."""


class SymlinkCycleError(IndexBuildError):
    """A directory symlink points back to one of its own ancestors."""


class IndexWriteError(IndexBuildError):
    """The serialized index could not be written to disk."""

# -----------------------------------------------------------------------------
# RECOVERABLE ERRORS
# -----------------------------------------------------------------------------

class FrontMatterError(ValueError):
    """Malformed front-matter block."""


@dataclass(frozen=True)
class MetadataWarning:
    """
    Per-file metadata extraction failure.

    Attributes:
        rel_path: File path identifier relative to the documentation root.
        error: Descriptive exception or error message.
    """
    rel_path: str
    error: str
