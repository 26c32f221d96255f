from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed names, prefixes and defaults shared by the indexer,
the navigation builder and the configuration layer.
"""

from typing import List

DEFAULT_INPUT_DIR = "docs"
DEFAULT_OUTPUT_FILE = "docs/.vitepress/docsTree.json"
DEFAULT_LINK_PREFIX = "/docs/"

TREE_MODES = ("full", "minimal")

MARKDOWN_EXTENSIONS: List[str] = [".md", ".markdown"]

# Files that only feed their parent's page, plus OS-generated artifacts
INDEX_FILE_NAMES: List[str] = ["index.md"]
ARTIFACT_FILE_NAMES: List[str] = [".DS_Store", "Thumbs.db", "desktop.ini"]

# -----------------------------------------------------------------------------
# NAVIGATION
# -----------------------------------------------------------------------------

RESERVED_NAV_TITLES: List[str] = ["nav"]
NAV_ACTIVE_MATCH = "/docs/"
NAV_QUERY_PARAM = "name"

# -----------------------------------------------------------------------------
# FILTERING
# -----------------------------------------------------------------------------

# AppleDouble files, editor backups, swap files and tool directories
DEFAULT_EXCLUDE_PATTERNS: List[str] = [
    r"^\._",
    r"~$",
    r"\.swp$",
    r"^(\.git|\.vitepress|node_modules)$",
]
