from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A sample documentation tree shared by unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """
    Create a small documentation tree.

    Structure:
    /docs
      index.md            (excluded)
      .DS_Store           (excluded)
      guide.md            (front-matter: title, order)
      broken.md           (unterminated front-matter)
      /vue
        index.md          (excluded)
        basics.md         (front-matter: title, tags)
        advanced.md       (no front-matter)
      /nav
        links.md
    """
    root = tmp_path / "docs"
    root.mkdir()

    (root / "index.md").write_text("# Home\n", encoding="utf-8")
    (root / ".DS_Store").write_bytes(b"\x00\x01")
    (root / "guide.md").write_text(
        "---\ntitle: Guide\norder: 1\n---\n# Guide\n", encoding="utf-8"
    )
    (root / "broken.md").write_text(
        "---\ntitle: Broken\nno closing marker here\n", encoding="utf-8"
    )

    vue = root / "vue"
    vue.mkdir()
    (vue / "index.md").write_text("# Vue\n", encoding="utf-8")
    (vue / "basics.md").write_text(
        "---\ntitle: Basics\ntags:\n  - vue\n  - intro\n---\nBody\n", encoding="utf-8"
    )
    (vue / "advanced.md").write_text("# Advanced\n", encoding="utf-8")

    nav = root / "nav"
    nav.mkdir()
    (nav / "links.md").write_text("# Links\n", encoding="utf-8")

    return root


@pytest.fixture
def mock_config_dict(docs_root: Path, tmp_path: Path) -> Dict[str, Any]:
    """
    Return a complete configuration dictionary pointing at docs_root.

    Mirrors the keys defined in 'docsindex.domain.config'.
    """
    return {
        "input_path": str(docs_root),
        "output_path": str(tmp_path / "out" / "docsTree.json"),
        "base_dir": "",
        "mode": "full",
        "link_prefix": "/docs/",
        "encode_links": True,
        "markdown_extensions": [".md"],
        "sort_entries": True,
        "workers": 1,
        "exclude_names": ["index.md", ".DS_Store"],
        "exclude_patterns": [],
        "print_tree": False,
        "nav_output_path": "",
        "reserved_nav_titles": ["nav"],
    }
