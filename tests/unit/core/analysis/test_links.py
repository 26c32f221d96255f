from __future__ import annotations

"""
Unit tests for the site link generator.
"""

import os
from pathlib import Path

import pytest

from docsindex.core.analysis.links import generate_link, normalize_prefix, strip_extension


def test_strip_extension_only_drops_last_suffix() -> None:
    assert strip_extension("basics.md") == "basics"
    assert strip_extension("v1.2.notes.md") == "v1.2.notes"
    assert strip_extension("README") == "README"


@pytest.mark.parametrize("raw, expected", [
    ("/docs/", "/docs/"),
    ("docs", "/docs/"),
    ("/docs", "/docs/"),
    ("", "/"),
    ("/", "/"),
    ("/site/docs/", "/site/docs/"),
])
def test_normalize_prefix(raw: str, expected: str) -> None:
    assert normalize_prefix(raw) == expected


def test_nested_file_link_is_prefixed_and_stripped(tmp_path: Path) -> None:
    path = os.path.join(str(tmp_path), "vue", "basics.md")
    assert generate_link(str(tmp_path), path) == "/docs/vue/basics"


def test_root_level_file_link(tmp_path: Path) -> None:
    path = os.path.join(str(tmp_path), "guide.md")
    assert generate_link(str(tmp_path), path) == "/docs/guide"


def test_prefix_not_duplicated_when_path_starts_with_it(tmp_path: Path) -> None:
    path = os.path.join(str(tmp_path), "docs", "vue", "basics.md")
    assert generate_link(str(tmp_path), path) == "/docs/vue/basics"


def test_prefix_match_is_segment_based(tmp_path: Path) -> None:
    path = os.path.join(str(tmp_path), "docsets", "a.md")
    assert generate_link(str(tmp_path), path) == "/docs/docsets/a"


def test_directory_link_keeps_dotted_names(tmp_path: Path) -> None:
    path = os.path.join(str(tmp_path), "v1.2")
    assert generate_link(str(tmp_path), path, strip_ext=False) == "/docs/v1.2"


def test_encoding_policy(tmp_path: Path) -> None:
    path = os.path.join(str(tmp_path), "前端", "my page.md")

    assert generate_link(str(tmp_path), path) == "/docs/%E5%89%8D%E7%AB%AF/my%20page"
    assert generate_link(str(tmp_path), path, encode=False) == "/docs/前端/my page"


def test_custom_prefix(tmp_path: Path) -> None:
    path = os.path.join(str(tmp_path), "a", "b.md")
    assert generate_link(str(tmp_path), path, prefix="guide") == "/guide/a/b"
    assert generate_link(str(tmp_path), path, prefix="") == "/a/b"


def test_path_outside_base_is_rejected(tmp_path: Path) -> None:
    base = tmp_path / "docs"
    base.mkdir()
    with pytest.raises(ValueError):
        generate_link(str(base), str(tmp_path / "other.md"))
