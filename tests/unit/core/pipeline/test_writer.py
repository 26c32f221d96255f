from __future__ import annotations

"""
Unit tests for the index serializer.

Verifies the JSON layout, overwrite semantics and fatal write failures.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from docsindex.core.analysis.tree_builder import build_tree
from docsindex.core.pipeline.writer import serialize_json, serialize_tree, write_json, write_tree
from docsindex.domain.errors import IndexWriteError
from docsindex.domain.tree_models import TreeNode

NODES = [
    TreeNode(title="前端", link="/docs/%E5%89%8D%E7%AB%AF", items=[
        TreeNode(title="basics", link="/docs/%E5%89%8D%E7%AB%AF/basics",
                 metadata={"title": "Basics"}, fileExtension=".md"),
    ]),
]


def test_serialize_json_layout() -> None:
    text = serialize_json([{"title": "a"}])

    assert text == '[\n  {\n    "title": "a"\n  }\n]\n'


def test_serialize_tree_keeps_unicode_and_key_order() -> None:
    text = serialize_tree(NODES)

    assert '"title": "前端"' in text
    payload = json.loads(text)
    assert list(payload[0].keys()) == ["title", "link", "items"]
    assert list(payload[0]["items"][0].keys()) == ["title", "link", "metadata", "fileExtension"]


def test_write_tree_creates_parents_and_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out" / "docsTree.json"

    write_tree(NODES, str(target))
    first = target.read_bytes()
    write_tree([], str(target))

    assert json.loads(first.decode("utf-8"))[0]["title"] == "前端"
    assert target.read_text(encoding="utf-8") == "[]\n"


def test_write_json_wraps_os_errors(tmp_path: Path) -> None:
    target = tmp_path / "docsTree.json"

    with patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(IndexWriteError) as exc:
            write_json([], str(target))

    assert exc.value.path == str(target)
    assert isinstance(exc.value.cause, PermissionError)


def test_write_json_into_file_parent_fails(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(IndexWriteError):
        write_json([], str(blocker / "docsTree.json"))


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_serialize_json_rejects_non_finite_numbers(value: float) -> None:
    with pytest.raises(ValueError):
        serialize_json([{"title": "a", "metadata": {"weight": value}}])


def test_serialized_tree_is_strict_json(tmp_path: Path) -> None:
    page = tmp_path / "f.md"
    page.write_text("---\nweight: .inf\nratio: .nan\n---\n", encoding="utf-8")

    text = serialize_tree(build_tree(str(tmp_path)))

    def _reject(token: str) -> None:
        raise ValueError(token)

    payload = json.loads(text, parse_constant=_reject)
    assert payload[0]["metadata"] == {"weight": "inf", "ratio": "nan"}
