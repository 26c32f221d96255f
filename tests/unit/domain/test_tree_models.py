from __future__ import annotations

"""
Unit tests for the documentation tree data models.

Verifies the JSON shape of file and directory nodes, the reverse mapping
from dictionaries, and the node counters.
"""

import pytest

from docsindex.domain.tree_models import (
    TreeNode,
    count_nodes,
    tree_from_dicts,
    tree_to_dicts,
)


def test_file_node_dict_omits_unset_fields() -> None:
    node = TreeNode(title="basics", link="/docs/vue/basics", fileExtension=".md")

    assert node.to_dict() == {
        "title": "basics",
        "link": "/docs/vue/basics",
        "fileExtension": ".md",
    }
    assert not node.is_dir
    assert node.name == "basics.md"


def test_directory_node_dict_has_items_and_no_extension() -> None:
    child = TreeNode(title="a", link="/docs/x/a", metadata={"title": "A"}, fileExtension=".md")
    node = TreeNode(title="x", link="/docs/x", items=[child])

    data = node.to_dict()

    assert list(data.keys()) == ["title", "link", "items"]
    assert data["items"][0]["metadata"] == {"title": "A"}
    assert node.is_dir
    assert node.name == "x"


def test_empty_directory_keeps_items_key() -> None:
    assert TreeNode(title="empty", items=[]).to_dict() == {"title": "empty", "items": []}


def test_tree_dict_conversion_preserves_structure() -> None:
    tree = [
        TreeNode(title="vue", link="/docs/vue", items=[
            TreeNode(title="basics", link="/docs/vue/basics", fileExtension=".md"),
        ]),
        TreeNode(title="guide", link="/docs/guide", fileExtension=".md"),
    ]

    assert tree_from_dicts(tree_to_dicts(tree)) == tree


def test_tree_from_dicts_rejects_invalid_payloads() -> None:
    with pytest.raises(ValueError):
        tree_from_dicts({"title": "not a list"})  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        tree_from_dicts([{"link": "/docs/missing-title"}])


def test_count_nodes_walks_all_levels() -> None:
    tree = [
        TreeNode(title="a", items=[
            TreeNode(title="b", items=[TreeNode(title="c", fileExtension=".md")]),
            TreeNode(title="d", fileExtension=".md"),
        ]),
        TreeNode(title="e", fileExtension=""),
    ]

    assert count_nodes(tree) == (2, 3)
