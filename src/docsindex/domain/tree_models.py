from __future__ import annotations

"""
Documentation Tree Data Models.

Provides the recursive node type used to describe a documentation folder,
together with the conversion helpers that map it to and from the JSON
payload consumed by the site navigation.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# METADATA VALUE TYPES
# -----------------------------------------------------------------------------

MetadataScalar = Union[str, int, float, bool, None]
MetadataValue = Union[MetadataScalar, List["MetadataValue"], Dict[str, "MetadataValue"]]
Metadata = Dict[str, MetadataValue]

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    One filesystem entry (file or directory) of the documentation index.

    Attributes:
        title: Entry name without its extension (directories keep the bare name).
        link: Site-relative URL derived from the entry path.
        metadata: Parsed front-matter mapping (markdown files only).
        fileExtension: Extension including the dot (file entries only).
        items: Ordered children (directory entries only).
    """
    title: str
    link: Optional[str] = None
    metadata: Optional[Metadata] = None
    fileExtension: Optional[str] = None
    items: Optional[List["TreeNode"]] = None

    @property
    def is_dir(self) -> bool:
        return self.items is not None

    @property
    def name(self) -> str:
        """Original entry name (title plus extension when known)."""
        return self.title + (self.fileExtension or "")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the node into a JSON-ready dictionary.

        Unset fields are omitted so that directory and file entries keep
        their distinct shapes in the serialized index.
        """
        out: Dict[str, Any] = {"title": self.title}
        if self.link is not None:
            out["link"] = self.link
        if self.metadata is not None:
            out["metadata"] = self.metadata
        if self.fileExtension is not None:
            out["fileExtension"] = self.fileExtension
        if self.items is not None:
            out["items"] = [child.to_dict() for child in self.items]
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TreeNode":
        if not isinstance(data, dict) or "title" not in data:
            raise ValueError(f"Invalid tree node payload: {data!r}")
        raw_items = data.get("items")
        items = [cls.from_dict(child) for child in raw_items] if raw_items is not None else None
        return cls(
            title=str(data["title"]),
            link=data.get("link"),
            metadata=data.get("metadata"),
            fileExtension=data.get("fileExtension"),
            items=items,
        )

# -----------------------------------------------------------------------------
# TREE HELPERS
# -----------------------------------------------------------------------------

def tree_to_dicts(nodes: List[TreeNode]) -> List[Dict[str, Any]]:
    return [node.to_dict() for node in nodes]


def tree_from_dicts(data: List[Dict[str, Any]]) -> List[TreeNode]:
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of tree nodes, received {type(data).__name__}.")
    return [TreeNode.from_dict(item) for item in data]


def count_nodes(nodes: List[TreeNode]) -> Tuple[int, int]:
    """
    Count directory and file nodes across the whole tree.

    Returns:
        Tuple[int, int]: (directories, files).
    """
    directories = 0
    files = 0
    stack = list(nodes)
    while stack:
        node = stack.pop()
        if node.is_dir:
            directories += 1
            stack.extend(node.items or [])
        else:
            files += 1
    return directories, files
