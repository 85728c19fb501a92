"""In-memory model of a mind map document.

A :class:`MindMapDocument` is validated once, when it is built: node ids must
be unique across the whole document and the node graph must be a tree. The
validation pass also builds an id-indexed arena (``document.index``) that the
layout, the renderer and the selection manager look nodes up in.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from config.sample_mindmaps import SAMPLE_MINDMAP

logger = logging.getLogger("mindmap_genius.tree")

# Deepest level accepted, counted in edges from a root.
MAX_TREE_DEPTH = 1000


class MindMapError(Exception):
    """Base class for mind map errors."""


class InvalidTree(MindMapError, ValueError):
    """The document is not a tree with unique node ids."""


class UnknownSelection(MindMapError, KeyError):
    """A node id that is not part of the current document."""


@dataclass
class MindMapNode:
    id: str
    text: str
    children: List["MindMapNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class NodeRecord:
    """Position of one node inside its document."""

    node: MindMapNode
    parent_id: Optional[str]
    level: int
    sibling_index: int
    sibling_count: int


def _check_node(node: Any) -> None:
    if not isinstance(node, MindMapNode):
        raise InvalidTree(f"expected MindMapNode, got {type(node).__name__}")
    if not isinstance(node.id, str) or not node.id:
        raise InvalidTree(f"node id must be a non-empty string, got {node.id!r}")
    if not isinstance(node.text, str):
        raise InvalidTree(f"text of node {node.id!r} must be a string")


def _build_index(roots: List[MindMapNode]) -> Dict[str, NodeRecord]:
    """Walk the roots depth-first and index every node by id.

    The walk keeps the set of node objects on the current root-to-node path:
    meeting one of them again means the node is its own ancestor. Meeting an
    object that was already indexed elsewhere means the same node is used
    twice, which is reported as a duplicate id.
    """
    index: Dict[str, NodeRecord] = {}
    seen = set()
    on_path = set()
    # (node, parent_id, level, sibling_index, sibling_count, leaving)
    stack: List[Tuple[MindMapNode, Optional[str], int, int, int, bool]] = []
    for position in reversed(range(len(roots))):
        stack.append((roots[position], None, 0, position, len(roots), False))

    while stack:
        node, parent_id, level, sibling_index, sibling_count, leaving = stack.pop()
        key = id(node)
        if leaving:
            on_path.discard(key)
            continue
        _check_node(node)
        if key in on_path:
            raise InvalidTree(f"cycle detected: node {node.id!r} is its own ancestor")
        if key in seen or node.id in index:
            raise InvalidTree(f"duplicate node id {node.id!r}")
        if level > MAX_TREE_DEPTH:
            raise InvalidTree(f"tree deeper than {MAX_TREE_DEPTH} levels")

        seen.add(key)
        on_path.add(key)
        index[node.id] = NodeRecord(node, parent_id, level, sibling_index, sibling_count)

        stack.append((node, parent_id, level, sibling_index, sibling_count, True))
        children = node.children
        for position in reversed(range(len(children))):
            stack.append((children[position], node.id, level + 1, position, len(children), False))
    return index


def _node_from_dict(data: Any) -> MindMapNode:
    if not isinstance(data, dict):
        raise InvalidTree(f"node must be a mapping, got {type(data).__name__}")
    return MindMapNode(id=data.get("id"), text=data.get("text", ""))


def _tree_from_dict(data: Any) -> MindMapNode:
    root = _node_from_dict(data)
    stack = [(data, root, 0)]
    while stack:
        raw, node, level = stack.pop()
        raw_children = raw.get("children") or []
        if not isinstance(raw_children, list):
            raise InvalidTree(f"children of node {node.id!r} must be a list")
        if raw_children and level >= MAX_TREE_DEPTH:
            raise InvalidTree(f"tree deeper than {MAX_TREE_DEPTH} levels")
        for raw_child in raw_children:
            child = _node_from_dict(raw_child)
            node.children.append(child)
            stack.append((raw_child, child, level + 1))
    return root


def _tree_to_dict(node: MindMapNode) -> Dict[str, Any]:
    out: Dict[str, Any] = {"id": node.id, "text": node.text, "children": []}
    stack = [(node, out)]
    while stack:
        current, target = stack.pop()
        for child in current.children:
            child_out = {"id": child.id, "text": child.text, "children": []}
            target["children"].append(child_out)
            stack.append((child, child_out))
    return out


@dataclass
class MindMapDocument:
    """A titled, validated forest of mind map nodes.

    Raises :class:`InvalidTree` on construction if a node id repeats or a
    node is its own ancestor.
    """

    title: str
    roots: List[MindMapNode] = field(default_factory=list)
    index: Dict[str, NodeRecord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.roots = list(self.roots)
        self.index = _build_index(self.roots)

    @property
    def is_empty(self) -> bool:
        return not self.roots

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.index

    def get_node(self, node_id: str) -> MindMapNode:
        try:
            return self.index[node_id].node
        except KeyError:
            raise UnknownSelection(node_id) from None

    def iter_nodes(self) -> Iterator[MindMapNode]:
        """Yield every node in pre-order (roots first, children in order)."""
        for record in self.index.values():
            yield record.node

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MindMapDocument":
        if not isinstance(data, dict):
            raise InvalidTree(f"document must be a mapping, got {type(data).__name__}")
        raw_roots = data.get("nodes")
        if raw_roots is None:
            raw_roots = data.get("roots") or []
        if not isinstance(raw_roots, list):
            raise InvalidTree(f"document nodes must be a list, got {type(raw_roots).__name__}")
        roots = [_tree_from_dict(raw) for raw in raw_roots]
        return cls(title=str(data.get("title", "")), roots=roots)

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "nodes": [_tree_to_dict(root) for root in self.roots]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)


def count_nodes(document: MindMapDocument) -> int:
    """Return the total number of nodes over all roots."""
    return len(document.index)


def depth(document: MindMapDocument) -> int:
    """Return the longest root-to-leaf path, counted in edges."""
    return max((record.level for record in document.index.values()), default=0)


def sample_document() -> MindMapDocument:
    """Return a fresh copy of the built-in sample mind map."""
    return MindMapDocument.from_dict(SAMPLE_MINDMAP)


def load_document(payload: Any = None) -> MindMapDocument:
    """Turn whatever the generation step handed over into a document.

    ``None`` and invalid payloads give the sample document instead.
    """
    if payload is None:
        logger.info("No mind map supplied, using the sample document")
        return sample_document()
    if isinstance(payload, MindMapDocument):
        return payload
    try:
        document = MindMapDocument.from_dict(payload)
    except InvalidTree as exc:
        logger.warning("Rejected mind map document (%s), using the sample document", exc)
        return sample_document()
    logger.info("Loaded mind map %r with %d nodes", document.title, count_nodes(document))
    return document


__all__ = [
    "MAX_TREE_DEPTH",
    "MindMapError",
    "InvalidTree",
    "UnknownSelection",
    "MindMapNode",
    "NodeRecord",
    "MindMapDocument",
    "count_nodes",
    "depth",
    "sample_document",
    "load_document",
]
