"""Radial layout of mind map documents.

Roots sit on the center point. Every other node sits on the ring for its
level, fanned out around the angle of its parent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

from .mindmap_tree import MindMapDocument, MindMapNode


@dataclass(frozen=True)
class LayoutConfig:
    center_x: float = 300.0
    center_y: float = 200.0
    base_radius: float = 100.0
    ring_spacing: float = 80.0
    angular_span: float = math.pi

    @classmethod
    def from_config(cls, section: Optional[Dict[str, Any]]) -> "LayoutConfig":
        """Build from the ``layout`` section of the YAML config."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: float(v) for k, v in (section or {}).items() if k in names})


DEFAULT_LAYOUT = LayoutConfig()


@dataclass(frozen=True)
class Position:
    x: float
    y: float
    angle: float
    radius: float


@dataclass(frozen=True)
class PlacedNode:
    node: MindMapNode
    position: Position
    level: int
    parent_id: Optional[str]
    sibling_index: int


def ring_radius(level: int, config: LayoutConfig = DEFAULT_LAYOUT) -> float:
    """Radius of the ring holding the nodes of ``level`` (0 for roots)."""
    if level == 0:
        return 0.0
    return config.base_radius + level * config.ring_spacing


def layout(
    node: MindMapNode,
    level: int,
    center_angle: float,
    angular_span: float,
    sibling_index: int,
    sibling_count: int,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Position:
    """Place one node.

    The resolved angle is returned for roots too: their children fan out
    around it even though the root itself is pinned to the center.
    """
    slot = angular_span / max(sibling_count, 3)
    angle = center_angle + (sibling_index - (sibling_count - 1) / 2) * slot
    if level == 0:
        return Position(config.center_x, config.center_y, angle, 0.0)
    radius = ring_radius(level, config)
    return Position(
        config.center_x + math.cos(angle) * radius,
        config.center_y + math.sin(angle) * radius,
        angle,
        radius,
    )


def layout_document(
    document: MindMapDocument, config: LayoutConfig = DEFAULT_LAYOUT
) -> List[PlacedNode]:
    """Lay out every node of ``document`` in pre-order.

    Each root is laid out alone (one sibling, its index in ``roots``), so
    they all share the center point.
    """
    placed: List[PlacedNode] = []
    stack = []
    for index in reversed(range(len(document.roots))):
        stack.append((document.roots[index], 0, 0.0, index, 1, None))

    while stack:
        node, level, center_angle, sibling_index, sibling_count, parent_id = stack.pop()
        position = layout(
            node, level, center_angle, config.angular_span, sibling_index, sibling_count, config
        )
        placed.append(PlacedNode(node, position, level, parent_id, sibling_index))
        children = node.children
        for index in reversed(range(len(children))):
            stack.append((children[index], level + 1, position.angle, index, len(children), node.id))
    return placed


__all__ = [
    "LayoutConfig",
    "DEFAULT_LAYOUT",
    "Position",
    "PlacedNode",
    "ring_radius",
    "layout",
    "layout_document",
]
