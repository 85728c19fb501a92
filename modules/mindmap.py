from __future__ import annotations

"""Draw a laid-out mind map as a Plotly figure and export it."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import networkx as nx
import plotly.graph_objects as go

from core.mindmap_tree import MindMapDocument
from core.radial_layout import PlacedNode
from core.selection import UNSELECTED, SelectionState
from modules.mindmap_animation import DEFAULT_ANIMATION, AnimationConfig, RevealScheduler

logger = logging.getLogger("mindmap_genius.render")

ELLIPSIS = "…"

# Trace order in the figure; click events report the curve number.
EDGE_TRACE, NODE_TRACE, LABEL_TRACE = 0, 1, 2


@dataclass(frozen=True)
class RenderConfig:
    canvas_width: float = 600.0
    canvas_height: float = 400.0
    root_radius: float = 30.0
    node_radius: float = 20.0
    hover_scale: float = 1.1
    label_max_length: int = 15
    label_offset: float = 50.0
    selected_color: str = "#7c3aed"
    default_color: str = "#c4b5fd"
    stroke_color: str = "#7c3aed"
    edge_opacity: float = 0.6

    @classmethod
    def from_config(cls, section: Optional[Dict[str, Any]]) -> "RenderConfig":
        """Build from the ``render`` section of the YAML config."""
        defaults = {f.name: f.default for f in fields(cls)}
        values = {k: type(defaults[k])(v) for k, v in (section or {}).items() if k in defaults}
        return cls(**values)


DEFAULT_RENDER = RenderConfig()


@dataclass(frozen=True)
class EdgeShape:
    child_id: str
    parent_id: str
    x0: float
    y0: float
    x1: float
    y1: float


@dataclass(frozen=True)
class NodeCircle:
    node_id: str
    x: float
    y: float
    radius: float
    fill: str
    selected: bool
    hovered: bool
    delay: float


@dataclass(frozen=True)
class NodeLabel:
    node_id: str
    text: str
    full_text: str
    x: float
    y: float
    delay: float


@dataclass(frozen=True)
class MindMapScene:
    edges: List[EdgeShape]
    circles: List[NodeCircle]
    labels: List[NodeLabel]

    @property
    def node_ids(self) -> List[str]:
        return [circle.node_id for circle in self.circles]

    @property
    def duration(self) -> float:
        return max((label.delay for label in self.labels), default=0.0)


def truncate_label(text: str, max_length: int = 15) -> str:
    """Return ``text`` cut to ``max_length`` characters plus an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def node_radius(level: int, config: RenderConfig = DEFAULT_RENDER) -> float:
    return config.root_radius if level == 0 else config.node_radius


def render_scene(
    placed: Sequence[PlacedNode],
    selection: SelectionState = UNSELECTED,
    hovered_id: Optional[str] = None,
    config: RenderConfig = DEFAULT_RENDER,
    animation: AnimationConfig = DEFAULT_ANIMATION,
) -> MindMapScene:
    """Turn layout output into edges, circles and labels.

    Edges run from each non-root node to its parent. Fill reflects the
    selection, size reflects the level and hover.
    """
    positions = {item.node.id: item.position for item in placed}
    scheduler = RevealScheduler(placed, animation)
    edges: List[EdgeShape] = []
    circles: List[NodeCircle] = []
    labels: List[NodeLabel] = []

    for item in placed:
        node_id = item.node.id
        pos = item.position
        delay = scheduler.delay_for(node_id)
        if item.parent_id is not None:
            parent = positions[item.parent_id]
            edges.append(EdgeShape(node_id, item.parent_id, pos.x, pos.y, parent.x, parent.y))

        selected = selection.node_id == node_id
        hovered = hovered_id == node_id
        radius = node_radius(item.level, config)
        if hovered:
            radius *= config.hover_scale
        circles.append(NodeCircle(
            node_id=node_id,
            x=pos.x,
            y=pos.y,
            radius=radius,
            fill=config.selected_color if selected else config.default_color,
            selected=selected,
            hovered=hovered,
            delay=delay,
        ))
        labels.append(NodeLabel(
            node_id=node_id,
            text=truncate_label(item.node.text, config.label_max_length),
            full_text=item.node.text,
            x=pos.x,
            y=pos.y + config.label_offset,
            delay=delay + animation.label_lag,
        ))
    return MindMapScene(edges, circles, labels)


def _edge_trace(edges: Sequence[EdgeShape], config: RenderConfig) -> go.Scatter:
    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    for edge in edges:
        xs += [edge.x0, edge.x1, None]
        ys += [edge.y0, edge.y1, None]
    return go.Scatter(
        x=xs,
        y=ys,
        mode="lines",
        line=dict(color=config.stroke_color, width=2),
        opacity=config.edge_opacity,
        hoverinfo="skip",
        name="edges",
    )


def _node_trace(
    circles: Sequence[NodeCircle], config: RenderConfig, hovertext: Optional[List[str]] = None
) -> go.Scatter:
    return go.Scatter(
        x=[c.x for c in circles],
        y=[c.y for c in circles],
        mode="markers",
        marker=dict(
            size=[2 * c.radius for c in circles],
            color=[c.fill for c in circles],
            line=dict(color=config.stroke_color, width=2),
        ),
        customdata=[c.node_id for c in circles],
        hovertext=hovertext,
        hoverinfo="text" if hovertext else "none",
        name="nodes",
    )


def _label_trace(labels: Sequence[NodeLabel]) -> go.Scatter:
    return go.Scatter(
        x=[label.x for label in labels],
        y=[label.y for label in labels],
        mode="text",
        text=[label.text for label in labels],
        textposition="middle center",
        hoverinfo="skip",
        name="labels",
    )


def _traces(scene: MindMapScene, config: RenderConfig) -> List[go.Scatter]:
    hovertext = [label.full_text for label in scene.labels]
    return [
        _edge_trace(scene.edges, config),
        _node_trace(scene.circles, config, hovertext),
        _label_trace(scene.labels),
    ]


def _reveal_frames(
    scene: MindMapScene, config: RenderConfig, animation: AnimationConfig, tick: float
) -> List[go.Frame]:
    scheduler = RevealScheduler.from_delays(
        ((c.node_id, c.delay) for c in scene.circles), animation
    )
    full_text = {label.node_id: label.full_text for label in scene.labels}
    frames: List[go.Frame] = []
    steps = int(round(scheduler.duration / tick)) if tick > 0 else 0
    for step in range(steps + 1):
        t = step * tick
        nodes = scheduler.visible_at(t)
        labels = scheduler.labels_visible_at(t)
        circles = [c for c in scene.circles if c.node_id in nodes]
        frames.append(go.Frame(
            name=f"{t:.2f}",
            data=[
                _edge_trace([e for e in scene.edges if e.child_id in nodes], config),
                _node_trace(circles, config, [full_text[c.node_id] for c in circles]),
                _label_trace([label for label in scene.labels if label.node_id in labels]),
            ],
        ))
    return frames


def build_mindmap_figure(
    scene: MindMapScene,
    config: RenderConfig = DEFAULT_RENDER,
    animate: bool = False,
    animation: AnimationConfig = DEFAULT_ANIMATION,
) -> go.Figure:
    """Return a Plotly figure for the scene.

    The initial data always holds every node so they can be clicked right
    away. With ``animate`` the figure also gets the entrance frames and a
    play button.
    """
    fig = go.Figure(data=_traces(scene, config))
    fig.update_layout(
        showlegend=False,
        clickmode="event+select",
        dragmode=False,
        height=int(config.canvas_height * 1.5),
        margin=dict(l=10, r=10, t=10, b=10),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    fig.update_xaxes(visible=False, range=[0, config.canvas_width])
    # SVG-style coordinates: y grows downwards so labels sit below nodes
    fig.update_yaxes(visible=False, range=[config.canvas_height, 0], scaleanchor="x")

    if animate and scene.circles:
        tick = min(animation.level_delay, animation.sibling_delay) or animation.level_delay
        fig.frames = _reveal_frames(scene, config, animation, tick)
        fig.update_layout(updatemenus=[dict(
            type="buttons",
            showactive=False,
            buttons=[dict(
                label="Replay",
                method="animate",
                args=[None, {
                    "frame": {"duration": int(tick * 1000), "redraw": True},
                    "fromcurrent": False,
                    "transition": {"duration": 0},
                }],
            )],
        )])
    return fig


def node_id_from_point(point: Dict[str, Any], scene: MindMapScene) -> Optional[str]:
    """Return the node id behind a Plotly selection point, if any."""
    ids = set(scene.node_ids)
    customdata = point.get("customdata")
    if isinstance(customdata, (list, tuple)):
        customdata = customdata[0] if customdata else None
    if isinstance(customdata, str) and customdata in ids:
        return customdata
    if point.get("curve_number") != NODE_TRACE:
        return None
    index = point.get("point_index", point.get("point_number"))
    if isinstance(index, int) and 0 <= index < len(scene.circles):
        return scene.circles[index].node_id
    return None


def build_mindmap_graph(document: MindMapDocument) -> nx.DiGraph:
    """Return a NetworkX graph with one parent -> child edge per link."""
    g = nx.DiGraph(title=document.title)
    for node_id, record in document.index.items():
        g.add_node(node_id, text=record.node.text, level=record.level)
        if record.parent_id is not None:
            g.add_edge(record.parent_id, node_id)
    return g


def export_mindmap_graphml(graph: nx.DiGraph, path: str = "mindmap.graphml") -> str:
    """Export the mind map to GraphML format."""
    nx.write_graphml(graph, path)
    logger.info("Exported GraphML to %s", path)
    return str(Path(path))


def export_mindmap_html(fig: go.Figure, path: str = "mindmap.html") -> str:
    """Export the mind map figure to an HTML file."""
    fig.write_html(path)
    logger.info("Exported HTML to %s", path)
    return str(Path(path))


def export_document_json(document: MindMapDocument, path: str = "mindmap.json") -> str:
    """Save the mind map itself as JSON."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(document.to_json())
    logger.info("Exported document JSON to %s", path)
    return str(Path(path))


__all__ = [
    "ELLIPSIS",
    "RenderConfig",
    "DEFAULT_RENDER",
    "EdgeShape",
    "NodeCircle",
    "NodeLabel",
    "MindMapScene",
    "truncate_label",
    "node_radius",
    "render_scene",
    "build_mindmap_figure",
    "node_id_from_point",
    "build_mindmap_graph",
    "export_mindmap_graphml",
    "export_mindmap_html",
    "export_document_json",
]
