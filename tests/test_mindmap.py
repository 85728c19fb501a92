import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import json

import pytest

from core.mindmap_tree import MindMapDocument, MindMapNode, sample_document
from core.radial_layout import layout_document
from core.selection import SelectionState
from modules.mindmap_animation import RevealScheduler
from modules.mindmap import (
    DEFAULT_RENDER,
    LABEL_TRACE,
    NODE_TRACE,
    RenderConfig,
    build_mindmap_figure,
    build_mindmap_graph,
    export_document_json,
    export_mindmap_graphml,
    export_mindmap_html,
    node_id_from_point,
    render_scene,
    truncate_label,
)


def _sample_scene(**kwargs):
    return render_scene(layout_document(sample_document()), **kwargs)


@pytest.mark.parametrize("text", ["", "Leaf A", "exactly 15 char"])
def test_short_labels_are_kept(text):
    assert len(text) <= 15
    assert truncate_label(text) == text


def test_long_labels_are_truncated_with_ellipsis():
    text = "Supporting Idea A"
    assert truncate_label(text) == "Supporting Idea…"
    assert truncate_label("x" * 100) == "x" * 15 + "…"


def test_one_edge_per_non_root_node_towards_parent():
    scene = _sample_scene()
    assert len(scene.edges) == 5
    positions = {c.node_id: (c.x, c.y) for c in scene.circles}
    for edge in scene.edges:
        assert (edge.x0, edge.y0) == positions[edge.child_id]
        assert (edge.x1, edge.y1) == positions[edge.parent_id]
    leaf = next(e for e in scene.edges if e.child_id == "1.1")
    assert leaf.parent_id == "1"


def test_circle_sizes_and_default_fill():
    scene = _sample_scene()
    radii = {c.node_id: c.radius for c in scene.circles}
    assert radii["root"] == 30
    assert radii["1"] == 20 and radii["2.1"] == 20
    assert all(c.fill == DEFAULT_RENDER.default_color for c in scene.circles)


def test_selected_node_uses_selected_fill():
    scene = _sample_scene(selection=SelectionState("2"))
    selected = [c for c in scene.circles if c.selected]
    assert [c.node_id for c in selected] == ["2"]
    assert selected[0].fill == DEFAULT_RENDER.selected_color


def test_hovered_node_is_scaled_up():
    scene = _sample_scene(hovered_id="1")
    circle = next(c for c in scene.circles if c.node_id == "1")
    assert circle.radius == pytest.approx(22)
    assert circle.hovered
    assert not circle.selected


def test_labels_sit_below_nodes():
    scene = _sample_scene()
    for circle, label in zip(scene.circles, scene.labels):
        assert label.node_id == circle.node_id
        assert label.x == circle.x
        assert label.y == pytest.approx(circle.y + 50)


def test_entrance_delays():
    scene = _sample_scene()
    delays = {c.node_id: c.delay for c in scene.circles}
    assert delays["root"] == 0
    assert delays["2"] == pytest.approx(0.3)
    assert delays["1.2"] == pytest.approx(0.5)
    root_label = scene.labels[0]
    assert root_label.delay == pytest.approx(0.2)


def test_single_root_scene_has_no_edges():
    doc = MindMapDocument("solo", [MindMapNode("root", "Root")])
    scene = render_scene(layout_document(doc))
    assert scene.edges == []
    assert len(scene.circles) == 1


def test_empty_scene():
    scene = render_scene(layout_document(MindMapDocument("empty", [])))
    assert scene.circles == [] and scene.edges == [] and scene.labels == []
    fig = build_mindmap_figure(scene, animate=True)
    assert len(fig.frames) == 0


def test_figure_traces_carry_node_ids():
    scene = _sample_scene(selection=SelectionState("1"))
    fig = build_mindmap_figure(scene)
    nodes = fig.data[NODE_TRACE]
    assert list(nodes.customdata) == ["root", "1", "1.1", "1.2", "2", "2.1"]
    assert list(fig.data[LABEL_TRACE].text)[0] == "Central Topic"
    assert list(fig.layout.yaxis.range) == [400, 0]
    assert len(fig.frames) == 0


def test_animated_figure_shows_everything_initially():
    scene = _sample_scene()
    fig = build_mindmap_figure(scene, animate=True)
    assert len(fig.data[NODE_TRACE].x) == 6
    assert len(fig.frames) == 8
    assert len(fig.frames[0].data[NODE_TRACE].x) == 1
    assert len(fig.frames[-1].data[NODE_TRACE].x) == 6


def test_animation_frames_follow_reveal_schedule():
    placed = layout_document(sample_document())
    scene = render_scene(placed)
    scheduler = RevealScheduler(placed)
    fig = build_mindmap_figure(scene, animate=True)
    for step, frame in enumerate(fig.frames):
        t = step * 0.1
        assert set(frame.data[NODE_TRACE].customdata) == scheduler.visible_at(t)
        assert len(frame.data[LABEL_TRACE].x) == len(scheduler.labels_visible_at(t))
    assert len(fig.frames[2].data[LABEL_TRACE].x) == 1


def test_animation_frames_keep_full_text_tooltips():
    doc = MindMapDocument("T", [MindMapNode("r", "A very long central topic", [MindMapNode("c", "Child")])])
    fig = build_mindmap_figure(render_scene(layout_document(doc)), animate=True)
    last = fig.frames[-1].data[NODE_TRACE]
    assert list(last.hovertext) == ["A very long central topic", "Child"]
    assert last.hoverinfo == "text"
    assert list(fig.frames[0].data[NODE_TRACE].hovertext) == ["A very long central topic"]


def test_node_id_from_point():
    scene = _sample_scene()
    assert node_id_from_point({"customdata": "1.2"}, scene) == "1.2"
    assert node_id_from_point({"customdata": ["2"]}, scene) == "2"
    assert node_id_from_point({"curve_number": NODE_TRACE, "point_index": 4}, scene) == "2"
    assert node_id_from_point({"curve_number": LABEL_TRACE, "point_index": 0}, scene) is None
    assert node_id_from_point({"curve_number": NODE_TRACE, "point_index": 99}, scene) is None


def test_render_config_from_yaml_section():
    config = RenderConfig.from_config({"label_max_length": 5, "node_radius": 10, "unknown": 1})
    assert config.label_max_length == 5
    assert config.root_radius == 30
    placed = layout_document(sample_document())
    scene = render_scene(placed, config=config)
    assert scene.labels[0].text == "Centr…"
    assert scene.circles[1].radius == 10


def test_graph_export(tmp_path):
    graph = build_mindmap_graph(sample_document())
    assert graph.number_of_nodes() == 6
    assert graph.number_of_edges() == 5
    assert graph.nodes["1.1"]["text"] == "Leaf A"
    assert list(graph.successors("1")) == ["1.1", "1.2"]
    path = export_mindmap_graphml(graph, str(tmp_path / "map.graphml"))
    assert "Leaf A" in open(path, encoding="utf-8").read()


def test_html_and_json_export(tmp_path):
    doc = sample_document()
    fig = build_mindmap_figure(render_scene(layout_document(doc)))
    html_path = export_mindmap_html(fig, str(tmp_path / "map.html"))
    assert os.path.exists(html_path)
    json_path = export_document_json(doc, str(tmp_path / "map.json"))
    with open(json_path, encoding="utf-8") as f:
        assert json.load(f)["title"] == "Sample Mind Map"
