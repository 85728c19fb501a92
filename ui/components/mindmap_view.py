"""Mind map generator and viewer widgets shared by the app and its pages."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional, Tuple

import streamlit as st

from core.document_generator import DEFAULT_EXTENSIONS, generate_from_file, generate_from_text
from core.mindmap_tree import MindMapDocument, load_document
from core.radial_layout import LayoutConfig, layout_document
from core.selection import InteractionManager
from modules.dashboard_mindmap import compile_mindmap_metrics, export_summary_json
from modules.mindmap import (
    MindMapScene,
    RenderConfig,
    build_mindmap_figure,
    build_mindmap_graph,
    export_document_json,
    export_mindmap_graphml,
    export_mindmap_html,
    node_id_from_point,
    render_scene,
)
from modules.mindmap_animation import AnimationConfig
from src.utils import load_config_or_default

SESSION_MANAGER = "mindmap_interaction"
SESSION_GENERATION = "mindmap_generation"


@dataclass(frozen=True)
class ViewerSettings:
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    allowed_extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    export_dir: str = "exports"


def load_viewer_settings(path: str = "config/config.yaml") -> ViewerSettings:
    config = load_config_or_default(path)
    generator = config.get("generator") or {}
    export = config.get("export") or {}
    return ViewerSettings(
        layout=LayoutConfig.from_config(config.get("layout")),
        render=RenderConfig.from_config(config.get("render")),
        animation=AnimationConfig.from_config(config.get("animation")),
        allowed_extensions=tuple(generator.get("allowed_extensions") or DEFAULT_EXTENSIONS),
        export_dir=export.get("directory", "exports"),
    )


def get_interaction_manager(state: Optional[MutableMapping[str, Any]] = None) -> InteractionManager:
    """Return the session's interaction manager, opening the sample if needed."""
    state = st.session_state if state is None else state
    if SESSION_MANAGER not in state:
        state[SESSION_MANAGER] = InteractionManager(load_document(None))
        state[SESSION_GENERATION] = 0
    return state[SESSION_MANAGER]


def open_document(payload: Any, state: Optional[MutableMapping[str, Any]] = None) -> MindMapDocument:
    """Load a new document into the viewer, resetting the selection."""
    state = st.session_state if state is None else state
    document = load_document(payload)
    manager = get_interaction_manager(state)
    manager.load_document(document)
    # A fresh chart key drops selections made on the previous document
    state[SESSION_GENERATION] = state.get(SESSION_GENERATION, 0) + 1
    return document


def clicked_node_id(event: Any, scene: MindMapScene) -> Optional[str]:
    """Return the node picked in a ``st.plotly_chart`` selection event."""
    if not event:
        return None
    points = (event.get("selection") or {}).get("points") or []
    for point in reversed(points):
        node_id = node_id_from_point(point, scene)
        if node_id is not None:
            return node_id
    return None


def render_generator(settings: Optional[ViewerSettings] = None) -> Optional[MindMapDocument]:
    """Upload or paste a source document and turn it into a mind map."""
    settings = settings or load_viewer_settings()
    st.markdown("### 🧠 Generate a mind map")
    document = None

    file_tab, text_tab = st.tabs(["📤 Upload a file", "📝 Paste text"])
    with file_tab:
        uploaded = st.file_uploader(
            "Drop your document here",
            type=list(settings.allowed_extensions),
            help="Supported formats: " + ", ".join(settings.allowed_extensions),
        )
        if st.button("Generate from file", key="generate_from_file", type="primary"):
            try:
                document = generate_from_file(
                    uploaded.name if uploaded is not None else "", settings.allowed_extensions
                )
            except ValueError as e:
                st.error(f"⚠️ {e}")

    with text_tab:
        text = st.text_area("Paste your text", height=200, key="generator_text")
        if st.button("Generate from text", key="generate_from_text", type="primary"):
            try:
                document = generate_from_text(text)
            except ValueError as e:
                st.error(f"⚠️ {e}")

    if document is not None:
        open_document(document)
        st.success(f"✅ Mind map « {document.title} » is ready in the Mind Map tab.")
    return document


def _render_summary(document: MindMapDocument, settings: ViewerSettings) -> Dict[str, Any]:
    metrics = compile_mindmap_metrics(document)
    st.markdown("#### 📊 Summary")
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Total nodes", metrics["total_nodes"])
    with col2:
        st.metric("Depth level", metrics["max_depth"])
    st.caption(f"Created: {metrics['created']}")
    return metrics


def _render_details(manager: InteractionManager) -> None:
    st.markdown("#### 🔎 Node details")
    node = manager.selected_node
    if node is None:
        st.info("Click on a node in the visualization to see its details here.")
        return
    st.write(f"**Selected:** {node.id}")
    st.write(node.text)
    if node.children:
        st.caption("Children: " + ", ".join(child.text for child in node.children))


def _render_exports(document: MindMapDocument, fig, metrics: Dict[str, Any], settings: ViewerSettings) -> None:
    st.markdown("#### 💾 Export")
    export_dir = Path(settings.export_dir)
    export_dir.mkdir(parents=True, exist_ok=True)
    stem = document.title.replace(" ", "_") or "mindmap"

    exports = {
        "HTML": lambda: export_mindmap_html(fig, str(export_dir / f"{stem}.html")),
        "GraphML": lambda: export_mindmap_graphml(
            build_mindmap_graph(document), str(export_dir / f"{stem}.graphml")
        ),
        "JSON": lambda: export_document_json(document, str(export_dir / f"{stem}.json")),
        "Summary": lambda: export_summary_json(metrics, str(export_dir / f"{stem}_summary.json")),
    }
    for label, export in exports.items():
        if st.button(f"Export {label}", key=f"export_{label}", use_container_width=True):
            try:
                path = export()
            except OSError as e:
                st.error(f"Export failed: {e}")
                continue
            with open(path, "rb") as f:
                st.download_button("Download", f, file_name=Path(path).name, key=f"download_{label}")


def render_mindmap_viewer(
    settings: Optional[ViewerSettings] = None, state: Optional[MutableMapping[str, Any]] = None
) -> None:
    """Draw the current mind map with its summary, details and exports.

    A click on a node that changes the selection reruns the script so the
    new fill and the details panel show at once.
    """
    state = st.session_state if state is None else state
    settings = settings or load_viewer_settings()
    manager = get_interaction_manager(state)
    document = manager.document

    st.markdown(f"### {document.title or 'Untitled mind map'}")
    placed = layout_document(document, settings.layout)
    scene = render_scene(placed, manager.state, manager.hovered_id, settings.render, settings.animation)

    col_map, col_side = st.columns([3, 1])
    with col_map:
        if document.is_empty:
            st.info("This mind map has no nodes.")
        animate = st.toggle("Animate entrance", value=True, key="mindmap_animate")
        fig = build_mindmap_figure(scene, settings.render, animate=animate, animation=settings.animation)
        event = st.plotly_chart(
            fig,
            use_container_width=True,
            on_select="rerun",
            selection_mode="points",
            key=f"mindmap_chart_{state.get(SESSION_GENERATION, 0)}",
        )
        node_id = clicked_node_id(event, scene)
        if node_id is not None and manager.click(node_id):
            st.rerun()

    with col_side:
        metrics = _render_summary(document, settings)
        _render_details(manager)
        _render_exports(document, fig, metrics, settings)
