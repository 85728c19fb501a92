"""
MindMap Genius - main Streamlit entry point
"""
import streamlit as st

# Page config - MUST BE THE FIRST STREAMLIT COMMAND
st.set_page_config(
    page_title="MindMap Genius",
    page_icon="🧠",
    layout="wide",
    initial_sidebar_state="collapsed"
)

from health_check import ensure_app_health, display_health_status
from src.utils import configure_logger, load_config_or_default
from ui.components.header import render_header
from ui.components.mindmap_view import (
    load_viewer_settings,
    render_generator,
    render_mindmap_viewer,
)
from ui.styles import INTER_FONTS_CSS

CONFIG_PATH = "config/config.yaml"

FEATURES = [
    ("⚡ Instant mind maps", "Upload a document or paste text and get an outline in seconds."),
    ("🧭 Radial layout", "Ideas fan out from a central topic, one ring per level."),
    ("🖱️ Interactive", "Click any node to see its details next to the diagram."),
    ("💾 Export", "Download the map as HTML, GraphML or JSON."),
]


def setup_logging():
    """Send application logs to the file named in the config."""
    config = load_config_or_default(CONFIG_PATH).get("logging") or {}
    return configure_logger(
        config.get("error_log", "logs/error.log"),
        config.get("level", "INFO"),
    )


def render_features():
    """Show the feature overview strip."""
    cols = st.columns(len(FEATURES))
    for col, (title, text) in zip(cols, FEATURES):
        with col:
            st.markdown(f"**{title}**")
            st.caption(text)


def render_about():
    """About tab."""
    st.markdown("### ℹ️ About")
    st.write(
        "MindMap Genius turns documents into radial mind maps. The central "
        "topic sits in the middle, each level of detail on its own ring."
    )
    st.caption(
        "The generation step currently returns a fixed outline; text "
        "extraction and summarization are not available yet."
    )


def main():
    """Main entry point of the application."""
    st.markdown(INTER_FONTS_CSS, unsafe_allow_html=True)
    setup_logging()

    is_healthy, report = ensure_app_health()
    display_health_status(report, is_healthy)

    render_header()
    render_features()

    settings = load_viewer_settings(CONFIG_PATH)
    tab1, tab2, tab3 = st.tabs([
        "🧠 Generate",
        "🗺️ Mind Map",
        "ℹ️ About"
    ])

    with tab1:
        render_generator(settings)

    with tab2:
        render_mindmap_viewer(settings)

    with tab3:
        render_about()

    st.markdown("---")
    st.markdown(
        """
        <div style='text-align: center; color: #6B7280; font-size: 0.875rem;'>
        MindMap Genius v1.0
        </div>
        """,
        unsafe_allow_html=True
    )


if __name__ == "__main__":
    main()
