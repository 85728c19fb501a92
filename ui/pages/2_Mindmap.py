"""Mind map visualization page."""

import streamlit as st
from ui.components.mindmap_view import load_viewer_settings, render_mindmap_viewer


def main() -> None:
    st.header("Mind Map")
    render_mindmap_viewer(load_viewer_settings())


if __name__ == "__main__":
    main()
