"""Mind map generation page."""

import streamlit as st
from ui.components.mindmap_view import load_viewer_settings, render_generator


def main() -> None:
    st.header("Mind Map Generator")
    render_generator(load_viewer_settings())


if __name__ == "__main__":
    main()
