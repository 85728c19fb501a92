"""Header component for the Streamlit app."""
from pathlib import Path
import streamlit as st

from ui.styles import PRIMARY_COLOR

APP_NAME = "MindMap Genius"
TAGLINE = "Transform any document into a clear, interactive mind map."


def render_header(use_columns: bool = True, subtitle: str = TAGLINE) -> str:
    """Render the app header with logo and app name and return the HTML.

    Args:
        use_columns: lay the logo and title out with ``st.columns``. When
            False, everything is written as a single HTML block.
        subtitle: line shown under the app name.
    """
    logo_path = Path("static/logo.svg")
    title = f"<h1 style='margin-bottom:0;color:{PRIMARY_COLOR}'>{APP_NAME}</h1>"
    tagline = f"<p style='margin-top:0'>{subtitle}</p>" if subtitle else ""

    if logo_path.exists():
        logo_html = f"<img src='{logo_path.as_posix()}' style='height:50px;margin-right:1rem'>"
    else:
        logo_html = "<span>:brain:</span>"

    html = "\n".join([
        "<header style='display:flex;align-items:center'>",
        logo_html,
        f"<div>{title}{tagline}</div>",
        "</header>",
    ])

    if use_columns:
        cols = st.columns([1, 8])
        with cols[0]:
            if logo_path.exists():
                st.image(str(logo_path), use_container_width=True)
            else:
                st.write(":brain:")
        with cols[1]:
            st.markdown(title + tagline, unsafe_allow_html=True)
    else:
        st.markdown(html, unsafe_allow_html=True)
    st.markdown("---")
    return html
