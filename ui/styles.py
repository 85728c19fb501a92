"""UI styling constants for the Streamlit app."""

PRIMARY_COLOR = "#7c3aed"

INTER_FONTS_CSS = """
<link rel="preconnect" href="https://fonts.googleapis.com">
<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600&display=swap" rel="stylesheet">
<style>
body {font-family: Inter, sans-serif;}
</style>
"""
