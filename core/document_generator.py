"""Placeholder generation step: source document in, mind map out.

No text is extracted or summarized yet. A file gives a fixed outline titled
after the file, pasted text gives another fixed outline.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Iterable

from config.sample_mindmaps import FILE_MINDMAP_TEMPLATE, TEXT_MINDMAP_TEMPLATE

from .mindmap_tree import MindMapDocument

logger = logging.getLogger("mindmap_genius.generator")

DEFAULT_EXTENSIONS = ("txt", "pdf", "doc", "docx")


def generate_from_file(filename: str, allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> MindMapDocument:
    """Return the mind map for an uploaded file.

    Raises ``ValueError`` when no file name is given or its extension is not
    accepted.
    """
    if not filename:
        raise ValueError("No file selected")
    path = Path(filename)
    extension = path.suffix.lower().lstrip(".")
    allowed = {ext.lower().lstrip(".") for ext in allowed_extensions}
    if extension not in allowed:
        raise ValueError(f"Unsupported file type: {path.suffix or filename}")

    data = copy.deepcopy(FILE_MINDMAP_TEMPLATE)
    data["title"] = path.stem
    logger.info("Generated mind map for file %s", path.name)
    return MindMapDocument.from_dict(data)


def generate_from_text(text: str) -> MindMapDocument:
    """Return the mind map for pasted text. Raises ``ValueError`` if blank."""
    if not text or not text.strip():
        raise ValueError("No text provided")
    logger.info("Generated mind map from %d characters of text", len(text))
    return MindMapDocument.from_dict(copy.deepcopy(TEXT_MINDMAP_TEMPLATE))


__all__ = ["DEFAULT_EXTENSIONS", "generate_from_file", "generate_from_text"]
