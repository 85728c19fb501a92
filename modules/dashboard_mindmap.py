from __future__ import annotations

"""Summary figures shown next to the mind map."""

import datetime
import json
from pathlib import Path
from typing import Any, Dict, Optional

from core.mindmap_tree import MindMapDocument, count_nodes, depth


def compile_mindmap_metrics(document: MindMapDocument,
                            created: Optional[datetime.date] = None) -> Dict[str, Any]:
    """Return title, node count, depth and creation date for ``document``."""
    created = created or datetime.date.today()
    return {
        "title": document.title,
        "total_nodes": count_nodes(document),
        "max_depth": depth(document),
        "created": created.isoformat(),
    }


def export_summary_json(metrics: Dict[str, Any], path: str = "mindmap_summary.json") -> str:
    """Save summary metrics as JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(metrics, f, ensure_ascii=False, indent=2)
    return str(Path(path))


__all__ = ["compile_mindmap_metrics", "export_summary_json"]
