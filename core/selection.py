"""Selection and hover state for the mind map viewer."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Optional, Tuple

from .mindmap_tree import MindMapDocument, MindMapNode, UnknownSelection

logger = logging.getLogger("mindmap_genius.selection")

# Most recent selection events kept per manager
MAX_EVENTS = 100


@dataclass(frozen=True)
class SelectionState:
    """Either unselected (``node_id is None``) or one selected node."""

    node_id: Optional[str] = None

    @property
    def is_selected(self) -> bool:
        return self.node_id is not None


UNSELECTED = SelectionState()


@dataclass(frozen=True)
class SelectionEvent:
    """Sent to the details panel after every selection change."""

    node_id: Optional[str]
    text: Optional[str] = None


SelectionListener = Callable[[SelectionEvent], None]


class InteractionManager:
    """Owns the single selected node of the current document.

    Clicking a node selects it; clicking another node moves the selection.
    Nothing deselects except loading a new document. Hover is tracked
    separately and never changes the selection.
    """

    def __init__(self, document: MindMapDocument) -> None:
        self._document = document
        self._state = UNSELECTED
        self._hovered: Optional[str] = None
        self._listeners: List[SelectionListener] = []
        self._events: Deque[SelectionEvent] = deque(maxlen=MAX_EVENTS)

    @property
    def document(self) -> MindMapDocument:
        return self._document

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def hovered_id(self) -> Optional[str]:
        return self._hovered

    @property
    def events(self) -> Tuple[SelectionEvent, ...]:
        return tuple(self._events)

    @property
    def selected_node(self) -> Optional[MindMapNode]:
        if not self._state.is_selected:
            return None
        return self._document.get_node(self._state.node_id)

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """Register ``listener`` and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load_document(self, document: MindMapDocument) -> None:
        self._document = document
        self._hovered = None
        self._events.clear()
        self._transition(UNSELECTED)

    def click(self, node_id: str) -> bool:
        """Select ``node_id``. Return True if the selection changed."""
        try:
            self._document.get_node(node_id)
        except UnknownSelection:
            logger.warning("Ignoring selection of unknown node %r", node_id)
            return False
        if self._state.node_id == node_id:
            return False
        self._transition(SelectionState(node_id))
        return True

    def pointer_over(self, node_id: str) -> None:
        if node_id in self._document:
            self._hovered = node_id

    def pointer_out(self, node_id: str) -> None:
        if self._hovered == node_id:
            self._hovered = None

    def _transition(self, state: SelectionState) -> None:
        self._state = state
        text = None
        if state.is_selected:
            text = self._document.get_node(state.node_id).text
        event = SelectionEvent(state.node_id, text)
        self._events.append(event)
        for listener in list(self._listeners):
            listener(event)


__all__ = [
    "SelectionState",
    "UNSELECTED",
    "SelectionEvent",
    "InteractionManager",
    "MAX_EVENTS",
]
