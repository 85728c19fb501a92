from __future__ import annotations

"""Staggered entrance timing for mind map nodes and labels."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from core.radial_layout import PlacedNode


@dataclass(frozen=True)
class AnimationConfig:
    level_delay: float = 0.2
    sibling_delay: float = 0.1
    label_lag: float = 0.2

    @classmethod
    def from_config(cls, section: Optional[Dict[str, Any]]) -> "AnimationConfig":
        names = {f.name for f in fields(cls)}
        return cls(**{k: float(v) for k, v in (section or {}).items() if k in names})


DEFAULT_ANIMATION = AnimationConfig()


def reveal_delay(level: int, sibling_index: int, config: AnimationConfig = DEFAULT_ANIMATION) -> float:
    """Seconds before a node appears."""
    return level * config.level_delay + sibling_index * config.sibling_delay


@dataclass(frozen=True)
class RevealEvent:
    at: float
    node_id: str
    kind: str  # "node" or "label"


class RevealScheduler:
    """Entrance schedule for one laid-out document.

    Iterating yields :class:`RevealEvent` in time order, ties in layout
    order. Each iteration starts from the beginning. The schedule is purely
    visual: nodes can be selected before their event fires.
    """

    # Slack for float sums such as 0.1 + 0.2
    EPSILON = 1e-9

    def __init__(self, placed: Sequence[PlacedNode], config: AnimationConfig = DEFAULT_ANIMATION) -> None:
        self.config = config
        self._delays: Dict[str, float] = {
            item.node.id: reveal_delay(item.level, item.sibling_index, config) for item in placed
        }

    @classmethod
    def from_delays(
        cls, delays: Iterable[Tuple[str, float]], config: AnimationConfig = DEFAULT_ANIMATION
    ) -> "RevealScheduler":
        """Build a schedule from ``(node_id, delay)`` pairs already computed."""
        scheduler = cls((), config)
        scheduler._delays = dict(delays)
        return scheduler

    def __iter__(self) -> Iterator[RevealEvent]:
        events: List[RevealEvent] = []
        for node_id, delay in self._delays.items():
            events.append(RevealEvent(delay, node_id, "node"))
            events.append(RevealEvent(delay + self.config.label_lag, node_id, "label"))
        # sorted() is stable, so equal times keep layout order
        yield from sorted(events, key=lambda event: event.at)

    def delay_for(self, node_id: str) -> float:
        return self._delays[node_id]

    def reveal_times(self) -> List[float]:
        return sorted({round(delay, 6) for delay in self._delays.values()})

    def visible_at(self, seconds: float) -> Set[str]:
        """Ids of the nodes already revealed ``seconds`` after the start."""
        return {
            node_id for node_id, delay in self._delays.items() if delay <= seconds + self.EPSILON
        }

    def labels_visible_at(self, seconds: float) -> Set[str]:
        """Ids of the nodes whose label is already revealed."""
        return self.visible_at(seconds - self.config.label_lag)

    @property
    def duration(self) -> float:
        if not self._delays:
            return 0.0
        return max(self._delays.values()) + self.config.label_lag


__all__ = [
    "AnimationConfig",
    "DEFAULT_ANIMATION",
    "reveal_delay",
    "RevealEvent",
    "RevealScheduler",
]
