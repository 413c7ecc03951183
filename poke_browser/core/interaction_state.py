from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Set

from .zoom import ZoomTransform


class FilterEmphasis(str, Enum):
    """How a mark is treated by the brush filter."""
    NEUTRAL = "neutral"          # no brush
    EMPHASIZED = "emphasized"    # inside the active brush
    DIMMED = "dimmed"            # outside the active brush


@dataclass
class InteractionState:
    """
    Represents the current cross-view interaction state.

    Fields:

    - selected: record ids the user has toggled on (persistent until cleared)
    - filtered: record ids inside the active brush rectangle
    - brush_active: True while a brush rectangle exists, even if it holds no marks
    - hovered: id of the mark under the pointer, if any (transient)
    - zoom: scatter-view zoom transform

    - brush_revision: bumped whenever the brush is cleared programmatically
    - zoom_reset: True when the last zoom change was an explicit reset

    Only InteractionManager should mutate an instance.
    """

    selected: Set[str] = field(default_factory=set)
    filtered: Set[str] = field(default_factory=set)
    brush_active: bool = False
    hovered: Optional[str] = None
    zoom: ZoomTransform = field(default_factory=ZoomTransform.identity)

    brush_revision: int = 0
    zoom_reset: bool = False

    def is_selected(self, record_id: str) -> bool:
        return record_id in self.selected

    def is_hovered(self, record_id: str) -> bool:
        return self.hovered is not None and self.hovered == record_id

    def emphasis(self, record_id: str) -> FilterEmphasis:
        if not self.brush_active:
            return FilterEmphasis.NEUTRAL
        if record_id in self.filtered:
            return FilterEmphasis.EMPHASIZED
        return FilterEmphasis.DIMMED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selected": sorted(self.selected),
            "filtered": sorted(self.filtered),
            "brush_active": self.brush_active,
            "hovered": self.hovered,
            "zoom": self.zoom.to_dict(),
            "brush_revision": self.brush_revision,
            "zoom_reset": self.zoom_reset,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> InteractionState:
        return cls(
            selected=_str_set(data.get("selected", [])),
            filtered=_str_set(data.get("filtered", [])),
            brush_active=bool(data.get("brush_active", False)),
            hovered=data.get("hovered"),
            zoom=ZoomTransform.from_dict(data.get("zoom") or {}),
            brush_revision=int(data.get("brush_revision", 0)),
            zoom_reset=bool(data.get("zoom_reset", False)),
        )


def _str_set(values: Iterable[Any]) -> Set[str]:
    return {str(v) for v in values}
