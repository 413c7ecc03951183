from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .base_view import BaseView
from .interaction_state import InteractionState
from .zoom import ZoomTransform

logger = logging.getLogger(__name__)


class InteractionManager:
    """
    Single point of mutation for the cross-view interaction state.

    Purpose:
    - Owns one {@link InteractionState}; views never change it themselves
    - Views subscribe and get called back after every change, so no view needs
      to know about any other view

    Design Notes:
    - Every operation mutates the state first, then notifies subscribers in
      subscription order
    - Notifications carry the state; subscribers recompute styles from it, so
      the same state applied twice looks the same
    """

    def __init__(self, state: Optional[InteractionState] = None):
        self.state = state if state is not None else InteractionState()
        self._views: List[BaseView] = []

    def subscribe(self, view: BaseView) -> None:
        if view in self._views:
            raise ValueError(f"View '{view.id}' already subscribed")
        self._views.append(view)
        view.restyle(self.state)

    @property
    def views(self) -> List[BaseView]:
        return list(self._views)

    def replay(self) -> None:
        """Re-apply the complete state to every subscriber."""
        for view in self._views:
            view.restyle(self.state)
            view.rezoom(self.state)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def toggle_selection(self, record_id: str) -> bool:
        """
        Flip membership of record_id in the selection set.
        :return: True if the id is selected afterwards
        """
        selected = self.state.selected
        if record_id in selected:
            selected.discard(record_id)
        else:
            selected.add(record_id)

        now_selected = record_id in selected
        logger.debug("toggle_selection", extra={"record_id": record_id, "selected": now_selected})
        self._restyle_all()
        return now_selected

    def clear_selection(self) -> None:
        """Empty the selection, drop any brush, restore default styling."""
        self.state.selected.clear()
        self.state.filtered.clear()
        self.state.brush_active = False
        self.state.brush_revision += 1
        logger.debug("clear_selection", extra={"brush_revision": self.state.brush_revision})
        self._restyle_all()

    # ------------------------------------------------------------------
    # Brush filter
    # ------------------------------------------------------------------
    def set_filter(self, record_ids: Iterable[str], active: bool) -> None:
        """
        Replace the filter set and the brush-active flag. An inactive brush
        always has an empty filter set.
        """
        self.state.filtered = set(record_ids) if active else set()
        self.state.brush_active = bool(active)
        logger.debug(
            "set_filter",
            extra={"active": self.state.brush_active, "n_filtered": len(self.state.filtered)},
        )
        self._restyle_all()

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------
    def highlight(self, record_id: str) -> None:
        previous = self.state.hovered
        if previous is not None and previous != record_id:
            self.unhighlight(previous)

        self.state.hovered = record_id
        for view in self._views:
            view.highlight(record_id, self.state)

    def unhighlight(self, record_id: str) -> None:
        if self.state.hovered == record_id:
            self.state.hovered = None
        for view in self._views:
            view.unhighlight(record_id, self.state)

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------
    def apply_zoom(self, transform: ZoomTransform) -> ZoomTransform:
        self.state.zoom = transform.clamped()
        self.state.zoom_reset = False
        self._rezoom_all()
        return self.state.zoom

    def reset_zoom(self) -> None:
        self.state.zoom = ZoomTransform.identity()
        self.state.zoom_reset = True
        logger.debug("reset_zoom")
        self._rezoom_all()

    # ------------------------------------------------------------------
    def _restyle_all(self) -> None:
        for view in self._views:
            view.restyle(self.state)

    def _rezoom_all(self) -> None:
        for view in self._views:
            view.rezoom(self.state)
