from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        INTERACTION_STATE = "interaction-state"

    class Graph:
        SCATTER = "scatter-graph"
        DONUT = "donut-graph"
        PARALLEL = "parallel-graph"

    class Control:
        # Control surface
        CLEAR_SELECTION_BTN = "clear-selection-btn"
        RESET_ZOOM_BTN = "reset-zoom-btn"

        # Status panel
        STATUS_PANEL = "status-panel"
        STATUS_SELECTION = "status-selection"
        STATUS_FILTER = "status-filter"
        STATUS_ZOOM = "status-zoom"

        # Legend
        TYPE_LEGEND = "type-legend"
