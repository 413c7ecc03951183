from __future__ import annotations

from typing import Any, Dict, Optional

import plotly.graph_objects as go
from dash import dcc, html

_BASE_GRAPH_CONFIG: Dict[str, Any] = {"displaylogo": False, "responsive": False}


def build_plot_panel(
    graph_id: str,
    width: float,
    height: float,
    figure: Optional[go.Figure] = None,
    interactive: bool = True,
    scroll_zoom: bool = False,
) -> html.Div:
    """
    One fixed-size cell of the canvas holding a single graph.

    Interactive graphs clear their hoverData when the pointer leaves a mark,
    so callbacks see both enter and leave.
    """
    config = dict(_BASE_GRAPH_CONFIG)
    if interactive:
        config["scrollZoom"] = scroll_zoom
        config["modeBarButtonsToRemove"] = ["lasso2d", "autoScale2d", "zoom2d"]
    else:
        config["displayModeBar"] = False

    graph_kwargs: Dict[str, Any] = {}
    if interactive:
        graph_kwargs["clear_on_unhover"] = True

    return html.Div(
        dcc.Graph(
            id=graph_id,
            figure=figure if figure is not None else go.Figure(),
            config=config,
            style={"width": f"{width}px", "height": f"{height}px"},
            **graph_kwargs,
        ),
        className="pkb-cell",
        style={"width": f"{width}px", "height": f"{height}px"},
    )
