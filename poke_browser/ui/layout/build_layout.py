from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from poke_browser.core.interaction_state import InteractionState
from poke_browser.ui.ids import IDs
from poke_browser.ui.layout.build_navbar import build_navbar
from poke_browser.ui.layout.build_plot_panel import build_plot_panel
from poke_browser.ui.layout.build_status_panel import build_status_panel

if TYPE_CHECKING:
    from poke_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    """
    Navbar over a fixed-size canvas split into four cells:

        scatter  | status + legend
        donut    | parallel coordinates

    The donut is static and rendered here once; the interactive graphs are
    filled by the render callback from the interaction-state store.
    """
    canvas = ctx.scales.layout
    navbar = build_navbar(ctx.global_config)

    donut = ctx.create_view("donut")
    initial = InteractionState()

    grid = html.Div(
        [
            build_plot_panel(
                IDs.Graph.SCATTER,
                canvas.left_width,
                canvas.top_height,
                scroll_zoom=True,
            ),
            html.Div(
                build_status_panel(ctx.dataset, canvas.right_width, canvas.top_height),
                className="pkb-cell",
                style={"width": f"{canvas.right_width}px", "height": f"{canvas.top_height}px"},
            ),
            build_plot_panel(
                IDs.Graph.DONUT,
                canvas.left_width,
                canvas.bottom_height,
                figure=donut.figure(initial),
                interactive=False,
            ),
            build_plot_panel(
                IDs.Graph.PARALLEL,
                canvas.right_width,
                canvas.bottom_height,
            ),
        ],
        className="pkb-canvas",
        style={
            "display": "grid",
            "gridTemplateColumns": f"{canvas.left_width}px {canvas.right_width}px",
            "gridTemplateRows": f"{canvas.top_height}px {canvas.bottom_height}px",
            "width": f"{canvas.width}px",
            "height": f"{canvas.height}px",
        },
    )

    return dbc.Container(
        fluid=True,
        className="pkb-root",
        children=[
            navbar,

            # Page-lifetime state only; never persisted
            dcc.Store(
                id=IDs.Store.INTERACTION_STATE,
                storage_type="memory",
                data=initial.to_dict(),
            ),

            html.Div(grid, className="mt-3"),
        ],
    )
