from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
import plotly.graph_objs as go
from dash import Input, Output, html

from poke_browser.core.interaction_state import InteractionState
from poke_browser.ui.callbacks.callbacks_utils import safe_interaction_state
from poke_browser.ui.ids import IDs
from poke_browser.ui.layout.build_status_panel import format_name_list

if TYPE_CHECKING:
    from poke_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helper: Empty/Error Figures
# -----------------------------------------------------------------------------
def _message_figure(title: str, details: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    text = title if details is None else f"{title}<br><br>{details}"
    fig.add_annotation(
        text=text,
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


def _error_figure(details: str) -> go.Figure:
    return _message_figure("Something went wrong while rendering this view.", details)


def render_interactive_figures(ctx: AppConfig, state: InteractionState) -> Tuple[go.Figure, go.Figure]:
    """
    Replay `state` into fresh scatter and parallel views and render both.
    """
    if len(ctx.dataset) == 0:
        empty = _message_figure("No records loaded.", "Check the configured data source.")
        return empty, empty

    manager = ctx.build_manager(state)
    manager.replay()

    scatter = ctx.view_of(manager, "scatter")
    parallel = ctx.view_of(manager, "parallel")
    return scatter.figure(manager.state), parallel.figure(manager.state)


def status_children(ctx: AppConfig, state: InteractionState) -> Tuple[Any, Any, Any]:
    names = ctx.dataset.names_for(state.selected)
    selection = html.Span(
        [html.Strong(f"Selected ({len(state.selected)}): "), format_name_list(names)]
    )

    if state.brush_active:
        brush_text = f"active, {len(state.filtered)} of {len(ctx.dataset)} records"
    else:
        brush_text = "inactive"
    brush = html.Span([html.Strong("Brush: "), brush_text])

    zoom = html.Span([html.Strong("Zoom: "), f"{state.zoom.k:.2f}x"])
    return selection, brush, zoom


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # InteractionState -> scatter + parallel figures
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Graph.SCATTER, "figure"),
        Output(IDs.Graph.PARALLEL, "figure"),
        Input(IDs.Store.INTERACTION_STATE, "data"),
    )
    def update_figures_from_state(state_data: dict[str, Any] | None):
        state = safe_interaction_state(state_data)

        try:
            logger.debug(
                "render_start",
                extra={
                    "n_selected": len(state.selected),
                    "brush_active": state.brush_active,
                    "hovered": state.hovered,
                },
            )
            return render_interactive_figures(ctx, state)

        except Exception:
            logger.exception(
                "Error in update_figures_from_state",
                extra={"interaction_state": state_data},
            )
            err = _error_figure(
                "The app hit an unexpected error. "
                "If this keeps happening, grab the logs and open an issue."
            )
            return err, err

    # ---------------------------------------------------------
    # Status panel (pure UI reflection of state)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.STATUS_SELECTION, "children"),
        Output(IDs.Control.STATUS_FILTER, "children"),
        Output(IDs.Control.STATUS_ZOOM, "children"),
        Input(IDs.Store.INTERACTION_STATE, "data"),
    )
    def update_status(state_data):
        return status_children(ctx, safe_interaction_state(state_data))
