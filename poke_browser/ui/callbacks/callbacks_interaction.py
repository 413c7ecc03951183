from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Tuple

import dash
from dash import Input, Output, State, exceptions

from poke_browser.core.interaction_state import InteractionState
from poke_browser.ui.callbacks.callbacks_utils import first_point_id, safe_interaction_state
from poke_browser.ui.ids import IDs

if TYPE_CHECKING:
    from poke_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

SCATTER_CLICK = f"{IDs.Graph.SCATTER}.clickData"
PARALLEL_CLICK = f"{IDs.Graph.PARALLEL}.clickData"
SCATTER_HOVER = f"{IDs.Graph.SCATTER}.hoverData"
PARALLEL_HOVER = f"{IDs.Graph.PARALLEL}.hoverData"
SCATTER_BRUSH = f"{IDs.Graph.SCATTER}.selectedData"
SCATTER_RELAYOUT = f"{IDs.Graph.SCATTER}.relayoutData"
CLEAR_SELECTION = f"{IDs.Control.CLEAR_SELECTION_BTN}.n_clicks"
RESET_ZOOM = f"{IDs.Control.RESET_ZOOM_BTN}.n_clicks"


def _axis_range(relayout: Dict[str, Any], axis: str) -> Optional[Tuple[float, float]]:
    """
    Axis range from a relayoutData payload; Plotly sends either
    'xaxis.range[0]'/'xaxis.range[1]' or a single 'xaxis.range' list.
    """
    lo_key, hi_key = f"{axis}.range[0]", f"{axis}.range[1]"
    if lo_key in relayout and hi_key in relayout:
        return float(relayout[lo_key]), float(relayout[hi_key])
    rng = relayout.get(f"{axis}.range")
    if isinstance(rng, (list, tuple)) and len(rng) == 2:
        return float(rng[0]), float(rng[1])
    return None


def _brush_ids(scatter, selected: Dict[str, Any]) -> Sequence[str]:
    box = selected.get("range")
    if isinstance(box, dict) and "x" in box and "y" in box:
        x0, y0, x1, y1 = scatter.brush_rect_for_domains(box["x"], box["y"])
        return sorted(scatter.ids_in_brush(x0, y0, x1, y1))

    # lasso or programmatic selection: trust the points Plotly reports
    ids = []
    for point in selected.get("points") or []:
        rid = first_point_id({"points": [point]})
        if rid is not None:
            ids.append(rid)
    return ids


def apply_interaction_event(
    ctx: AppConfig,
    state: InteractionState,
    trigger: Optional[str],
    payload: Any,
) -> Optional[InteractionState]:
    """
    Apply one UI event to `state` (in place) through the InteractionManager.

    :param trigger: "<component-id>.<prop>" of the input that fired
    :param payload: the new value of that input
    :return: the updated state, or None if the event changes nothing
    """
    manager = ctx.build_manager(state)

    if trigger in (SCATTER_CLICK, PARALLEL_CLICK):
        record_id = first_point_id(payload)
        if record_id is None:
            return None
        manager.toggle_selection(record_id)

    elif trigger in (SCATTER_HOVER, PARALLEL_HOVER):
        record_id = first_point_id(payload)
        if record_id is None:
            if state.hovered is None:
                return None
            manager.unhighlight(state.hovered)
        else:
            if record_id == state.hovered:
                return None
            manager.highlight(record_id)

    elif trigger == SCATTER_BRUSH:
        if not payload:
            if not state.brush_active:
                return None
            manager.set_filter([], active=False)
        else:
            scatter = ctx.view_of(manager, "scatter")
            manager.set_filter(_brush_ids(scatter, payload), active=True)

    elif trigger == SCATTER_RELAYOUT:
        if not isinstance(payload, dict):
            return None
        if payload.get("xaxis.autorange") or payload.get("yaxis.autorange"):
            if state.zoom.is_identity:
                return None
            manager.reset_zoom()
        else:
            x_range = _axis_range(payload, "xaxis")
            y_range = _axis_range(payload, "yaxis")
            if x_range is None and y_range is None:
                # autosize, selections, dragmode changes...
                return None

            scatter = ctx.view_of(manager, "scatter")
            current_x, current_y = scatter.axis_scales(state.zoom)
            transform = scatter.zoom_for_domains(
                x_range if x_range is not None else current_x.domain,
                y_range if y_range is not None else current_y.domain,
            )
            if transform == state.zoom:
                return None
            manager.apply_zoom(transform)

    elif trigger == CLEAR_SELECTION:
        manager.clear_selection()

    elif trigger == RESET_ZOOM:
        manager.reset_zoom()

    else:
        return None

    return manager.state


def apply_interaction_events(
    ctx: AppConfig,
    state: InteractionState,
    triggers: Sequence[str],
    payloads: Dict[str, Any],
) -> Optional[InteractionState]:
    """
    Apply every input that fired in one Dash request, in trigger order.

    In select dragmode Plotly follows a click with an empty selection; when
    both arrive together the empty selection is dropped so that clicking a
    mark never clears the brush.

    :return: the updated state, or None if no event changed anything
    """
    clicked = any(t in (SCATTER_CLICK, PARALLEL_CLICK) for t in triggers)

    changed = False
    for trigger in dict.fromkeys(triggers):
        payload = payloads.get(trigger)
        if clicked and trigger == SCATTER_BRUSH and not payload:
            logger.debug("click_deselect_ignored", extra={"triggers": list(triggers)})
            continue
        if apply_interaction_event(ctx, state, trigger, payload) is not None:
            changed = True

    return state if changed else None


def register_interaction_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Pointer / brush / zoom / buttons -> InteractionState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.INTERACTION_STATE, "data"),
        Input(IDs.Graph.SCATTER, "clickData"),
        Input(IDs.Graph.PARALLEL, "clickData"),
        Input(IDs.Graph.SCATTER, "hoverData"),
        Input(IDs.Graph.PARALLEL, "hoverData"),
        Input(IDs.Graph.SCATTER, "selectedData"),
        Input(IDs.Graph.SCATTER, "relayoutData"),
        Input(IDs.Control.CLEAR_SELECTION_BTN, "n_clicks"),
        Input(IDs.Control.RESET_ZOOM_BTN, "n_clicks"),
        State(IDs.Store.INTERACTION_STATE, "data"),
        prevent_initial_call=True,
    )
    def on_interaction(
            sc_click, pc_click, sc_hover, pc_hover, sc_selected, sc_relayout,
            _clear_clicks, _reset_clicks, state_data
    ):
        triggered = dash.ctx.triggered
        triggers = [t["prop_id"] for t in triggered or [] if t.get("prop_id", ".") != "."]
        if not triggers:
            raise exceptions.PreventUpdate

        payloads = {
            SCATTER_CLICK: sc_click,
            PARALLEL_CLICK: pc_click,
            SCATTER_HOVER: sc_hover,
            PARALLEL_HOVER: pc_hover,
            SCATTER_BRUSH: sc_selected,
            SCATTER_RELAYOUT: sc_relayout,
        }

        state = safe_interaction_state(state_data)

        try:
            new_state = apply_interaction_events(ctx, state, triggers, payloads)
        except Exception:
            logger.exception(
                "Error applying interaction event",
                extra={"triggers": triggers, "interaction_state": state_data},
            )
            raise exceptions.PreventUpdate

        if new_state is None:
            raise exceptions.PreventUpdate

        logger.debug(
            "interaction_applied",
            extra={
                "triggers": triggers,
                "n_selected": len(new_state.selected),
                "brush_active": new_state.brush_active,
            },
        )
        return new_state.to_dict()
