from __future__ import annotations

import pytest

from poke_browser.config.model import GlobalConfig
from poke_browser.core.dataset import Dataset
from poke_browser.core.interaction_state import InteractionState
from poke_browser.core.record import Record
from poke_browser.core.zoom import ZoomTransform
from poke_browser.ui.callbacks.callbacks_interaction import (
    CLEAR_SELECTION,
    PARALLEL_CLICK,
    PARALLEL_HOVER,
    RESET_ZOOM,
    SCATTER_BRUSH,
    SCATTER_CLICK,
    SCATTER_HOVER,
    SCATTER_RELAYOUT,
    apply_interaction_event,
    apply_interaction_events,
)
from poke_browser.ui.callbacks.callbacks_utils import first_point_id, safe_interaction_state
from poke_browser.ui.dash_app import build_app_config


def _make_ctx():
    records = [
        Record("Bulbasaur", "Grass", 45, 49, 49, 65, 65, 45),
        Record("Charmander", "Fire", 39, 52, 43, 60, 50, 65),
        Record("Squirtle", "Water", 44, 48, 65, 50, 64, 43),
        Record("Mewtwo", "Psychic", 106, 110, 90, 154, 90, 130, is_legendary=True),
    ]
    return build_app_config(GlobalConfig(), Dataset(name="TestDataset", records=records))


def _point(record_id: str) -> dict:
    return {"points": [{"curveNumber": 0, "pointIndex": 0, "customdata": record_id}]}


def test_click_toggles_selection_from_either_view():
    ctx = _make_ctx()
    state = InteractionState()

    state = apply_interaction_event(ctx, state, SCATTER_CLICK, _point("Mewtwo_Psychic"))
    assert state.selected == {"Mewtwo_Psychic"}

    # parallel lines carry the id once per vertex
    payload = {"points": [{"customdata": ["Mewtwo_Psychic"] * 6}]}
    state = apply_interaction_event(ctx, state, PARALLEL_CLICK, payload)
    assert state.selected == set()


def test_click_on_decoration_is_a_no_op():
    ctx = _make_ctx()

    assert apply_interaction_event(ctx, InteractionState(), PARALLEL_CLICK, {"points": [{"x": 0}]}) is None


def test_hover_sets_and_clears_hovered_id():
    ctx = _make_ctx()
    state = InteractionState()

    state = apply_interaction_event(ctx, state, SCATTER_HOVER, _point("Squirtle_Water"))
    assert state.hovered == "Squirtle_Water"

    # same mark again
    assert apply_interaction_event(ctx, state, PARALLEL_HOVER, _point("Squirtle_Water")) is None

    state = apply_interaction_event(ctx, state, SCATTER_HOVER, None)
    assert state.hovered is None

    assert apply_interaction_event(ctx, state, SCATTER_HOVER, None) is None


def test_box_select_filters_by_data_range():
    ctx = _make_ctx()

    state = apply_interaction_event(
        ctx,
        InteractionState(),
        SCATTER_BRUSH,
        {"points": [], "range": {"x": [100, 115], "y": [85, 95]}},
    )

    assert state.brush_active is True
    assert state.filtered == {"Mewtwo_Psychic"}


def test_brush_over_empty_area_is_active_but_empty():
    ctx = _make_ctx()

    state = apply_interaction_event(
        ctx,
        InteractionState(),
        SCATTER_BRUSH,
        {"points": [], "range": {"x": [60, 70], "y": [80, 90]}},
    )

    assert state.brush_active is True
    assert state.filtered == set()


def test_lasso_uses_reported_points():
    ctx = _make_ctx()
    payload = {"points": [{"customdata": "Bulbasaur_Grass"}, {"customdata": "Squirtle_Water"}]}

    state = apply_interaction_event(ctx, InteractionState(), SCATTER_BRUSH, payload)

    assert state.filtered == {"Bulbasaur_Grass", "Squirtle_Water"}


def test_brush_cleared_by_empty_selection():
    ctx = _make_ctx()
    state = InteractionState(filtered={"Mewtwo_Psychic"}, brush_active=True)

    state = apply_interaction_event(ctx, state, SCATTER_BRUSH, None)

    assert state.brush_active is False
    assert state.filtered == set()
    assert apply_interaction_event(ctx, state, SCATTER_BRUSH, None) is None


def test_relayout_range_becomes_zoom_transform():
    ctx = _make_ctx()

    state = apply_interaction_event(
        ctx,
        InteractionState(),
        SCATTER_RELAYOUT,
        {"xaxis.range[0]": 55, "xaxis.range[1]": 87.5, "yaxis.range[0]": 60, "yaxis.range[1]": 85},
    )

    assert state.zoom.k == pytest.approx(2)
    assert state.zoom_reset is False


def test_relayout_autorange_resets_zoom():
    ctx = _make_ctx()
    state = InteractionState(zoom=ZoomTransform(k=2, x=-60, y=0))

    state = apply_interaction_event(ctx, state, SCATTER_RELAYOUT, {"xaxis.autorange": True, "yaxis.autorange": True})

    assert state.zoom.is_identity
    assert state.zoom_reset is True


@pytest.mark.parametrize("payload", [{"autosize": True}, {"dragmode": "pan"}, None])
def test_relayout_without_axis_change_is_a_no_op(payload):
    ctx = _make_ctx()

    assert apply_interaction_event(ctx, InteractionState(), SCATTER_RELAYOUT, payload) is None


def test_clear_selection_button():
    ctx = _make_ctx()
    state = InteractionState(selected={"Mewtwo_Psychic"}, filtered={"Mewtwo_Psychic"}, brush_active=True)

    state = apply_interaction_event(ctx, state, CLEAR_SELECTION, 1)

    assert state.selected == set()
    assert state.brush_active is False
    assert state.brush_revision == 1


def test_reset_zoom_button_keeps_selection():
    ctx = _make_ctx()
    state = InteractionState(selected={"Mewtwo_Psychic"}, zoom=ZoomTransform(k=3))

    state = apply_interaction_event(ctx, state, RESET_ZOOM, 1)

    assert state.zoom.is_identity
    assert state.selected == {"Mewtwo_Psychic"}


def test_unknown_trigger_is_a_no_op():
    assert apply_interaction_event(_make_ctx(), InteractionState(), "something.else", {}) is None


def test_safe_interaction_state_recovers_from_bad_payload():
    assert safe_interaction_state(None) == InteractionState()
    assert safe_interaction_state("garbage") == InteractionState()
    assert safe_interaction_state({"brush_revision": "x"}) == InteractionState()
    assert safe_interaction_state({"selected": ["a"]}).selected == {"a"}


@pytest.mark.parametrize(
    "payload, expected",
    [
        (None, None),
        ({"points": []}, None),
        ({"points": [{"customdata": "a"}]}, "a"),
        ({"points": [{"customdata": ["b", "b"]}]}, "b"),
        ({"points": [{"customdata": []}]}, None),
    ],
)
def test_first_point_id(payload, expected):
    assert first_point_id(payload) == expected


@pytest.mark.parametrize(
    "triggers",
    [
        [SCATTER_CLICK, SCATTER_BRUSH],
        [SCATTER_BRUSH, SCATTER_CLICK],
    ],
)
def test_click_with_empty_selection_keeps_brush(triggers):
    ctx = _make_ctx()
    state = InteractionState(filtered={"Mewtwo_Psychic"}, brush_active=True)
    payloads = {SCATTER_CLICK: _point("Squirtle_Water"), SCATTER_BRUSH: None}

    state = apply_interaction_events(ctx, state, triggers, payloads)

    assert state.selected == {"Squirtle_Water"}
    assert state.brush_active is True
    assert state.filtered == {"Mewtwo_Psychic"}


def test_empty_selection_alone_still_clears_brush():
    ctx = _make_ctx()
    state = InteractionState(filtered={"Mewtwo_Psychic"}, brush_active=True)

    state = apply_interaction_events(ctx, state, [SCATTER_BRUSH], {SCATTER_BRUSH: None})

    assert state.brush_active is False
    assert state.filtered == set()


def test_batched_events_with_no_effect_are_a_no_op():
    ctx = _make_ctx()
    payloads = {SCATTER_HOVER: None, SCATTER_BRUSH: None}

    assert apply_interaction_events(ctx, InteractionState(), [SCATTER_HOVER, SCATTER_BRUSH], payloads) is None


def test_batched_click_and_hover_both_apply():
    ctx = _make_ctx()
    payloads = {SCATTER_HOVER: _point("Bulbasaur_Grass"), SCATTER_CLICK: _point("Bulbasaur_Grass")}

    state = apply_interaction_events(ctx, InteractionState(), [SCATTER_HOVER, SCATTER_CLICK], payloads)

    assert state.hovered == "Bulbasaur_Grass"
    assert state.selected == {"Bulbasaur_Grass"}


def test_corrupt_zoom_in_store_falls_back_to_fresh_state():
    state = safe_interaction_state({"selected": ["a"], "zoom": {"k": 0, "x": 0, "y": 0}})

    assert state == InteractionState()
