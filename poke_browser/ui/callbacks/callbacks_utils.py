from __future__ import annotations
import logging
from typing import Any, Optional

from poke_browser.core.interaction_state import InteractionState

logger = logging.getLogger(__name__)


def try_parse_interaction_state(data: object) -> Optional[InteractionState]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return InteractionState.from_dict(data)
    except Exception:
        logger.exception("Invalid interaction-state: %r", data)
        return None


def safe_interaction_state(data: object) -> InteractionState:
    """Parsed state, or a fresh one when the store is empty or corrupt."""
    state = try_parse_interaction_state(data)
    return state if state is not None else InteractionState()


def first_point_id(event_data: Any) -> Optional[str]:
    """
    Record id carried by the first point of a Plotly click/hover payload.
    Points without customdata (axes, decorations) give None.
    """
    if not isinstance(event_data, dict):
        return None
    points = event_data.get("points") or []
    if not points:
        return None
    custom = points[0].get("customdata")
    if isinstance(custom, (list, tuple)):
        custom = custom[0] if custom else None
    if custom is None:
        return None
    return str(custom)
