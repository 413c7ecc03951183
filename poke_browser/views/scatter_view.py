from __future__ import annotations

import math
from typing import Optional, Sequence, Set, Tuple

import pandas as pd
import plotly.graph_objects as go

from poke_browser.core.base_view import InteractiveView, MarkStyle
from poke_browser.core.interaction_state import FilterEmphasis, InteractionState
from poke_browser.core.record import Record
from poke_browser.core.scales import LinearScale
from poke_browser.core.zoom import ZoomTransform
from poke_browser.views import styles
from poke_browser.views.tooltips import scatter_tooltip

TRANSPARENT = "rgba(0,0,0,0)"

_OPACITY = {
    FilterEmphasis.NEUTRAL: styles.SCATTER_OPACITY,
    FilterEmphasis.EMPHASIZED: styles.SCATTER_OPACITY,
    FilterEmphasis.DIMMED: styles.SCATTER_DIMMED_OPACITY,
}

COLUMNS = [
    "id", "name", "type", "attack", "defense",
    "px", "py", "color", "stroke", "stroke_width", "opacity",
    "selected", "hovered", "tooltip",
]


class ScatterView(InteractiveView):
    """
    Attack vs Defense scatter plot

    - one circle per record, coloured by primary type
    - hover/click take part in cross-view highlight and selection
    - box select acts as the brush filter; scroll zoom / pan rescale both axes
    """

    id = "scatter"
    label = "Attack vs Defense by Primary Type (Interactive)"

    def style_for(self, record_id: str, state: InteractionState, hovered: bool) -> MarkStyle:
        selected = state.is_selected(record_id)
        opacity = _OPACITY[state.emphasis(record_id)]

        if hovered:
            return MarkStyle(styles.SCATTER_HOVER_STROKE, styles.SCATTER_HOVER_WIDTH, opacity, selected, True)
        if selected:
            return MarkStyle(styles.SCATTER_SELECTED_STROKE, styles.SCATTER_SELECTED_WIDTH, opacity, True, False)
        return MarkStyle(None, 0, opacity)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def base_position(self, record: Record) -> Tuple[float, float]:
        return self.scales.x(record.attack), self.scales.y(record.defense)

    def mark_position(self, record: Record, zoom: ZoomTransform) -> Tuple[float, float]:
        return zoom.apply(self.base_position(record))

    def axis_scales(self, zoom: ZoomTransform) -> Tuple[LinearScale, LinearScale]:
        return zoom.rescale_x(self.scales.x), zoom.rescale_y(self.scales.y)

    def ids_in_brush(self, x0: float, y0: float, x1: float, y1: float) -> Set[str]:
        """
        Ids of records whose base pixel position lies inside the rectangle,
        boundaries included. Corner order does not matter.
        """
        left, right = min(x0, x1), max(x0, x1)
        top, bottom = min(y0, y1), max(y0, y1)

        inside: Set[str] = set()
        for r in self.dataset.records:
            px, py = self.base_position(r)
            if left <= px <= right and top <= py <= bottom:
                inside.add(r.id)
        return inside

    def brush_rect_for_domains(
        self, x_domain: Sequence[float], y_domain: Sequence[float]
    ) -> Tuple[float, float, float, float]:
        """Pixel rectangle (x0, y0, x1, y1) covering a data-space box."""
        return (
            self.scales.x(x_domain[0]),
            self.scales.y(y_domain[0]),
            self.scales.x(x_domain[1]),
            self.scales.y(y_domain[1]),
        )

    def zoom_for_domains(self, x_domain: Sequence[float], y_domain: Sequence[float]) -> ZoomTransform:
        return ZoomTransform.from_domains(self.scales.x, self.scales.y, x_domain, y_domain)

    # ------------------------------------------------------------------
    # BaseView
    # ------------------------------------------------------------------
    def compute_data(self, state: InteractionState) -> pd.DataFrame:
        """
        One row per record.

        The figure plots attack/defense against the zoom-rescaled axes; px/py
        are the same marks in zoomed pixel space, kept for hit-testing and
        position checks.
        """
        palette = self.dataset.palette
        rows = []
        for r in self.dataset.records:
            style = self.style_of(r.id)
            px, py = self.mark_position(r, state.zoom)
            rows.append(
                {
                    "id": r.id,
                    "name": r.name,
                    "type": r.primary_type,
                    "attack": r.attack,
                    "defense": r.defense,
                    "px": px,
                    "py": py,
                    "color": palette(r.primary_type),
                    "stroke": style.stroke,
                    "stroke_width": style.stroke_width,
                    "opacity": style.opacity,
                    "selected": style.selected,
                    "hovered": style.hovered,
                    "tooltip": scatter_tooltip(r),
                }
            )
        return pd.DataFrame(rows, columns=COLUMNS)

    def render_figure(self, data: pd.DataFrame, state: InteractionState) -> go.Figure:
        layout = self.scales.layout
        m = layout.margin
        sx, sy = self.axis_scales(state.zoom)

        fig = go.Figure()

        if not data.empty:
            selectedpoints: Optional[list] = None
            if state.brush_active:
                selectedpoints = [i for i, rid in enumerate(data["id"]) if rid in state.filtered]

            fig.add_trace(
                go.Scatter(
                    x=data["attack"],
                    y=data["defense"],
                    mode="markers",
                    customdata=data["id"],
                    hovertext=data["tooltip"],
                    hoverinfo="text",
                    marker=dict(
                        size=styles.SCATTER_RADIUS * 2,
                        color=data["color"],
                        opacity=data["opacity"],
                        line=dict(
                            color=[s if s else TRANSPARENT for s in data["stroke"]],
                            width=data["stroke_width"],
                        ),
                    ),
                    selectedpoints=selectedpoints,
                    selected=dict(marker=dict(opacity=styles.SCATTER_OPACITY)),
                    unselected=dict(marker=dict(opacity=styles.SCATTER_DIMMED_OPACITY)),
                    showlegend=False,
                    name="",
                )
            )

        duration = styles.ZOOM_RESET_TRANSITION_MS if state.zoom_reset else styles.STYLE_TRANSITION_MS

        fig.update_layout(
            title=dict(text=self.label, x=0.5, font=dict(size=13)),
            width=layout.left_width,
            height=layout.top_height,
            margin=dict(l=m.left, r=m.right, t=m.top, b=m.bottom),
            dragmode="select",
            clickmode="event",
            hovermode="closest",
            plot_bgcolor="white",
            showlegend=False,
            uirevision=f"brush-{state.brush_revision}",
            transition=dict(duration=duration, easing="cubic-in-out"),
        )
        fig.update_xaxes(
            title_text="Attack",
            range=list(sx.domain),
            tickvals=_finite(sx.ticks(styles.SCATTER_TICKS)),
            showline=True,
            linecolor="#333",
            zeroline=False,
            showgrid=False,
        )
        fig.update_yaxes(
            title_text="Defense",
            range=list(sy.domain),
            tickvals=_finite(sy.ticks(styles.SCATTER_TICKS)),
            showline=True,
            linecolor="#333",
            zeroline=False,
            showgrid=False,
        )
        return fig


def _finite(values):
    return [v for v in values if math.isfinite(v)]
