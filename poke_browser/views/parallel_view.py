from __future__ import annotations

import math
from typing import List, Tuple

import pandas as pd
import plotly.graph_objects as go

from poke_browser.core.base_view import InteractiveView, MarkStyle
from poke_browser.core.interaction_state import FilterEmphasis, InteractionState
from poke_browser.core.record import DIMENSION_NAMES, Record
from poke_browser.views import styles
from poke_browser.views.tooltips import parallel_tooltip

_OPACITY = {
    FilterEmphasis.NEUTRAL: styles.LINE_OPACITY,
    FilterEmphasis.EMPHASIZED: styles.LINE_EMPHASIZED_OPACITY,
    FilterEmphasis.DIMMED: styles.LINE_DIMMED_OPACITY,
}

COLUMNS = [
    "id", "name", "type", "x", "y", "color",
    "stroke_width", "opacity", "selected", "hovered", "tooltip",
]

AXIS_COLOR = "#000000"
LABEL_OFFSET = 10

# line traces hover only at their points
HOVER_SAMPLES = 8


def densify(xs: List[float], ys: List[float], samples: int) -> Tuple[List[float], List[float]]:
    """
    Insert `samples - 1` evenly spaced points inside every segment. The
    original vertices are kept; non-finite coordinates stay non-finite.
    """
    if len(xs) < 2 or samples < 2:
        return list(xs), list(ys)

    out_x, out_y = [xs[0]], [ys[0]]
    for (x0, y0), (x1, y1) in zip(zip(xs, ys), zip(xs[1:], ys[1:])):
        for i in range(1, samples):
            t = i / samples
            out_x.append(x0 + t * (x1 - x0))
            out_y.append(y0 + t * (y1 - y0))
        out_x.append(x1)
        out_y.append(y1)
    return out_x, out_y


class ParallelView(InteractiveView):
    """
    Parallel-coordinates plot over the six stat dimensions.

    Drawn in pixel space: x from the dimension point scale, y from each
    dimension's own linear scale, both with the pixel origin at the top-left
    of the plot area.
    """

    id = "parallel"
    label = "Pokemon Stat Profiles - Parallel Plot"

    def style_for(self, record_id: str, state: InteractionState, hovered: bool) -> MarkStyle:
        selected = state.is_selected(record_id)

        if hovered:
            return MarkStyle(None, styles.LINE_HOVER_WIDTH, styles.LINE_HOVER_OPACITY, selected, True)
        if selected:
            return MarkStyle(None, styles.LINE_SELECTED_WIDTH, styles.LINE_SELECTED_OPACITY, True, False)
        return MarkStyle(None, styles.LINE_WIDTH, _OPACITY[state.emphasis(record_id)])

    def vertices(self, record: Record) -> List[Tuple[float, float]]:
        """One (x, y) per dimension, in the fixed dimension order."""
        return [
            (self.scales.dimensions(dim), self.scales.stats[dim](record.stat(dim)))
            for dim in DIMENSION_NAMES
        ]

    def compute_data(self, state: InteractionState) -> pd.DataFrame:
        palette = self.dataset.palette
        rows = []
        for r in self.dataset.records:
            style = self.style_of(r.id)
            points = self.vertices(r)
            rows.append(
                {
                    "id": r.id,
                    "name": r.name,
                    "type": r.primary_type,
                    "x": [p[0] for p in points],
                    "y": [p[1] for p in points],
                    "color": palette(r.primary_type),
                    "stroke_width": style.stroke_width,
                    "opacity": style.opacity,
                    "selected": style.selected,
                    "hovered": style.hovered,
                    "tooltip": parallel_tooltip(r),
                }
            )
        return pd.DataFrame(rows, columns=COLUMNS)

    def render_figure(self, data: pd.DataFrame, state: InteractionState) -> go.Figure:
        layout = self.scales.layout
        m = layout.margin
        width, height = layout.parallel_width, layout.parallel_height

        fig = go.Figure()

        for row in data.itertuples(index=False):
            xs, ys = densify(row.x, row.y, HOVER_SAMPLES)
            n = len(xs)
            fig.add_trace(
                go.Scatter(
                    x=xs,
                    y=ys,
                    mode="lines",
                    line=dict(color=row.color, width=row.stroke_width),
                    opacity=row.opacity,
                    customdata=[row.id] * n,
                    hovertext=[row.tooltip] * n,
                    hoverinfo="text",
                    cliponaxis=False,
                    showlegend=False,
                    name=row.name,
                )
            )

        for trace in self._axis_traces(height):
            fig.add_trace(trace)

        for dim in DIMENSION_NAMES:
            fig.add_annotation(
                x=self.scales.dimensions(dim),
                y=-LABEL_OFFSET,
                text=dim,
                showarrow=False,
                yanchor="bottom",
                font=dict(size=10, color=AXIS_COLOR),
            )

        fig.update_layout(
            title=dict(text=self.label, x=0.5, font=dict(size=13)),
            width=layout.right_width,
            height=layout.bottom_height,
            margin=dict(l=m.left, r=m.right, t=m.top, b=m.bottom),
            dragmode=False,
            clickmode="event",
            hovermode="closest",
            plot_bgcolor="white",
            showlegend=False,
            uirevision="parallel",
            transition=dict(duration=styles.STYLE_TRANSITION_MS, easing="cubic-in-out"),
        )
        fig.update_xaxes(range=[0, width], visible=False, fixedrange=True)
        # pixel space: 0 at the top
        fig.update_yaxes(range=[height, 0], visible=False, fixedrange=True)
        return fig

    def _axis_traces(self, height: float) -> List[go.Scatter]:
        traces = []
        for dim in DIMENSION_NAMES:
            x = self.scales.dimensions(dim)
            scale = self.scales.stats[dim]
            tick_values = [t for t in scale.ticks(styles.PARALLEL_TICKS) if math.isfinite(t)]

            traces.append(
                go.Scatter(
                    x=[x, x],
                    y=[0, height],
                    mode="lines",
                    line=dict(color=AXIS_COLOR, width=1),
                    hoverinfo="skip",
                    cliponaxis=False,
                    showlegend=False,
                )
            )
            traces.append(
                go.Scatter(
                    x=[x] * len(tick_values),
                    y=[scale(t) for t in tick_values],
                    mode="markers+text",
                    marker=dict(symbol="line-ew-open", size=6, color=AXIS_COLOR),
                    text=[f"{t:g}" for t in tick_values],
                    textposition="middle left",
                    textfont=dict(size=9),
                    hoverinfo="skip",
                    cliponaxis=False,
                    showlegend=False,
                )
            )
        return traces
