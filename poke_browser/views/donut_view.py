from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pandas as pd
import plotly.graph_objects as go

from poke_browser.core.base_view import BaseView
from poke_browser.core.interaction_state import InteractionState
from poke_browser.views import styles


@dataclass(frozen=True)
class PieSlice:
    key: str
    label: str
    count: int
    start_angle: float
    end_angle: float

    @property
    def angle(self) -> float:
        return self.end_angle - self.start_angle


def pie_layout(groups: Sequence[Tuple[str, str, int]], total_angle: float = 2 * math.pi) -> List[PieSlice]:
    """
    Angles for (key, label, count) groups.

    Slices keep their input order, but angles are laid out clockwise from 0
    in descending count order (ties keep input order), each proportional to
    its count. With a zero total every slice is empty.
    """
    total = sum(count for _, _, count in groups)
    k = total_angle / total if total else 0.0

    order = sorted(range(len(groups)), key=lambda i: -groups[i][2])
    angles = {}
    cursor = 0.0
    for i in order:
        span = groups[i][2] * k
        angles[i] = (cursor, cursor + span)
        cursor += span

    return [
        PieSlice(key=key, label=label, count=count, start_angle=angles[i][0], end_angle=angles[i][1])
        for i, (key, label, count) in enumerate(groups)
    ]


class DonutView(BaseView):
    """
    Legendary vs non-legendary distribution.

    Static: drawn once, ignores selection, filter and hover.
    """

    id = "donut"
    label = "Legendary vs Non-Legendary Distribution"

    def compute_data(self, state: InteractionState) -> pd.DataFrame:
        normal, legendary = self.dataset.legendary_counts()
        slices = pie_layout(
            [
                ("false", "Normal", normal),
                ("true", "Legendary", legendary),
            ]
        )
        return pd.DataFrame(
            {
                "key": [s.key for s in slices],
                "label": [s.label for s in slices],
                "count": [s.count for s in slices],
                "start_angle": [s.start_angle for s in slices],
                "end_angle": [s.end_angle for s in slices],
                "color": [styles.LEGENDARY_COLOR if s.key == "true" else styles.NORMAL_COLOR for s in slices],
                "text": [f"{s.label} ({s.count})" for s in slices],
            }
        )

    def render_figure(self, data: pd.DataFrame, state: InteractionState) -> go.Figure:
        if data.empty or data["count"].sum() == 0:
            return self.empty_figure("No records loaded")

        layout = self.scales.layout
        fig = go.Figure(
            go.Pie(
                labels=data["label"],
                values=data["count"],
                text=data["text"],
                textinfo="text",
                textposition="inside",
                insidetextorientation="horizontal",
                hoverinfo="text",
                hovertext=data["text"],
                marker=dict(colors=data["color"]),
                hole=styles.DONUT_INNER_RADIUS / styles.DONUT_OUTER_RADIUS,
                sort=True,
                direction="clockwise",
                rotation=0,
                showlegend=False,
            )
        )
        fig.update_layout(
            title=dict(text=self.label, x=0.5, font=dict(size=13)),
            width=layout.left_width,
            height=layout.bottom_height,
            margin=dict(l=20, r=20, t=60, b=20),
        )
        return fig
