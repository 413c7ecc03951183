from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import html

from poke_browser.core.dataset import Dataset
from poke_browser.core.palette import CategoryPalette
from poke_browser.ui.ids import IDs

SWATCH_SIZE = 8


def build_type_legend(palette: CategoryPalette) -> html.Div:
    items = [
        html.Span(
            [
                html.Span(
                    className="pkb-swatch",
                    style={
                        "display": "inline-block",
                        "width": f"{SWATCH_SIZE}px",
                        "height": f"{SWATCH_SIZE}px",
                        "backgroundColor": palette(t),
                        "marginRight": "4px",
                    },
                ),
                html.Span(t, style={"fontSize": "10px"}),
            ],
            className="pkb-legend-item me-3",
        )
        for t in palette.domain
    ]
    return html.Div(items, id=IDs.Control.TYPE_LEGEND, className="pkb-legend d-flex flex-wrap")


def build_status_panel(dataset: Dataset, width: float, height: float) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(html.Strong("Selection"), className="p-2"),
            dbc.CardBody(
                [
                    html.Div(id=IDs.Control.STATUS_SELECTION, className="mb-2"),
                    html.Div(id=IDs.Control.STATUS_FILTER, className="mb-2"),
                    html.Div(id=IDs.Control.STATUS_ZOOM, className="mb-3"),
                    html.Div(
                        [
                            html.Small(f"{len(dataset)} records • primary types", className="text-muted"),
                            build_type_legend(dataset.palette),
                        ]
                    ),
                ],
                id=IDs.Control.STATUS_PANEL,
            ),
        ],
        className="pkb-status m-3",
        style={"maxWidth": f"{width - 32}px", "maxHeight": f"{height - 32}px", "overflowY": "auto"},
    )


def format_name_list(names: List[str], limit: int = 5) -> str:
    if not names:
        return "None"
    shown = ", ".join(names[:limit])
    if len(names) > limit:
        shown += f" (+{len(names) - limit})"
    return shown
