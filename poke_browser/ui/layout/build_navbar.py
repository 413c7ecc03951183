from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from poke_browser.config.model import GlobalConfig
from poke_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", "Pokemon Stat Browser")
    subtitle = getattr(global_config, "subtitle", "")

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(
                            subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: control surface
                html.Div(
                    [
                        dbc.Button(
                            "Clear selection",
                            id=IDs.Control.CLEAR_SELECTION_BTN,
                            color="secondary",
                            size="sm",
                            className="me-2",
                            n_clicks=0,
                        ),
                        dbc.Button(
                            "Reset zoom",
                            id=IDs.Control.RESET_ZOOM_BTN,
                            color="secondary",
                            outline=True,
                            size="sm",
                            n_clicks=0,
                        ),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm pkb-navbar",
    )
