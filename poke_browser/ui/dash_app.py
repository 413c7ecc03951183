from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from poke_browser.config.loader import load_global_config
from poke_browser.config.model import GlobalConfig
from poke_browser.core.dataset import Dataset
from poke_browser.core.dataset_loader import load_dataset
from poke_browser.core.layout import CanvasLayout, build_scales
from poke_browser.core.view_registry import ViewRegistry
from poke_browser.ui.layout.build_layout import build_layout
from poke_browser.ui.callbacks.callbacks_interaction import register_interaction_callbacks
from poke_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from poke_browser.views import (
        ScatterView,
        DonutView,
        ParallelView,
    )

    registry = ViewRegistry()
    registry.register(ScatterView)
    registry.register(DonutView)
    registry.register(ParallelView)
    return registry


def build_app_config(global_config: GlobalConfig, dataset: Optional[Dataset] = None) -> AppConfig:
    """
    Load the dataset (unless given), derive the scales and wire the registry.
    """
    if dataset is None:
        dataset = load_dataset(global_config.data_source)

    layout = CanvasLayout.from_config(global_config.canvas)
    scales = build_scales(dataset.records, layout)

    ctx = AppConfig(
        global_config=global_config,
        dataset=dataset,
        scales=scales,
        registry=_build_view_registry(),
    )
    ctx.validate()
    return ctx


def create_dash_app(
    config_root: Union[Path, str, None] = None,
    dataset: Optional[Dataset] = None,
) -> Dash:
    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load data + scales (once, shared read-only by every callback)
    ctx = build_app_config(global_config, dataset)
    logger.info(
        "app_config_ready",
        extra={"dataset": ctx.dataset.name, "n_records": len(ctx.dataset)},
    )

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = getattr(global_config, "ui_title", "Pokemon Stat Browser")

    app.layout = build_layout(ctx)

    # Register callbacks
    register_interaction_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
