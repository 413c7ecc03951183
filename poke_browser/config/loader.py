from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from poke_browser.config.model import CanvasConfig, GlobalConfig
from poke_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DATA_SOURCE_ENV = "POKE_BROWSER_DATA"
CONFIG_ROOT_ENV = "POKE_BROWSER_CONFIG_ROOT"

_URL_PREFIXES = ("http://", "https://", "ftp://", "s3://", "file://")


def is_url(source: str) -> bool:
    return source.lower().startswith(_URL_PREFIXES)


def _resolve_data_source(raw: str, root: Path) -> Union[str, Path]:
    """
    URLs are kept as-is. Absolute paths are used as-is. Relative paths are
    resolved against the parent of the config root (the project directory).
    """
    if is_url(raw):
        return raw
    path = Path(raw)
    if path.is_absolute():
        return path
    return (root.parent / path).resolve()


def load_global_config(root: Optional[Union[str, Path]] = None) -> GlobalConfig:
    """
    Load configuration from a directory containing 'global.json'.

    Expected structure:

        root/
            global.json

    global.json:

        {
          "global": {
            "ui_title": "...",
            "subtitle": "...",
            "data_source": "data/pokemon.csv",
            "canvas": {"width": 1200, "height": 800, "margin": {...}}
          }
        }

    A missing root or file gives the defaults. POKE_BROWSER_CONFIG_ROOT
    replaces a missing root argument; POKE_BROWSER_DATA overrides the data
    source.

    :raises ConfigError: if global.json is not valid JSON or holds values of
        the wrong type.
    """
    if root is None:
        root = os.getenv(CONFIG_ROOT_ENV, "config")
    root = Path(root)

    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    raw_global = {}
    if global_path.is_file():
        try:
            raw_global = json.loads(global_path.read_text()).get("global", {})
        except (json.JSONDecodeError, AttributeError) as exc:
            raise ConfigError(f"Invalid config file {global_path}: {exc}") from exc
    else:
        logger.warning("No global.json found under %s; using defaults", root)

    if not isinstance(raw_global, dict):
        raise ConfigError(f"'global' in {global_path} must be an object")

    defaults = GlobalConfig()

    try:
        canvas = CanvasConfig.from_raw(raw_global.get("canvas", {}))
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigError(f"Invalid canvas settings in {global_path}: {exc}") from exc

    if canvas.width <= 0 or canvas.height <= 0:
        raise ConfigError(f"Canvas size must be positive, got {canvas.width}x{canvas.height}")
    if not (0 < canvas.left_fraction < 1 and 0 < canvas.top_fraction < 1):
        raise ConfigError("Canvas left_fraction/top_fraction must be between 0 and 1")

    data_raw = os.getenv(DATA_SOURCE_ENV) or raw_global.get("data_source") or str(defaults.data_source)
    if not isinstance(data_raw, str):
        raise ConfigError(f"data_source must be a string, got {type(data_raw).__name__}")

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", defaults.ui_title),
        subtitle=raw_global.get("subtitle", defaults.subtitle),
        data_source=_resolve_data_source(data_raw, root),
        canvas=canvas,
        config_root=root,
    )
