from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Margin:
    """Inset, in pixels, between a partition's bounds and its plot area."""
    top: float = 40
    right: float = 20
    bottom: float = 40
    left: float = 60

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> Margin:
        defaults = cls()
        return cls(
            top=float(raw.get("top", defaults.top)),
            right=float(raw.get("right", defaults.right)),
            bottom=float(raw.get("bottom", defaults.bottom)),
            left=float(raw.get("left", defaults.left)),
        )


@dataclass(frozen=True)
class CanvasConfig:
    """
    Size of the host drawing surface and how it is split between the views.
    """
    width: float = 1200
    height: float = 800
    left_fraction: float = 0.4
    top_fraction: float = 0.5
    margin: Margin = field(default_factory=Margin)

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> CanvasConfig:
        defaults = cls()
        return cls(
            width=float(raw.get("width", defaults.width)),
            height=float(raw.get("height", defaults.height)),
            left_fraction=float(raw.get("left_fraction", defaults.left_fraction)),
            top_fraction=float(raw.get("top_fraction", defaults.top_fraction)),
            margin=Margin.from_raw(raw.get("margin", {})),
        )


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - data_source: CSV path or URL
    - canvas: drawing-surface geometry
    - config_root: directory the config was read from (None for defaults)
    """
    ui_title: str = "Pokemon Stat Browser"
    subtitle: str = "Attack, defense and stat profiles by type"
    data_source: Union[str, Path] = Path("data/pokemon.csv")
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    config_root: Optional[Path] = None
