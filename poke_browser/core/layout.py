from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence

from poke_browser.config.model import CanvasConfig, Margin

from .record import DIMENSION_NAMES, Record
from .scales import LinearScale, PointScale, extent


@dataclass(frozen=True)
class CanvasLayout:
    """
    Fixed partition of the drawing surface.

    Left column (scatter above donut) takes `left_fraction` of the width, the
    right column the rest; the top row takes `top_fraction` of the height.
    The parallel-coordinates plot lives in the bottom-right cell.
    """

    width: float
    height: float
    left_fraction: float = 0.4
    top_fraction: float = 0.5
    margin: Margin = field(default_factory=Margin)

    @classmethod
    def from_config(cls, canvas: CanvasConfig) -> CanvasLayout:
        return cls(
            width=canvas.width,
            height=canvas.height,
            left_fraction=canvas.left_fraction,
            top_fraction=canvas.top_fraction,
            margin=canvas.margin,
        )

    @property
    def left_width(self) -> float:
        return self.width * self.left_fraction

    @property
    def right_width(self) -> float:
        return self.width - self.left_width

    @property
    def top_height(self) -> float:
        return self.height * self.top_fraction

    @property
    def bottom_height(self) -> float:
        return self.height - self.top_height

    @property
    def parallel_width(self) -> float:
        return self.right_width - self.margin.left - self.margin.right

    @property
    def parallel_height(self) -> float:
        return self.bottom_height - self.margin.top - self.margin.bottom

    @property
    def scatter_plot_area(self):
        """((x0, y0), (x1, y1)) of the scatter plot area, also the brush extent."""
        m = self.margin
        return (m.left, m.top), (self.left_width - m.right, self.top_height - m.bottom)


@dataclass(frozen=True)
class ScaleSet:
    """All scales derived from one record set and one layout."""

    layout: CanvasLayout
    x: LinearScale
    y: LinearScale
    dimensions: PointScale
    stats: Dict[str, LinearScale]


def build_scales(records: Sequence[Record], layout: CanvasLayout) -> ScaleSet:
    """
    Derive the scatter and parallel-coordinates scales. Pure: the same records
    and layout always produce equal scales.
    """
    m = layout.margin

    x = LinearScale(
        extent(r.attack for r in records),
        (m.left, layout.left_width - m.right),
    ).nice()
    y = LinearScale(
        extent(r.defense for r in records),
        (layout.top_height - m.bottom, m.top),
    ).nice()

    stats = {
        dim: LinearScale(
            extent(r.stat(dim) for r in records),
            (layout.parallel_height, 0),
        ).nice()
        for dim in DIMENSION_NAMES
    }

    dimensions = PointScale(DIMENSION_NAMES, (0, layout.parallel_width))

    return ScaleSet(layout=layout, x=x, y=y, dimensions=dimensions, stats=stats)
