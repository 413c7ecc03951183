from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from .scales import LinearScale

MIN_ZOOM = 0.5
MAX_ZOOM = 10.0


@dataclass(frozen=True)
class ZoomTransform:
    """
    Uniform scale k followed by translation (x, y), in pixel space.

    A base pixel position p maps to p * k + t. Rescaled axes are obtained by
    pulling the base scale's range back through the transform.
    """

    k: float = 1.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def identity(cls) -> ZoomTransform:
        return cls()

    @property
    def is_identity(self) -> bool:
        return self.k == 1.0 and self.x == 0.0 and self.y == 0.0

    def apply(self, point: Tuple[float, float]) -> Tuple[float, float]:
        return self.apply_x(point[0]), self.apply_y(point[1])

    def apply_x(self, px: float) -> float:
        return px * self.k + self.x

    def apply_y(self, py: float) -> float:
        return py * self.k + self.y

    def invert_x(self, px: float) -> float:
        return (px - self.x) / self.k

    def invert_y(self, py: float) -> float:
        return (py - self.y) / self.k

    def rescale_x(self, scale: LinearScale) -> LinearScale:
        return scale.copy(domain=[scale.invert(self.invert_x(r)) for r in scale.range])

    def rescale_y(self, scale: LinearScale) -> LinearScale:
        return scale.copy(domain=[scale.invert(self.invert_y(r)) for r in scale.range])

    def clamped(self, min_k: float = MIN_ZOOM, max_k: float = MAX_ZOOM) -> ZoomTransform:
        """
        Clamp k into [min_k, max_k]; the translation is scaled by the same
        ratio, i.e. the correction zooms about the pixel origin.
        """
        k = min(max(self.k, min_k), max_k)
        if k == self.k:
            return self
        ratio = k / self.k
        return ZoomTransform(k=k, x=self.x * ratio, y=self.y * ratio)

    @classmethod
    def from_domains(
        cls,
        x_scale: LinearScale,
        y_scale: LinearScale,
        x_domain: Sequence[float],
        y_domain: Sequence[float],
    ) -> ZoomTransform:
        """
        Transform whose rescaled x axis shows `x_domain`, anchored on the
        lower y bound of `y_domain`. The scale factor comes from the x span
        so the zoom stays uniform; it is clamped into the allowed range.
        """
        r0, r1 = x_scale.range
        p0, p1 = x_scale(x_domain[0]), x_scale(x_domain[1])
        if p1 == p0:
            return cls.identity()
        k = min(max((r1 - r0) / (p1 - p0), MIN_ZOOM), MAX_ZOOM)

        x = r0 - k * p0
        y = y_scale.range[0] - k * y_scale(y_domain[0])
        return cls(k=k, x=x, y=y)

    def to_dict(self) -> Dict[str, float]:
        return {"k": self.k, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ZoomTransform:
        """
        :raises ValueError: if k is not a positive finite number or the
            translation is not finite
        """
        if not data:
            return cls.identity()
        k = float(data.get("k", 1.0))
        x = float(data.get("x", 0.0))
        y = float(data.get("y", 0.0))
        if not (math.isfinite(k) and k > 0):
            raise ValueError(f"Zoom scale must be a positive finite number, got {k!r}")
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Zoom translation must be finite, got ({x!r}, {y!r})")
        return cls(k=k, x=x, y=y).clamped()
