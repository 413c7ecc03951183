from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)

Pair = Tuple[float, float]


def _js_round(x: float) -> int:
    # half-up, matching Math.round
    return math.floor(x + 0.5)


def extent(values: Iterable[float], default: Pair = (0.0, 1.0)) -> Pair:
    """
    (min, max) of the finite values. nan/inf are ignored; with nothing left
    the default is returned.
    """
    finite = [float(v) for v in values if v is not None and math.isfinite(v)]
    if not finite:
        return default
    return min(finite), max(finite)


def _tick_spec(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    step = (stop - start) / max(0.0, count)
    if not (step > 0) or not math.isfinite(step):
        return 0, -1, 0.0

    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1

    if power < 0:
        inc = math.pow(10, -power) / factor
        i1 = _js_round(start * inc)
        i2 = _js_round(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = math.pow(10, power) * factor
        i1 = _js_round(start / inc)
        i2 = _js_round(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    """
    Step between ticks; negative values encode the inverse of a sub-unit step
    (e.g. -10 means 0.1). 0 when no sensible step exists.
    """
    return _tick_spec(start, stop, count)[2]


def ticks(start: float, stop: float, count: float) -> List[float]:
    if not (count > 0) or not (math.isfinite(start) and math.isfinite(stop)):
        return []
    if start == stop:
        return [start]

    reverse = stop < start
    if reverse:
        start, stop = stop, start

    i1, i2, inc = _tick_spec(start, stop, count)
    if i2 < i1 or inc == 0:
        return []

    n = i2 - i1 + 1
    if inc < 0:
        out = [(i1 + i) / -inc for i in range(n)]
    else:
        out = [(i1 + i) * inc for i in range(n)]

    if reverse:
        out.reverse()
    return out


class LinearScale:
    """
    Continuous linear mapping from a two-value domain to a two-value range.

    No clamping: inputs outside the domain extrapolate, nan propagates.
    A degenerate domain (d0 == d1) maps every input to the range midpoint.
    """

    def __init__(self, domain: Sequence[float], range: Sequence[float]):
        self.domain: Pair = (float(domain[0]), float(domain[1]))
        self.range: Pair = (float(range[0]), float(range[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = d1 - d0
        if span == 0:
            t = 0.5
        else:
            t = (value - d0) / span
        return r0 + t * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        span = r1 - r0
        if span == 0:
            t = 0.5
        else:
            t = (pixel - r0) / span
        return d0 + t * (d1 - d0)

    def copy(self, domain: Optional[Sequence[float]] = None, range: Optional[Sequence[float]] = None) -> LinearScale:
        return LinearScale(
            domain if domain is not None else self.domain,
            range if range is not None else self.range,
        )

    def nice(self, count: int = 10) -> LinearScale:
        """
        Extend the domain outward to round values. Returns a new scale.
        """
        start, stop = self.domain
        reverse = stop < start
        if reverse:
            start, stop = stop, start

        prestep = None
        for _ in range(10):
            step = tick_increment(start, stop, count)
            if step == prestep:
                break
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            prestep = step

        domain = (stop, start) if reverse else (start, stop)
        return self.copy(domain=domain)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearScale):
            return NotImplemented
        return self.domain == other.domain and self.range == other.range

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"


class PointScale:
    """
    Ordinal names to evenly spaced positions across the range, no padding,
    centred alignment.
    """

    def __init__(self, domain: Sequence[str], range: Sequence[float], padding: float = 0.0, align: float = 0.5):
        self.domain: Tuple[str, ...] = tuple(dict.fromkeys(domain))
        self.range: Pair = (float(range[0]), float(range[1]))
        self.padding = padding
        self.align = align

    @property
    def step(self) -> float:
        r0, r1 = self.range
        start, stop = min(r0, r1), max(r0, r1)
        n = len(self.domain)
        return (stop - start) / max(1.0, n - 1 + self.padding * 2)

    def positions(self) -> List[float]:
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        n = len(self.domain)
        step = self.step
        start += (stop - start - step * (n - 1)) * self.align
        values = [start + step * i for i in range(n)]
        if reverse:
            values.reverse()
        return values

    def __call__(self, name: str) -> float:
        try:
            idx = self.domain.index(name)
        except ValueError:
            raise KeyError(f"'{name}' is not in the point scale domain") from None
        return self.positions()[idx]

    def __repr__(self) -> str:
        return f"PointScale(domain={self.domain}, range={self.range})"
