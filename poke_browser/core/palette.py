from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Tuple

import plotly.express as px

# D3 schemeCategory10
DEFAULT_SCHEME: Tuple[str, ...] = tuple(px.colors.qualitative.D3)
UNKNOWN_COLOR = "#7f7f7f"


class CategoryPalette:
    """
    Ordinal mapping from primary type to display colour.

    The domain is the sorted, de-duplicated set of observed types; colours are
    assigned in domain order and cycle through the scheme. The mapping is
    frozen once built.
    """

    def __init__(self, categories: Iterable[str], scheme: Sequence[str] = DEFAULT_SCHEME):
        if not scheme:
            raise ValueError("Colour scheme must contain at least one colour")

        self._domain: Tuple[str, ...] = tuple(sorted(set(categories)))
        self._scheme: Tuple[str, ...] = tuple(scheme)
        self._colors: Mapping[str, str] = MappingProxyType(
            {cat: self._scheme[i % len(self._scheme)] for i, cat in enumerate(self._domain)}
        )

    @property
    def domain(self) -> Tuple[str, ...]:
        return self._domain

    @property
    def colors(self) -> Mapping[str, str]:
        return self._colors

    def __call__(self, category: str) -> str:
        return self._colors.get(category, UNKNOWN_COLOR)

    def __len__(self) -> int:
        return len(self._domain)

    def __contains__(self, category: object) -> bool:
        return category in self._colors
