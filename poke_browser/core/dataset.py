from __future__ import annotations

from dataclasses import dataclass, field, asdict
from functools import cached_property
from typing import Dict, List, Optional, Tuple

import pandas as pd

from .palette import CategoryPalette
from .record import Record


@dataclass
class Dataset:
    """
    Loaded record set plus the derived, read-only lookups the views share.

    Fields:

    - name: display name of the dataset
    - records: rows in source order
    - source: path or URL the rows came from (None for in-memory datasets)
    """

    name: str
    records: List[Record] = field(default_factory=list)
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    @cached_property
    def types(self) -> List[str]:
        return sorted({r.primary_type for r in self.records})

    @cached_property
    def palette(self) -> CategoryPalette:
        return CategoryPalette(self.types)

    @cached_property
    def by_id(self) -> Dict[str, List[Record]]:
        """
        Records grouped by id. Colliding ids (same name and type) keep every
        record, in source order.
        """
        grouped: Dict[str, List[Record]] = {}
        for r in self.records:
            grouped.setdefault(r.id, []).append(r)
        return grouped

    @cached_property
    def ids(self) -> Tuple[str, ...]:
        return tuple(r.id for r in self.records)

    def duplicate_ids(self) -> List[str]:
        return [rid for rid, rows in self.by_id.items() if len(rows) > 1]

    def names_for(self, ids) -> List[str]:
        """Display names for ids, sorted; unknown ids are skipped."""
        names = {self.by_id[i][0].name for i in ids if i in self.by_id}
        return sorted(names)

    def legendary_counts(self) -> Tuple[int, int]:
        """(normal, legendary) counts"""
        legendary = sum(1 for r in self.records if r.is_legendary)
        return len(self.records) - legendary, legendary

    def to_frame(self) -> pd.DataFrame:
        if not self.records:
            return pd.DataFrame(columns=[f for f in Record.__dataclass_fields__])
        return pd.DataFrame([asdict(r) for r in self.records])
