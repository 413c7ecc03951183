from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

Number = Union[int, float]

# (axis label / CSV column, Record attribute) in the fixed parallel-coordinates order
DIMENSIONS: Tuple[Tuple[str, str], ...] = (
    ("HP", "hp"),
    ("Attack", "attack"),
    ("Defense", "defense"),
    ("Sp_Atk", "special_attack"),
    ("Sp_Def", "special_defense"),
    ("Speed", "speed"),
)

DIMENSION_NAMES: Tuple[str, ...] = tuple(name for name, _ in DIMENSIONS)
STAT_ATTRIBUTES: Dict[str, str] = dict(DIMENSIONS)


def make_record_id(name: str, primary_type: str) -> str:
    return f"{name}_{primary_type}"


@dataclass(frozen=True)
class Record:
    """
    One dataset row.

    Stat fields are ints after ingestion, or nan when the source cell was not
    numeric. `id` is derived from name and primary type and is the key used to
    find the same entity in every view. Two rows with the same name and type
    share an id.
    """

    name: str
    primary_type: str
    hp: Number
    attack: Number
    defense: Number
    special_attack: Number
    special_defense: Number
    speed: Number
    is_legendary: bool = False
    id: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", make_record_id(self.name, self.primary_type))

    def stat(self, dimension: str) -> Number:
        """Value for a dimension name such as 'Sp_Atk'."""
        return getattr(self, STAT_ATTRIBUTES[dimension])
