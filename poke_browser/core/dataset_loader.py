from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from .dataset import Dataset
from .exceptions import DatasetSchemaError
from .record import DIMENSIONS, Number, Record

logger = logging.getLogger(__name__)

NAME_COLUMN = "Name"
TYPE_COLUMN = "Type_1"
LEGENDARY_COLUMN = "isLegendary"
LEGENDARY_TOKEN = "True"

REQUIRED_COLUMNS = (NAME_COLUMN, TYPE_COLUMN)

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_RADIX_RE = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$", re.ASCII)
_RADIX = {"x": 16, "o": 8, "b": 2}


def coerce_stat(raw: Optional[str]) -> Number:
    """
    Weak numeric coercion of a raw cell.

    Whitespace is trimmed and an empty cell counts as 0. Decimal literals,
    exponents, Infinity and 0x/0o/0b integers parse; anything else is nan.
    Integral results are returned as int.
    """
    if raw is None:
        return math.nan

    text = str(raw).strip()
    if text == "":
        return 0

    if _DECIMAL_RE.match(text):
        value = float(text)
    elif text.lstrip("+-") == "Infinity":
        value = -math.inf if text.startswith("-") else math.inf
    else:
        radix = _RADIX_RE.match(text)
        if radix is None:
            return math.nan
        try:
            return int(radix.group(2), _RADIX[radix.group(1).lower()])
        except ValueError:
            return math.nan

    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def parse_legendary(raw: Optional[str]) -> bool:
    return raw == LEGENDARY_TOKEN


def _validate_columns(df: pd.DataFrame, source: str) -> None:
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        msg = f"Dataset '{source}' is missing required column(s): {', '.join(missing)}"
        logger.error(msg, extra={"source": source, "columns": list(df.columns)})
        raise DatasetSchemaError(msg)


def records_from_frame(df: pd.DataFrame, source: str = "<memory>") -> List[Record]:
    """
    Convert a frame of raw string cells into typed Records, in row order.
    """
    _validate_columns(df, source)

    absent = [col for col, _ in DIMENSIONS if col not in df.columns]
    if absent:
        logger.warning(
            "Stat column(s) %s absent from '%s'; values will be nan",
            ", ".join(absent),
            source,
        )

    records: List[Record] = []
    n_non_numeric = 0

    for row in df.to_dict(orient="records"):
        stats = {}
        for col, attr in DIMENSIONS:
            value = coerce_stat(row.get(col))
            if col in row and isinstance(value, float) and math.isnan(value):
                n_non_numeric += 1
            stats[attr] = value

        records.append(
            Record(
                name=str(row[NAME_COLUMN]),
                primary_type=str(row[TYPE_COLUMN]),
                is_legendary=parse_legendary(row.get(LEGENDARY_COLUMN)),
                **stats,
            )
        )

    if n_non_numeric:
        logger.warning(
            "%d non-numeric stat cell(s) in '%s' coerced to nan",
            n_non_numeric,
            source,
            extra={"source": source, "n_non_numeric": n_non_numeric},
        )

    return records


def load_dataset(source: Union[str, Path], name: Optional[str] = None) -> Dataset:
    """
    Read a CSV (path or URL) and materialise a Dataset.

    Every column is read as a string so that numeric coercion happens exactly
    once, in records_from_frame.
    """
    source_str = str(source)

    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        logger.error("Could not read dataset from '%s'", source_str, exc_info=True)
        raise DatasetSchemaError(f"Could not read dataset from '{source_str}': {exc}") from exc

    records = records_from_frame(df, source_str)
    ds = Dataset(
        name=name or Path(source_str).stem,
        records=records,
        source=source_str,
    )

    dupes = ds.duplicate_ids()
    if dupes:
        logger.warning(
            "Record ids are not unique for dataset '%s'; cross-view matching is ambiguous for %d id(s)",
            ds.name,
            len(dupes),
            extra={"dataset": ds.name, "duplicate_ids": dupes[:10]},
        )

    logger.info(
        "dataset_loaded",
        extra={"dataset": ds.name, "source": source_str, "n_records": len(ds), "n_types": len(ds.types)},
    )
    return ds
