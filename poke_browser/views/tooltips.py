from __future__ import annotations

import html
import math

from poke_browser.core.record import Number, Record


def format_stat(value: Number) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    return str(value)


def _header(record: Record) -> str:
    return f"<b>{html.escape(record.name)}</b><br>Type: {html.escape(record.primary_type)}"


def scatter_tooltip(record: Record) -> str:
    return (
        f"{_header(record)}"
        f"<br>Attack: {format_stat(record.attack)}"
        f"<br>Defense: {format_stat(record.defense)}"
    )


def parallel_tooltip(record: Record) -> str:
    return (
        f"{_header(record)}"
        f"<br>HP: {format_stat(record.hp)}, Attack: {format_stat(record.attack)}"
    )
