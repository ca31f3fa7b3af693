"""Column sorting for per-entity power-up tables."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from domain.protocol import SortColumn, SortDirection
from domain.stats.powerups import PowerupStat


@dataclass(frozen=True)
class SortSpec:
    column: SortColumn = SortColumn.USED
    direction: SortDirection = SortDirection.DESC


DEFAULT_SORT_SPEC = SortSpec()


@dataclass(frozen=True)
class SortCommand:
    """A request to sort one card's table by a column."""

    card_id: str
    column: SortColumn


@dataclass(frozen=True)
class TableRow:
    name: str
    used: int
    goals: int
    conv: float


def toggle_sort(spec: SortSpec, column: SortColumn) -> SortSpec:
    """Return the spec after a click on ``column``.

    The active column flips direction. A new column starts alphabetical for
    ``name`` and highest-first for the numeric columns.
    """
    column = SortColumn(column)
    if column is spec.column:
        return SortSpec(column=column, direction=spec.direction.flipped())
    if column is SortColumn.NAME:
        return SortSpec(column=column, direction=SortDirection.ASC)
    return SortSpec(column=column, direction=SortDirection.DESC)


def build_rows(items: Mapping[str, PowerupStat]) -> list[TableRow]:
    return [
        TableRow(name=name, used=stat.used, goals=stat.goals, conv=stat.conversion)
        for name, stat in items.items()
    ]


def sort_rows(rows: Sequence[TableRow], spec: SortSpec) -> list[TableRow]:
    """Stable sort, so rows that tie keep their current relative order."""
    reverse = spec.direction is SortDirection.DESC
    if spec.column is SortColumn.NAME:
        return sorted(rows, key=lambda row: row.name, reverse=reverse)
    return sorted(rows, key=lambda row: getattr(row, spec.column.value), reverse=reverse)


def render_rows(items: Mapping[str, PowerupStat], spec: SortSpec) -> list[TableRow]:
    return sort_rows(build_rows(items), spec)


__all__ = [
    "DEFAULT_SORT_SPEC",
    "SortCommand",
    "SortSpec",
    "TableRow",
    "build_rows",
    "render_rows",
    "sort_rows",
    "toggle_sort",
]
