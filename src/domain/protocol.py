"""Shared enums for dashboard cards and table sorting."""

from __future__ import annotations

from enum import Enum


class Subject(str, Enum):
    """What entity a statistics card describes."""

    PLAYER = "player"
    TEAM = "team"


class Scope(str, Enum):
    """Which slice of the records a view was built from."""

    ALL = "all"
    LAST_DAY = "last_day"


class SortColumn(str, Enum):
    """Sortable columns of a power-up table."""

    NAME = "name"
    USED = "used"
    GOALS = "goals"
    CONV = "conv"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


__all__ = ["Scope", "SortColumn", "SortDirection", "Subject"]
