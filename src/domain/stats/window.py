"""Calendar-day windowing for the last play-day view."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime
from typing import Protocol, TypeVar

from domain.common import MatchResult


class Timestamped(Protocol):
    @property
    def created_at(self) -> datetime: ...


R = TypeVar("R", bound=Timestamped)


def utc_day(moment: datetime) -> date:
    """Calendar date of a timestamp in UTC; naive timestamps are taken as UTC."""
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(UTC).date()


def last_play_day(matches: Iterable[MatchResult]) -> date | None:
    """Date of the most recent match, or None when there are no matches."""
    latest: date | None = None
    for match in matches:
        day = utc_day(match.created_at)
        if latest is None or day > latest:
            latest = day
    return latest


def filter_by_day(records: Iterable[R], day: date) -> list[R]:
    return [record for record in records if utc_day(record.created_at) == day]


__all__ = ["Timestamped", "filter_by_day", "last_play_day", "utc_day"]
