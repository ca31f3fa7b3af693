"""Unit tests for last play-day windowing."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

from domain.common import EventType, MatchResult, PowerupEvent
from domain.stats.window import filter_by_day, last_play_day, utc_day


def _match(game_id: str, created_at: datetime) -> MatchResult:
    return MatchResult(
        game_id=game_id,
        team0_players=("Nix",),
        team1_players=("Zed",),
        winning_team=0,
        created_at=created_at,
    )


def _event(game_id: str, created_at: datetime) -> PowerupEvent:
    return PowerupEvent(
        game_id=game_id,
        team_num=0,
        player_name="Nix",
        powerup_name="Kaktus",
        event_type=EventType.ACTIVATION,
        created_at=created_at,
    )


def test_last_play_day_is_date_of_latest_match() -> None:
    matches = [
        _match("g1", datetime(2026, 1, 3, 23, 59, 0)),
        _match("g2", datetime(2026, 1, 5, 0, 1, 0)),
        _match("g3", datetime(2026, 1, 4, 12, 0, 0)),
    ]
    assert last_play_day(matches) == date(2026, 1, 5)


def test_last_play_day_of_no_matches_is_none() -> None:
    assert last_play_day([]) is None


def test_aware_timestamps_are_converted_to_utc_before_truncation() -> None:
    plus_two = timezone(timedelta(hours=2))
    moment = datetime(2026, 1, 5, 1, 0, 0, tzinfo=plus_two)
    assert utc_day(moment) == date(2026, 1, 4)
    assert utc_day(datetime(2026, 1, 5, 1, 0, 0, tzinfo=UTC)) == date(2026, 1, 5)


def test_filter_by_day_keeps_only_records_of_that_day() -> None:
    events = [
        _event("g1", datetime(2026, 1, 4, 22, 0, 0)),
        _event("g2", datetime(2026, 1, 5, 0, 0, 0)),
        _event("g2", datetime(2026, 1, 5, 23, 59, 59)),
    ]
    selected = filter_by_day(events, date(2026, 1, 5))
    assert [event.created_at.hour for event in selected] == [0, 23]
    assert filter_by_day([], date(2026, 1, 5)) == []
