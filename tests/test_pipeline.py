"""Tests for building full dashboard snapshots."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from domain.common import EventType, MatchResult, PowerupEvent
from domain.config import DashboardConfig
from domain.pipeline import build_dashboard_snapshot, build_dashboard_view
from domain.protocol import Scope, Subject
from domain.stats.powerups import PowerupStat


def _event(
    player: str,
    powerup: str,
    event_type: EventType,
    *,
    game_id: str,
    created_at: datetime,
    team_num: int = 0,
) -> PowerupEvent:
    return PowerupEvent(
        game_id=game_id,
        team_num=team_num,
        player_name=player,
        powerup_name=powerup,
        event_type=event_type,
        created_at=created_at,
    )


DAY_ONE = datetime(2026, 1, 4, 20, 0, 0)
DAY_TWO = datetime(2026, 1, 5, 21, 0, 0)

MATCHES = [
    MatchResult(
        game_id="g1",
        team0_players=("Nix",),
        team1_players=("Zed",),
        winning_team=1,
        created_at=DAY_ONE,
    ),
    MatchResult(
        game_id="g2",
        team0_players=("Zed",),
        team1_players=("Nix",),
        winning_team=1,
        created_at=DAY_TWO,
    ),
]

EVENTS = [
    _event("Nix", "Kaktus", EventType.ACTIVATION, game_id="g1", created_at=DAY_ONE),
    _event("Zed", "Magnet", EventType.ACTIVATION, game_id="g1", created_at=DAY_ONE, team_num=1),
    _event("Zed", "Magnet", EventType.GOAL, game_id="g1", created_at=DAY_ONE, team_num=1),
    _event("Nix", "Kaktus", EventType.ACTIVATION, game_id="g2", created_at=DAY_TWO, team_num=1),
    _event("Nix", "Kaktus", EventType.GOAL, game_id="g2", created_at=DAY_TWO, team_num=1),
]


def test_snapshot_builds_overall_and_last_day_views() -> None:
    lines: list[str] = []
    snapshot = build_dashboard_snapshot(EVENTS, MATCHES, config=DashboardConfig(), echo=lines.append)

    assert snapshot.last_play_day == date(2026, 1, 5)
    assert snapshot.overall.scope is Scope.ALL
    assert snapshot.overall.player_stats["Nix"]["Kaktus"] == PowerupStat(used=2, goals=1)
    assert snapshot.overall.team_stats["Zed"]["Magnet"] == PowerupStat(used=1, goals=1)
    assert [duo.team_id for duo in snapshot.overall.duos] == ["Nix", "Zed"]
    assert snapshot.overall.rivalries[0].wins_a == 1
    assert snapshot.overall.rivalries[0].wins_b == 1

    assert snapshot.last_day is not None
    assert snapshot.last_day.scope is Scope.LAST_DAY
    assert snapshot.last_day.summary.total_matches == 1
    assert snapshot.last_day.player_stats == {"Nix": {"Kaktus": PowerupStat(used=1, goals=1)}}
    assert snapshot.last_day.entity_stats(Subject.TEAM) == {"Nix": {"Kaktus": PowerupStat(used=1, goals=1)}}
    assert len(snapshot.views()) == 2

    assert lines[0].startswith("scope=all events=5 matches=2")
    assert lines[1] == "scope=last_day day=2026-01-05 events=2 matches=1"


def test_snapshot_without_matches_skips_last_day_view() -> None:
    lines: list[str] = []
    snapshot = build_dashboard_snapshot(EVENTS[:1], [], config=DashboardConfig(), echo=lines.append)

    assert snapshot.last_play_day is None
    assert snapshot.last_day is None
    assert snapshot.views() == [snapshot.overall]
    assert snapshot.overall.team_stats == {}
    assert lines[-1] == "scope=last_day skipped=no_matches"


def test_empty_input_yields_identity_results() -> None:
    view = build_dashboard_view([], [], config=DashboardConfig())

    assert view.total_usage == {}
    assert view.leaderboard == []
    assert view.player_stats == {}
    assert view.player_fairness == {}
    assert view.duos == []
    assert view.rivalries == []
    assert view.top_scorers == {}
    assert view.summary.average_delay_label == "0.00"


def test_seed_catalogue_switch_pre_seeds_zero_rows() -> None:
    config = DashboardConfig(catalogue=("Kaktus", "Magnet"), seed_catalogue=True)
    view = build_dashboard_view(EVENTS, MATCHES, config=config)

    assert view.player_stats["Nix"]["Magnet"] == PowerupStat()
    assert view.team_stats["Nix"]["Magnet"] == PowerupStat()
    assert view.player_fairness["Nix"] == {"Kaktus": pytest.approx(100.0), "Magnet": 0.0}
