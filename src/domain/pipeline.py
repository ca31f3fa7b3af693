"""Build every dashboard aggregate from raw events and matches."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

from domain.common import MatchResult, PowerupEvent
from domain.config import DashboardConfig
from domain.protocol import Scope, Subject
from domain.stats.powerups import (
    EntityStats,
    LeaderboardEntry,
    compute_fairness_distribution,
    compute_powerup_leaderboard,
    compute_powerup_stats,
    compute_team_stats,
)
from domain.stats.records import (
    DuoRecord,
    KpiSummary,
    RivalryRecord,
    ScorerTally,
    compute_duo_records,
    compute_kpi_summary,
    compute_rivalries,
    compute_top_scorers,
)
from domain.stats.window import filter_by_day, last_play_day


@dataclass(frozen=True)
class DashboardView:
    """All aggregates computed over one slice of the records."""

    scope: Scope
    summary: KpiSummary
    total_usage: dict[str, int]
    leaderboard: list[LeaderboardEntry]
    player_stats: EntityStats
    team_stats: EntityStats
    player_fairness: dict[str, dict[str, float]]
    team_fairness: dict[str, dict[str, float]]
    duos: list[DuoRecord]
    rivalries: list[RivalryRecord]
    top_scorers: dict[str, ScorerTally]

    def entity_stats(self, subject: Subject) -> EntityStats:
        if subject is Subject.PLAYER:
            return self.player_stats
        return self.team_stats


@dataclass(frozen=True)
class DashboardSnapshot:
    """The overall view plus the optional last play-day view."""

    overall: DashboardView
    last_play_day: date | None
    last_day: DashboardView | None

    def views(self) -> list[DashboardView]:
        if self.last_day is None:
            return [self.overall]
        return [self.overall, self.last_day]


def build_dashboard_view(
    events: Sequence[PowerupEvent],
    matches: Sequence[MatchResult],
    *,
    config: DashboardConfig,
    scope: Scope = Scope.ALL,
) -> DashboardView:
    """Run every aggregation over one record set."""
    seed = config.catalogue if config.seed_catalogue else None

    total_usage, player_stats = compute_powerup_stats(events, catalogue=seed)
    team_stats = compute_team_stats(events, matches, catalogue=seed)

    return DashboardView(
        scope=scope,
        summary=compute_kpi_summary(events, matches),
        total_usage=total_usage,
        leaderboard=compute_powerup_leaderboard(total_usage),
        player_stats=player_stats,
        team_stats=team_stats,
        player_fairness=compute_fairness_distribution(player_stats, config.catalogue),
        team_fairness=compute_fairness_distribution(team_stats, config.catalogue),
        duos=compute_duo_records(matches),
        rivalries=compute_rivalries(matches),
        top_scorers=compute_top_scorers(events),
    )


def build_dashboard_snapshot(
    events: Sequence[PowerupEvent],
    matches: Sequence[MatchResult],
    *,
    config: DashboardConfig,
    echo: Callable[[str], None] | None = None,
) -> DashboardSnapshot:
    """Build the overall view and, when any match exists, the last play-day view."""
    overall = build_dashboard_view(events, matches, config=config, scope=Scope.ALL)
    if echo is not None:
        echo(
            f"scope={Scope.ALL.value} "
            f"events={len(events)} "
            f"matches={len(matches)} "
            f"players={len(overall.player_stats)} "
            f"teams={len(overall.team_stats)}"
        )

    day = last_play_day(matches)
    if day is None:
        if echo is not None:
            echo(f"scope={Scope.LAST_DAY.value} skipped=no_matches")
        return DashboardSnapshot(overall=overall, last_play_day=None, last_day=None)

    day_events = filter_by_day(events, day)
    day_matches = filter_by_day(matches, day)
    last_day = build_dashboard_view(day_events, day_matches, config=config, scope=Scope.LAST_DAY)
    if echo is not None:
        echo(
            f"scope={Scope.LAST_DAY.value} "
            f"day={day.isoformat()} "
            f"events={len(day_events)} "
            f"matches={len(day_matches)}"
        )

    return DashboardSnapshot(overall=overall, last_play_day=day, last_day=last_day)


__all__ = [
    "DashboardSnapshot",
    "DashboardView",
    "build_dashboard_snapshot",
    "build_dashboard_view",
]
