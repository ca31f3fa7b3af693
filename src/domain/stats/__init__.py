"""Aggregation of raw events and matches into dashboard statistics."""

from domain.stats.powerups import (
    EntityStats,
    LeaderboardEntry,
    PowerupStat,
    compute_fairness_distribution,
    compute_powerup_leaderboard,
    compute_powerup_stats,
    compute_team_stats,
    ranked_powerups,
    stat_totals,
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
from domain.stats.teams import build_game_team_lookup, resolve_team_identity
from domain.stats.window import filter_by_day, last_play_day

__all__ = [
    "DuoRecord",
    "EntityStats",
    "KpiSummary",
    "LeaderboardEntry",
    "PowerupStat",
    "RivalryRecord",
    "ScorerTally",
    "build_game_team_lookup",
    "compute_duo_records",
    "compute_fairness_distribution",
    "compute_kpi_summary",
    "compute_powerup_leaderboard",
    "compute_powerup_stats",
    "compute_rivalries",
    "compute_team_stats",
    "compute_top_scorers",
    "filter_by_day",
    "last_play_day",
    "ranked_powerups",
    "resolve_team_identity",
    "stat_totals",
]
