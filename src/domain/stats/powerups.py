"""Per-entity power-up usage, goal and fairness aggregation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from domain.common import NO_POWERUP, UNKNOWN_TEAM, EventType, MatchResult, PowerupEvent
from domain.stats.teams import build_game_team_lookup


@dataclass
class PowerupStat:
    """Activation and goal counts for one (entity, power-up) cell."""

    used: int = 0
    goals: int = 0

    @property
    def conversion(self) -> float:
        """Goals per activation as a percentage, 0 when never used."""
        if self.used <= 0:
            return 0.0
        return self.goals / self.used * 100.0


EntityStats = dict[str, dict[str, PowerupStat]]


@dataclass(frozen=True)
class LeaderboardEntry:
    name: str
    count: int
    share_of_max: float


class _StatsAccumulator:
    """Dictionary-backed fold of events into entity -> power-up -> stat cells."""

    def __init__(self, catalogue: Sequence[str] | None = None) -> None:
        self._catalogue = tuple(catalogue or ())
        self._stats: EntityStats = {}

    def add(self, entity: str, event: PowerupEvent) -> None:
        items = self._entity(entity)
        stat = items.get(event.powerup_name)
        if stat is None:
            stat = items[event.powerup_name] = PowerupStat()

        if event.event_type is EventType.ACTIVATION:
            stat.used += 1
        elif event.event_type is EventType.GOAL and event.powerup_name != NO_POWERUP:
            stat.goals += 1

    def result(self) -> EntityStats:
        return self._stats

    def _entity(self, entity: str) -> dict[str, PowerupStat]:
        items = self._stats.get(entity)
        if items is None:
            items = self._stats[entity] = {name: PowerupStat() for name in self._catalogue}
        return items


def compute_powerup_stats(
    events: Iterable[PowerupEvent],
    *,
    catalogue: Sequence[str] | None = None,
) -> tuple[dict[str, int], EntityStats]:
    """Fold events into total usage per power-up and per-player stats.

    Every player with at least one event gets an entry, with a cell for each
    power-up its events name, including ``"None"``. When ``catalogue`` is
    given, each new player is pre-seeded with a zero cell per catalogue
    power-up so zero-activity rows are still rendered.
    """
    total_usage: dict[str, int] = {}
    accumulator = _StatsAccumulator(catalogue)

    for event in events:
        if event.event_type is EventType.ACTIVATION:
            total_usage[event.powerup_name] = total_usage.get(event.powerup_name, 0) + 1
        accumulator.add(event.player_name, event)

    return total_usage, accumulator.result()


def compute_team_stats(
    events: Iterable[PowerupEvent],
    matches: Iterable[MatchResult],
    *,
    catalogue: Sequence[str] | None = None,
) -> EntityStats:
    """Fold events into per-team stats, joining on (game_id, team_num).

    Events without a matching game are dropped, as are events whose side
    resolves to the unknown team.
    """
    game_teams = build_game_team_lookup(matches)
    accumulator = _StatsAccumulator(catalogue)

    for event in events:
        sides = game_teams.get(event.game_id)
        if sides is None:
            continue
        team_name = sides.get(event.team_num, UNKNOWN_TEAM)
        if team_name == UNKNOWN_TEAM:
            continue
        accumulator.add(team_name, event)

    return accumulator.result()


def compute_fairness_distribution(
    stats: Mapping[str, Mapping[str, PowerupStat]],
    catalogue: Sequence[str],
) -> dict[str, dict[str, float]]:
    """Share of each entity's activations per catalogue power-up, in percent.

    The denominator is the entity's usage over every power-up it activated,
    so shares only sum to 100 when all of that usage falls in the catalogue.
    """
    distribution: dict[str, dict[str, float]] = {}
    for entity in sorted(stats):
        items = stats[entity]
        total_used = sum(stat.used for stat in items.values())
        row: dict[str, float] = {}
        for powerup_name in catalogue:
            stat = items.get(powerup_name)
            count = stat.used if stat is not None else 0
            row[powerup_name] = count / total_used * 100.0 if total_used > 0 else 0.0
        distribution[entity] = row
    return distribution


def compute_powerup_leaderboard(total_usage: Mapping[str, int]) -> list[LeaderboardEntry]:
    """Rank power-ups by total activations with bar widths relative to the top one."""
    ranked = sorted(total_usage.items(), key=lambda item: (-item[1], item[0]))
    max_count = ranked[0][1] if ranked and ranked[0][1] > 0 else 1
    return [
        LeaderboardEntry(name=name, count=count, share_of_max=count / max_count * 100.0)
        for name, count in ranked
    ]


def ranked_powerups(items: Mapping[str, PowerupStat]) -> list[str]:
    """Chart label order for one entity: most used first, then alphabetical."""
    return sorted(items, key=lambda name: (-items[name].used, name))


def stat_totals(items: Mapping[str, PowerupStat]) -> tuple[int, int]:
    used = sum(stat.used for stat in items.values())
    goals = sum(stat.goals for stat in items.values())
    return used, goals


__all__ = [
    "EntityStats",
    "LeaderboardEntry",
    "PowerupStat",
    "compute_fairness_distribution",
    "compute_powerup_leaderboard",
    "compute_powerup_stats",
    "compute_team_stats",
    "ranked_powerups",
    "stat_totals",
]
