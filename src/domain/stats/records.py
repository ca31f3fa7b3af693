"""Win/loss records for duos and rivalries, top scorers and headline numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from domain.common import EventType, MatchResult, PowerupEvent
from domain.stats.teams import resolve_team_identity


@dataclass(frozen=True)
class DuoRecord:
    """Win/loss record of one resolved team across all its matches."""

    team_id: str
    wins: int
    losses: int

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        if self.games <= 0:
            return 0.0
        return self.wins / self.games * 100.0


@dataclass(frozen=True)
class RivalryRecord:
    """Head-to-head record between two teams, with team_a < team_b."""

    team_a: str
    team_b: str
    wins_a: int
    wins_b: int

    @property
    def games(self) -> int:
        return self.wins_a + self.wins_b


@dataclass(frozen=True)
class ScorerTally:
    total: int
    rumble: int


@dataclass(frozen=True)
class KpiSummary:
    """Headline numbers shown above the dashboard."""

    total_matches: int
    total_activations: int
    rumble_goals: int
    average_delay: float

    @property
    def average_delay_label(self) -> str:
        return f"{self.average_delay:.2f}"


def compute_duo_records(matches: Iterable[MatchResult]) -> list[DuoRecord]:
    """Tally wins and losses per team, most games first then by team name."""
    tallies: dict[str, list[int]] = {}
    for match in matches:
        for team_num, roster in ((0, match.team0_players), (1, match.team1_players)):
            if not roster:
                continue
            tally = tallies.setdefault(resolve_team_identity(roster), [0, 0])
            if match.winning_team == team_num:
                tally[0] += 1
            else:
                tally[1] += 1

    records = [DuoRecord(team_id=team_id, wins=wins, losses=losses) for team_id, (wins, losses) in tallies.items()]
    records.sort(key=lambda record: (-record.games, record.team_id))
    return records


def compute_rivalries(matches: Iterable[MatchResult]) -> list[RivalryRecord]:
    """Tally head-to-head wins per unordered pair of teams.

    Matches with an empty roster on either side, or with the same identity on
    both sides, are skipped.
    """
    tallies: dict[tuple[str, str], list[int]] = {}
    for match in matches:
        if not match.team0_players or not match.team1_players:
            continue

        team0 = resolve_team_identity(match.team0_players)
        team1 = resolve_team_identity(match.team1_players)
        if team0 == team1:
            continue

        team_a, team_b = sorted((team0, team1))
        winner = team0 if match.winning_team == 0 else team1
        tally = tallies.setdefault((team_a, team_b), [0, 0])
        if winner == team_a:
            tally[0] += 1
        else:
            tally[1] += 1

    records = [
        RivalryRecord(team_a=team_a, team_b=team_b, wins_a=wins_a, wins_b=wins_b)
        for (team_a, team_b), (wins_a, wins_b) in tallies.items()
    ]
    records.sort(key=lambda record: (-record.games, record.team_a, record.team_b))
    return records


def compute_top_scorers(events: Iterable[PowerupEvent]) -> dict[str, ScorerTally]:
    """Goals per player, ordered by total goals then by name."""
    totals: dict[str, int] = {}
    rumble: dict[str, int] = {}
    for event in events:
        if event.event_type is not EventType.GOAL:
            continue
        totals[event.player_name] = totals.get(event.player_name, 0) + 1
        if event.is_rumble_goal:
            rumble[event.player_name] = rumble.get(event.player_name, 0) + 1

    ranked = sorted(totals, key=lambda player: (-totals[player], player))
    return {player: ScorerTally(total=totals[player], rumble=rumble.get(player, 0)) for player in ranked}


def compute_kpi_summary(events: Sequence[PowerupEvent], matches: Sequence[MatchResult]) -> KpiSummary:
    total_activations = 0
    rumble_goals = 0
    total_delay = 0.0
    for event in events:
        if event.event_type is EventType.ACTIVATION:
            total_activations += 1
        elif event.is_rumble_goal:
            rumble_goals += 1
            total_delay += event.delay or 0.0

    return KpiSummary(
        total_matches=len(matches),
        total_activations=total_activations,
        rumble_goals=rumble_goals,
        average_delay=total_delay / rumble_goals if rumble_goals else 0.0,
    )


__all__ = [
    "DuoRecord",
    "KpiSummary",
    "RivalryRecord",
    "ScorerTally",
    "compute_duo_records",
    "compute_kpi_summary",
    "compute_rivalries",
    "compute_top_scorers",
]
