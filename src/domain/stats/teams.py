"""Team identity resolution from unordered rosters."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from domain.common import UNKNOWN_TEAM, MatchResult

TEAM_SEPARATOR = " & "


def resolve_team_identity(roster: Sequence[str] | None) -> str:
    """Return the canonical identity for a roster, independent of player order.

    Empty or missing rosters resolve to ``UNKNOWN_TEAM``, which stands for
    missing data rather than a real team.
    """
    if not roster:
        return UNKNOWN_TEAM
    return TEAM_SEPARATOR.join(sorted(roster))


def build_game_team_lookup(matches: Iterable[MatchResult]) -> dict[str, dict[int, str]]:
    """Map each game_id to the identities of its two sides."""
    lookup: dict[str, dict[int, str]] = {}
    for match in matches:
        lookup[match.game_id] = {
            0: resolve_team_identity(match.team0_players),
            1: resolve_team_identity(match.team1_players),
        }
    return lookup


__all__ = ["TEAM_SEPARATOR", "build_game_team_lookup", "resolve_team_identity"]
