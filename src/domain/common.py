"""Shared record types for power-up and match statistics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

NO_POWERUP = "None"
UNKNOWN_TEAM = "Unknown"


class EventType(str, Enum):
    """Kind of telemetry row recorded during a match."""

    ACTIVATION = "Activation"
    GOAL = "Goal"


@dataclass(frozen=True)
class PowerupEvent:
    """One power-up activation or goal reported by the match tracker."""

    game_id: str
    team_num: int
    player_name: str
    powerup_name: str
    event_type: EventType
    created_at: datetime
    delay: float | None = None

    @property
    def is_rumble_goal(self) -> bool:
        """Goal scored with a power-up."""
        return self.event_type is EventType.GOAL and self.powerup_name != NO_POWERUP


@dataclass(frozen=True)
class MatchResult:
    """Final result of one match with both rosters."""

    game_id: str
    team0_players: tuple[str, ...]
    team1_players: tuple[str, ...]
    winning_team: int
    created_at: datetime

    def roster(self, team_num: int) -> tuple[str, ...]:
        if team_num == 0:
            return self.team0_players
        if team_num == 1:
            return self.team1_players
        raise ValueError(f"game_id={self.game_id} has no team_num={team_num}")


__all__ = [
    "EventType",
    "MatchResult",
    "NO_POWERUP",
    "PowerupEvent",
    "UNKNOWN_TEAM",
]
