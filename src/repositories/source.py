"""Read-only access to the power-up event and match result tables."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar

from sqlalchemy import JSON, Column, DateTime, Float, Integer, MetaData, String, Table, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from domain.common import EventType, MatchResult, PowerupEvent

_metadata = MetaData()

_powerup_events = Table(
    "powerup_events",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("game_id", String),
    Column("team_num", Integer),
    Column("player_name", String),
    Column("powerup_name", String),
    Column("event_type", String),
    Column("delay", Float),
    Column("created_at", DateTime(timezone=True)),
)

_match_results = Table(
    "match_results",
    _metadata,
    Column("id", Integer, primary_key=True),
    Column("game_id", String),
    Column("team0_players", JSON),
    Column("team1_players", JSON),
    Column("winning_team", Integer),
    Column("created_at", DateTime(timezone=True)),
)

T = TypeVar("T")


class DataFetchError(RuntimeError):
    """Either record set could not be loaded; nothing should be aggregated."""


@dataclass(frozen=True)
class Dataset:
    events: list[PowerupEvent]
    matches: list[MatchResult]


def ensure_source_schema(engine: Engine) -> None:
    """Create the source tables when missing (local databases and tests)."""
    _metadata.create_all(engine, checkfirst=True)


def _team_num(value: object, *, label: str, row_id: object) -> int:
    if value is None:
        raise ValueError(f"id={row_id} has no {label}")
    try:
        team_num = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"id={row_id} has invalid {label}={value!r}") from exc
    if team_num not in (0, 1):
        raise ValueError(f"id={row_id} has invalid {label}={value!r}")
    return team_num


def _created_at(value: object, *, row_id: object) -> datetime:
    if not isinstance(value, datetime):
        raise ValueError(f"id={row_id} has invalid created_at={value!r}")
    return value


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _roster(value: object, *, row_id: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"id={row_id} has invalid roster={value!r}")
    return tuple(str(name) for name in value)


def fetch_events(session: Session) -> list[PowerupEvent]:
    """Fetch every power-up event in chronological order."""
    statement = select(_powerup_events).order_by(
        _powerup_events.c.created_at,
        _powerup_events.c.id,
    )
    rows = session.execute(statement).mappings().all()

    events: list[PowerupEvent] = []
    for row in rows:
        row_id = row["id"]
        try:
            event_type = EventType(row["event_type"])
        except ValueError as exc:
            raise ValueError(f"id={row_id} has invalid event_type={row['event_type']!r}") from exc

        events.append(
            PowerupEvent(
                game_id=str(row["game_id"]),
                team_num=_team_num(row["team_num"], label="team_num", row_id=row_id),
                player_name=str(row["player_name"]),
                powerup_name=str(row["powerup_name"]),
                event_type=event_type,
                delay=_optional_float(row["delay"]),
                created_at=_created_at(row["created_at"], row_id=row_id),
            )
        )
    return events


def fetch_matches(session: Session) -> list[MatchResult]:
    """Fetch every match result in chronological order."""
    statement = select(_match_results).order_by(
        _match_results.c.created_at,
        _match_results.c.id,
    )
    rows = session.execute(statement).mappings().all()

    matches: list[MatchResult] = []
    for row in rows:
        row_id = row["id"]
        matches.append(
            MatchResult(
                game_id=str(row["game_id"]),
                team0_players=_roster(row["team0_players"], row_id=row_id),
                team1_players=_roster(row["team1_players"], row_id=row_id),
                winning_team=_team_num(row["winning_team"], label="winning_team", row_id=row_id),
                created_at=_created_at(row["created_at"], row_id=row_id),
            )
        )
    return matches


def _fetch_in_session(
    session_factory: sessionmaker[Session],
    fetch: Callable[[Session], T],
) -> T:
    with session_factory() as session:
        return fetch(session)


async def load_dataset(session_factory: sessionmaker[Session]) -> Dataset:
    """Fetch both record sets concurrently; fail as a whole if either fails."""
    try:
        events, matches = await asyncio.gather(
            asyncio.to_thread(_fetch_in_session, session_factory, fetch_events),
            asyncio.to_thread(_fetch_in_session, session_factory, fetch_matches),
        )
    except Exception as exc:
        raise DataFetchError(f"Failed to load dashboard data: {exc}") from exc
    return Dataset(events=events, matches=matches)


def fetch_dataset(session_factory: sessionmaker[Session]) -> Dataset:
    """Blocking wrapper around ``load_dataset`` for scripts."""
    return asyncio.run(load_dataset(session_factory))


__all__ = [
    "DataFetchError",
    "Dataset",
    "ensure_source_schema",
    "fetch_dataset",
    "fetch_events",
    "fetch_matches",
    "load_dataset",
]
