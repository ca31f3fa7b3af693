"""Power-up and match statistics domain modules."""

from domain.common import EventType, MatchResult, PowerupEvent
from domain.protocol import Scope, SortColumn, SortDirection, Subject

__all__ = [
    "EventType",
    "MatchResult",
    "PowerupEvent",
    "Scope",
    "SortColumn",
    "SortDirection",
    "Subject",
]
