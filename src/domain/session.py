"""Dashboard session: owns the current snapshot and each card's sort state."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from domain.common import MatchResult, PowerupEvent
from domain.config import DashboardConfig
from domain.pipeline import DashboardSnapshot, DashboardView, build_dashboard_snapshot
from domain.protocol import Scope, SortColumn, Subject
from domain.ranking import (
    DEFAULT_SORT_SPEC,
    SortCommand,
    SortSpec,
    TableRow,
    build_rows,
    sort_rows,
    toggle_sort,
)


def card_id(scope: Scope, subject: Subject, entity: str) -> str:
    """Stable identifier of one entity card, e.g. ``all/player/Nix``."""
    return f"{scope.value}/{subject.value}/{entity}"


class DashboardSession:
    """View-model for one dashboard session.

    ``load`` replaces the aggregates wholesale and resets every card to the
    default sort. Sort commands only touch the targeted card and re-sort the
    rows it rendered last, so ties stay where the previous render put them.
    """

    def __init__(self, config: DashboardConfig | None = None) -> None:
        self.config = config or DashboardConfig()
        self._snapshot: DashboardSnapshot | None = None
        self._sort_specs: dict[str, SortSpec] = {}
        self._rows: dict[str, list[TableRow]] = {}

    @property
    def snapshot(self) -> DashboardSnapshot | None:
        return self._snapshot

    def load(
        self,
        events: Sequence[PowerupEvent],
        matches: Sequence[MatchResult],
        *,
        echo: Callable[[str], None] | None = None,
    ) -> DashboardSnapshot:
        """Aggregate a freshly fetched record set and rebuild every card."""
        snapshot = build_dashboard_snapshot(events, matches, config=self.config, echo=echo)

        sort_specs: dict[str, SortSpec] = {}
        rows: dict[str, list[TableRow]] = {}
        for view in snapshot.views():
            for subject in Subject:
                for entity, items in view.entity_stats(subject).items():
                    key = card_id(view.scope, subject, entity)
                    sort_specs[key] = DEFAULT_SORT_SPEC
                    rows[key] = sort_rows(build_rows(items), DEFAULT_SORT_SPEC)

        self._snapshot = snapshot
        self._sort_specs = sort_specs
        self._rows = rows
        return snapshot

    def view(self, scope: Scope = Scope.ALL) -> DashboardView | None:
        if self._snapshot is None:
            return None
        if scope is Scope.LAST_DAY:
            return self._snapshot.last_day
        return self._snapshot.overall

    def card_ids(self, scope: Scope | None = None, subject: Subject | None = None) -> list[str]:
        prefix = ""
        if scope is not None:
            prefix = f"{scope.value}/"
            if subject is not None:
                prefix += f"{subject.value}/"
        elif subject is not None:
            return [key for key in self._sort_specs if key.split("/", 2)[1] == subject.value]
        return [key for key in self._sort_specs if key.startswith(prefix)]

    def sort_spec(self, card: str) -> SortSpec:
        try:
            return self._sort_specs[card]
        except KeyError as exc:
            raise KeyError(f"Unknown card id: {card!r}") from exc

    def rows(self, card: str) -> list[TableRow]:
        """Rows of one card in its current sort order."""
        self.sort_spec(card)
        return list(self._rows[card])

    def dispatch(self, command: SortCommand) -> list[TableRow]:
        """Apply one sort command and return the card's re-sorted rows."""
        spec = toggle_sort(self.sort_spec(command.card_id), command.column)
        self._sort_specs[command.card_id] = spec
        self._rows[command.card_id] = sort_rows(self._rows[command.card_id], spec)
        return list(self._rows[command.card_id])

    def sort(self, card: str, column: SortColumn | str) -> list[TableRow]:
        return self.dispatch(SortCommand(card_id=card, column=SortColumn(column)))


__all__ = ["DashboardSession", "card_id"]
