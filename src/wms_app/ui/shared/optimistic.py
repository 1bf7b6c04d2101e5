"""Apply a tentative change, commit it remotely, restore the snapshot on failure.

Rows are expected to be replaced rather than mutated in place (pydantic
``model_copy``), so a shallow copy of the list is an exact snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimisticOutcome:
    ok: bool
    error: Exception | None = None
    rolled_back: bool = False


@dataclass
class OptimisticList(Generic[T]):
    rows: list[T] = field(default_factory=list)

    def replace_all(self, rows: list[T]) -> None:
        self.rows = list(rows)

    def snapshot(self) -> list[T]:
        return list(self.rows)

    def apply(
        self,
        transform: Callable[[list[T]], list[T]],
        commit: Callable[[], object],
        *,
        on_applied: Callable[[], None] | None = None,
        label: str = "update",
    ) -> OptimisticOutcome:
        before = self.snapshot()
        self.rows = transform(self.snapshot())
        if on_applied:
            on_applied()
        try:
            commit()
        except Exception as exc:
            self.rows = before
            logger.warning("optimistic_rollback", extra={"label": label, "error_type": type(exc).__name__})
            return OptimisticOutcome(ok=False, error=exc, rolled_back=True)
        return OptimisticOutcome(ok=True)

    def replace_where(
        self,
        match: Callable[[T], bool],
        replacement: T,
        commit: Callable[[], object],
        *,
        on_applied: Callable[[], None] | None = None,
        label: str = "update",
    ) -> OptimisticOutcome:
        return self.apply(
            lambda rows: [replacement if match(row) else row for row in rows],
            commit,
            on_applied=on_applied,
            label=label,
        )
