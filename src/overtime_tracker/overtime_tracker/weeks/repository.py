from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..payroll.model import PayConfig
from .model import TimeEntry, Week


class WeekRepository(Protocol):
    def create_week(
        self,
        *,
        owner_id: int,
        label: str,
        start_date: Optional[date],
        config: PayConfig,
        entries: Sequence[TimeEntry],
    ) -> int:
        """Insert the week and all its entries as one unit.

        Returns week_id.
        """

        raise NotImplementedError

    def list_for_owner(self, owner_id: int) -> Sequence[Week]:
        """Newest first, each week's entries ordered by day_index."""

        raise NotImplementedError

    def get_by_id(self, week_id: int) -> Optional[Week]:
        raise NotImplementedError

    def delete(self, week_id: int) -> bool:
        raise NotImplementedError
