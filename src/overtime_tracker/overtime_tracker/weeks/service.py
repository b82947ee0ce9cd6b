from __future__ import annotations

import logging
from typing import Sequence

from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Week
from .payloads import WeekPayload
from .repository import WeekRepository

logger = logging.getLogger(__name__)


class WeekService:
    """Use cases: save, list, read and delete a user's weeks.

    Every week-scoped operation checks ownership before touching storage.
    """

    def __init__(self, weeks: WeekRepository):
        self._weeks = weeks

    def list_weeks(self, *, owner_id: int) -> Sequence[Week]:
        return self._weeks.list_for_owner(int(owner_id))

    def save_week(self, *, owner_id: int, payload: WeekPayload) -> int:
        week_id = self._weeks.create_week(
            owner_id=int(owner_id),
            label=payload.label,
            start_date=payload.start_date,
            config=payload.config,
            entries=payload.entries,
        )
        logger.info("User %s saved week %s (%r)", owner_id, week_id, payload.label)
        return week_id

    def get_week(self, *, owner_id: int, week_id: int) -> Week:
        week = self._weeks.get_by_id(int(week_id))
        if not week:
            raise NotFoundError("Week not found")
        if week.user_id != int(owner_id):
            logger.warning("User %s tried to access week %s owned by another user", owner_id, week_id)
            raise AuthorizationError("You do not have access to this week")
        return week

    def delete_week(self, *, owner_id: int, week_id: int) -> None:
        self.get_week(owner_id=owner_id, week_id=week_id)
        if not self._weeks.delete(int(week_id)):
            raise NotFoundError("Week not found")
        logger.info("User %s deleted week %s", owner_id, week_id)
