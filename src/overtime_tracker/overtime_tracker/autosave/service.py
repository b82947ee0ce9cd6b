from __future__ import annotations

import logging
from typing import Optional

from .model import AutosaveSlot
from .payloads import AutosavePayload
from .repository import AutosaveRepository

logger = logging.getLogger(__name__)


class AutosaveService:
    def __init__(self, autosaves: AutosaveRepository):
        self._autosaves = autosaves

    def get(self, *, owner_id: int) -> Optional[AutosaveSlot]:
        return self._autosaves.get_for_owner(int(owner_id))

    def save(self, *, owner_id: int, payload: AutosavePayload) -> None:
        self._autosaves.upsert(owner_id=int(owner_id), payload=payload)

    def clear(self, *, owner_id: int) -> None:
        # Clearing an empty slot is not an error.
        if self._autosaves.clear(int(owner_id)):
            logger.info("User %s cleared autosave", owner_id)
