from __future__ import annotations

from typing import Optional, Protocol

from .model import AutosaveSlot
from .payloads import AutosavePayload


class AutosaveRepository(Protocol):
    def get_for_owner(self, owner_id: int) -> Optional[AutosaveSlot]:
        raise NotImplementedError

    def upsert(self, *, owner_id: int, payload: AutosavePayload) -> None:
        """Create or replace the user's single draft."""

        raise NotImplementedError

    def clear(self, owner_id: int) -> bool:
        raise NotImplementedError
