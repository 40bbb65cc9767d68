"""Repository protocol for user lookups used on the dashboard."""

from __future__ import annotations

from typing import Protocol


class UserRepository(Protocol):
    async def get_display_name(self, user_id: int) -> str | None:
        ...
