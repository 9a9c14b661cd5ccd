from __future__ import annotations

from pydantic import BaseModel, Field


class ProfileStats(BaseModel):
    total: int
    by_state: dict[str, int] = Field(default_factory=dict)
    completed_by_location: dict[str, int] = Field(default_factory=dict)
    notifications_sent: int = 0
