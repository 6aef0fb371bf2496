"""Pydantic models describing the reminder scheduler state."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from petdoc.domain.entities import DeploymentMode


class ReminderScheduleRead(BaseModel):
    """Snapshot of the active booster reminder cadence."""

    enabled: bool
    running: bool = False
    mode: DeploymentMode
    offsets: list[int] = Field(default_factory=list)
    cadence: str | None = None
    next_run_time: datetime | None = None


__all__ = ["ReminderScheduleRead"]
