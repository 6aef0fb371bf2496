"""Reminder cadence policies selected by the deployment mode."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, Union

from petdoc.config import Settings
from petdoc.domain.entities import DeploymentMode

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTION_OFFSETS: tuple[int, ...] = (15, 7, 1)


class ReminderCheck(Protocol):
    def run_check(self, offset_days: int) -> None:
        ...


@dataclass(frozen=True)
class DailySchedule:
    """Production cadence: one firing per day covering every lookahead offset."""

    offsets: tuple[int, ...] = DEFAULT_PRODUCTION_OFFSETS
    hour: int = 8
    minute: int = 0

    def __post_init__(self) -> None:
        if not self.offsets:
            raise ValueError("A daily schedule needs at least one offset")
        if any(offset < 0 for offset in self.offsets):
            raise ValueError("Reminder offsets cannot be negative")
        object.__setattr__(
            self, "offsets", tuple(sorted(set(self.offsets), reverse=True))
        )

    def describe(self) -> str:
        return f"daily at {self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class IntervalSchedule:
    """Development cadence: frequent firings that only look at today's boosters."""

    minutes: int = 30
    offsets: tuple[int, ...] = (0,)

    def __post_init__(self) -> None:
        if self.minutes <= 0:
            raise ValueError("The reminder interval must be positive")

    def describe(self) -> str:
        return f"every {self.minutes} minutes"


ReminderSchedule = Union[DailySchedule, IntervalSchedule]


def select_schedule(mode: DeploymentMode, settings: Settings) -> ReminderSchedule:
    """Return the single cadence policy active for ``mode``."""

    if mode is DeploymentMode.PRODUCTION:
        return DailySchedule(
            offsets=tuple(settings.reminder_offsets),
            hour=settings.reminder_hour,
            minute=settings.reminder_minute,
        )
    return IntervalSchedule(minutes=settings.development_interval_minutes)


def run_offsets(check: ReminderCheck, offsets: Iterable[int]) -> Sequence[int]:
    """Run ``check`` for each offset in order and return the offsets that failed.

    A failure for one offset is logged and does not prevent the remaining
    offsets from running.
    """

    failed: list[int] = []
    for offset in offsets:
        try:
            check.run_check(offset)
        except Exception:
            logger.exception("Booster reminder check for offset %s failed", offset)
            failed.append(offset)
    return failed


__all__ = [
    "DEFAULT_PRODUCTION_OFFSETS",
    "DailySchedule",
    "IntervalSchedule",
    "ReminderCheck",
    "ReminderSchedule",
    "run_offsets",
    "select_schedule",
]
