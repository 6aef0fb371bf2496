"""Aggregate application use cases."""

from .reminders import BoosterReminderEngine, run_offsets, select_schedule

__all__ = [
    "BoosterReminderEngine",
    "run_offsets",
    "select_schedule",
]
