"""Pydantic schemas used by the API layer."""

from .reminder import ReminderScheduleRead

__all__ = ["ReminderScheduleRead"]
