"""Booster reminder use cases and cadence policies."""

from .booster_reminders import (
    LOGO_CONTENT_ID,
    LOGO_REFERENCE,
    REMINDER_TEMPLATE_ID,
    BoosterQueryService,
    BoosterReminderEngine,
    NotificationSender,
    build_notification_context,
    compose_subject,
    describe_urgency,
)
from .schedules import (
    DEFAULT_PRODUCTION_OFFSETS,
    DailySchedule,
    IntervalSchedule,
    ReminderSchedule,
    run_offsets,
    select_schedule,
)

__all__ = [
    "LOGO_CONTENT_ID",
    "LOGO_REFERENCE",
    "REMINDER_TEMPLATE_ID",
    "BoosterQueryService",
    "BoosterReminderEngine",
    "NotificationSender",
    "build_notification_context",
    "compose_subject",
    "describe_urgency",
    "DEFAULT_PRODUCTION_OFFSETS",
    "DailySchedule",
    "IntervalSchedule",
    "ReminderSchedule",
    "run_offsets",
    "select_schedule",
]
