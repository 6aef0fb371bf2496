"""Background timer that fires booster reminder checks."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, tzinfo

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.base import BaseTrigger
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger

from petdoc.application.use_cases.reminders import (
    BoosterReminderEngine,
    DailySchedule,
    IntervalSchedule,
    ReminderSchedule,
    run_offsets,
    select_schedule,
)
from petdoc.application.use_cases.reminders.schedules import ReminderCheck
from petdoc.config import Settings, get_settings
from petdoc.domain.entities import DeploymentMode
from petdoc.utils import get_app_timezone

from .database import SessionLocal
from .email import TemplateEmailSender
from .repositories import DatabaseBoosterQueryService

logger = logging.getLogger(__name__)

REMINDER_JOB_ID = "booster-reminders"


def build_trigger(schedule: ReminderSchedule, tz: tzinfo) -> BaseTrigger:
    """Translate a cadence policy into an APScheduler trigger."""

    if isinstance(schedule, DailySchedule):
        return CronTrigger(hour=schedule.hour, minute=schedule.minute, timezone=tz)
    return IntervalTrigger(minutes=schedule.minutes, timezone=tz)


class ReminderScheduler:
    """Own the single periodic job that drives the reminder engine."""

    def __init__(
        self,
        check: ReminderCheck,
        schedule: ReminderSchedule,
        *,
        mode: DeploymentMode,
        timezone: tzinfo | None = None,
        scheduler: BackgroundScheduler | None = None,
    ) -> None:
        self._check = check
        self.schedule = schedule
        self.mode = mode
        self._timezone = timezone or get_app_timezone()
        self._trigger = build_trigger(schedule, self._timezone)
        self._scheduler = scheduler or BackgroundScheduler(timezone=self._timezone)

    @property
    def offsets(self) -> tuple[int, ...]:
        return self.schedule.offsets

    @property
    def running(self) -> bool:
        return bool(self._scheduler.running)

    def fire(self) -> Sequence[int]:
        """Run one firing and return the offsets whose check failed."""

        label = self.mode.value.upper()
        logger.info(
            "[%s] Starting booster reminder checks for offsets %s",
            label,
            list(self.offsets),
        )
        failed = run_offsets(self._check, self.offsets)
        if failed:
            logger.warning(
                "[%s] Booster reminder checks finished with failures for offsets %s",
                label,
                list(failed),
            )
        else:
            logger.info("[%s] Booster reminder checks finished.", label)
        return failed

    def start(self) -> None:
        """Register the reminder job and start the background timer."""

        job_options: dict[str, object] = {}
        if isinstance(self.schedule, IntervalSchedule):
            # Interval checks run once at start-up, then on every interval.
            job_options["next_run_time"] = datetime.now(tz=self._timezone)

        self._scheduler.add_job(
            self.fire,
            trigger=self._trigger,
            id=REMINDER_JOB_ID,
            name="Booster reminder checks",
            max_instances=1,
            coalesce=True,
            replace_existing=True,
            **job_options,
        )
        self._scheduler.start()
        logger.info(
            "Reminder scheduler started in %s mode (%s)",
            self.mode.value,
            self.schedule.describe(),
        )

    def shutdown(self, wait: bool = False) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
            logger.info("Reminder scheduler stopped")

    def next_run_time(self) -> datetime | None:
        job = self._scheduler.get_job(REMINDER_JOB_ID)
        if job is None:
            return None
        return getattr(job, "next_run_time", None)


def build_reminder_engine(settings: Settings | None = None) -> BoosterReminderEngine:
    """Wire the reminder engine to the database and the SendGrid sender."""

    settings = settings or get_settings()
    return BoosterReminderEngine(
        DatabaseBoosterQueryService(SessionLocal),
        TemplateEmailSender(),
        dashboard_url=settings.dashboard_url,
    )


def build_reminder_scheduler(settings: Settings | None = None) -> ReminderScheduler:
    """Return the scheduler for the configured deployment mode."""

    settings = settings or get_settings()
    mode = settings.deployment_mode
    return ReminderScheduler(
        build_reminder_engine(settings),
        select_schedule(mode, settings),
        mode=mode,
    )


__all__ = [
    "REMINDER_JOB_ID",
    "ReminderScheduler",
    "build_reminder_engine",
    "build_reminder_scheduler",
    "build_trigger",
]
