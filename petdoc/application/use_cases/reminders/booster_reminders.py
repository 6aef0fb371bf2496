"""Use case that finds upcoming vaccine boosters and e-mails their owners."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date, timedelta
from typing import Protocol

from petdoc.domain.entities import BoosterRecord, NotificationContext
from petdoc.utils import today_in_app_timezone

logger = logging.getLogger(__name__)

REMINDER_TEMPLATE_ID = "booster-reminder.html"
LOGO_CONTENT_ID = "petdoc-logo.png"
LOGO_REFERENCE = f"cid:{LOGO_CONTENT_ID}"
BOOSTER_DATE_FORMAT = "%d/%m/%Y"


class BoosterQueryService(Protocol):
    """Source of boosters due on a given calendar date."""

    def find_due_on(self, target_date: date) -> Sequence[BoosterRecord]:
        ...


class NotificationSender(Protocol):
    """Renders ``template_id`` with ``context`` and delivers it to ``to_address``."""

    def send(
        self,
        to_address: str,
        subject: str,
        template_id: str,
        context: NotificationContext,
    ) -> None:
        ...


def describe_urgency(offset_days: int) -> str:
    """Return the human readable notice label for ``offset_days``."""

    if offset_days == 0:
        return "TODAY"
    unit = "day" if offset_days == 1 else "days"
    return f"in {offset_days} {unit}"


def compose_subject(record: BoosterRecord) -> str:
    return f"Booster Reminder: {record.pet_name} ({record.vaccine_name})"


def build_notification_context(
    record: BoosterRecord, urgency: str, dashboard_url: str
) -> NotificationContext:
    """Return the template variables used by the booster reminder e-mail."""

    return {
        "owner_name": record.owner_name,
        "pet_name": record.pet_name,
        "vaccine_name": record.vaccine_name,
        "urgency": urgency.lower(),
        "booster_date": record.booster_date.strftime(BOOSTER_DATE_FORMAT),
        "dashboard_url": dashboard_url,
        "logo_url": LOGO_REFERENCE,
    }


class BoosterReminderEngine:
    """Send one reminder per booster falling ``offset_days`` after today.

    The engine does not catch collaborator errors: a failing query or send
    aborts the current check and propagates to the caller, which decides how
    to isolate it.
    """

    def __init__(
        self,
        query_service: BoosterQueryService,
        sender: NotificationSender,
        *,
        dashboard_url: str,
        today: Callable[[], date] = today_in_app_timezone,
    ) -> None:
        self._query_service = query_service
        self._sender = sender
        self._dashboard_url = dashboard_url
        self._today = today

    def run_check(self, offset_days: int) -> None:
        """Notify the owners of every booster due ``offset_days`` from today."""

        if offset_days < 0:
            raise ValueError("offset_days must be zero or positive")

        target_date = self._today() + timedelta(days=offset_days)
        urgency = describe_urgency(offset_days)
        logger.info(
            "Looking for boosters scheduled on %s (%s notice)", target_date, urgency
        )

        records = self._query_service.find_due_on(target_date)
        if not records:
            logger.info("No vaccine boosters found for %s.", target_date)
            return

        logger.info("%d booster(s) found for %s", len(records), target_date)
        for record in records:
            self._send_reminder(record, urgency)

    def _send_reminder(self, record: BoosterRecord, urgency: str) -> None:
        logger.info(
            "Reminder (%s): vaccine=%s pet=%s owner=%s",
            urgency,
            record.vaccine_name,
            record.pet_name,
            record.owner_email,
        )
        context = build_notification_context(record, urgency, self._dashboard_url)
        self._sender.send(
            record.owner_email,
            compose_subject(record),
            REMINDER_TEMPLATE_ID,
            context,
        )


__all__ = [
    "BOOSTER_DATE_FORMAT",
    "BoosterQueryService",
    "BoosterReminderEngine",
    "LOGO_CONTENT_ID",
    "LOGO_REFERENCE",
    "NotificationSender",
    "REMINDER_TEMPLATE_ID",
    "build_notification_context",
    "compose_subject",
    "describe_urgency",
]
