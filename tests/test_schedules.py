"""Tests for the reminder cadence policies and the isolated offset loop."""

from __future__ import annotations

import pytest

from fakes import RecordingCheck
from petdoc.application.use_cases.reminders import (
    DailySchedule,
    IntervalSchedule,
    run_offsets,
    select_schedule,
)
from petdoc.config import Settings
from petdoc.domain.entities import DeploymentMode


def test_daily_schedule_runs_offsets_in_descending_order_without_duplicates() -> None:
    schedule = DailySchedule(offsets=(1, 7, 15, 7))

    assert schedule.offsets == (15, 7, 1)
    assert schedule.describe() == "daily at 08:00"


@pytest.mark.parametrize("offsets", [(), (7, -1)])
def test_daily_schedule_rejects_invalid_offsets(offsets) -> None:
    with pytest.raises(ValueError):
        DailySchedule(offsets=offsets)


def test_interval_schedule_only_checks_today() -> None:
    schedule = IntervalSchedule()

    assert schedule.offsets == (0,)
    assert schedule.describe() == "every 30 minutes"

    with pytest.raises(ValueError):
        IntervalSchedule(minutes=0)


def test_production_mode_selects_daily_schedule() -> None:
    settings = Settings(reminder_hour=9, reminder_minute=30)

    schedule = select_schedule(DeploymentMode.PRODUCTION, settings)

    assert isinstance(schedule, DailySchedule)
    assert schedule.offsets == (15, 7, 1)
    assert (schedule.hour, schedule.minute) == (9, 30)


def test_development_mode_selects_interval_schedule() -> None:
    settings = Settings(development_interval_minutes=5)

    schedule = select_schedule(DeploymentMode.DEVELOPMENT, settings)

    assert isinstance(schedule, IntervalSchedule)
    assert schedule.minutes == 5
    assert schedule.offsets == (0,)


def test_run_offsets_keeps_going_after_a_failure(caplog) -> None:
    check = RecordingCheck(failing_offsets={15})

    with caplog.at_level("ERROR"):
        failed = run_offsets(check, (15, 7, 1))

    assert check.calls == [15, 7, 1]
    assert failed == [15]
    assert "offset 15 failed" in caplog.text


def test_run_offsets_reports_no_failures() -> None:
    check = RecordingCheck()

    assert run_offsets(check, (15, 7, 1)) == []
    assert check.calls == [15, 7, 1]
