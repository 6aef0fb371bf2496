"""Unit tests for the booster reminder engine."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from fakes import FakeQueryService, RecordingSender, make_record
from petdoc.application.use_cases.reminders import (
    LOGO_REFERENCE,
    REMINDER_TEMPLATE_ID,
    BoosterReminderEngine,
    compose_subject,
    describe_urgency,
)

TODAY = date(2024, 6, 1)
DASHBOARD_URL = "https://petdoc.example.com/dashboard"


def _engine(query_service, sender) -> BoosterReminderEngine:
    return BoosterReminderEngine(
        query_service,
        sender,
        dashboard_url=DASHBOARD_URL,
        today=lambda: TODAY,
    )


@pytest.mark.parametrize("offset", [0, 1, 7, 15, 400])
def test_run_check_queries_today_plus_offset(offset: int) -> None:
    query_service = FakeQueryService()

    _engine(query_service, RecordingSender()).run_check(offset)

    assert query_service.queried == [TODAY + timedelta(days=offset)]


def test_describe_urgency() -> None:
    assert describe_urgency(0) == "TODAY"
    assert describe_urgency(1) == "in 1 day"
    assert describe_urgency(7) == "in 7 days"


def test_same_day_reminder_uses_lowercase_today_label() -> None:
    query_service = FakeQueryService({TODAY: [make_record(booster_date=TODAY)]})
    sender = RecordingSender()

    _engine(query_service, sender).run_check(0)

    assert sender.sent[0].context["urgency"] == "today"


@pytest.mark.parametrize("offset", [1, 7, 15])
def test_future_reminder_label_mentions_offset(offset: int) -> None:
    due = TODAY + timedelta(days=offset)
    query_service = FakeQueryService({due: [make_record(booster_date=due)]})
    sender = RecordingSender()

    _engine(query_service, sender).run_check(offset)

    assert str(offset) in sender.sent[0].context["urgency"]


def test_no_boosters_means_no_sends(caplog) -> None:
    sender = RecordingSender()

    with caplog.at_level("INFO"):
        _engine(FakeQueryService(), sender).run_check(7)

    assert sender.attempts == 0
    assert "No vaccine boosters found for 2024-06-08" in caplog.text


def test_one_send_per_booster_with_owner_address_and_subject() -> None:
    due = TODAY + timedelta(days=15)
    records = [
        make_record(booster_date=due),
        make_record(
            booster_date=due,
            pet_name="Mia",
            vaccine_name="Rabies",
            owner_name="Bruno Lima",
            owner_email="bruno@example.com",
            pet_id=2,
        ),
    ]
    sender = RecordingSender()

    _engine(FakeQueryService({due: records}), sender).run_check(15)

    assert [reminder.to_address for reminder in sender.sent] == [
        "ana@example.com",
        "bruno@example.com",
    ]
    assert sender.sent[0].subject == "Booster Reminder: Rex (V10)"
    assert "Mia" in sender.sent[1].subject and "Rabies" in sender.sent[1].subject
    assert {reminder.template_id for reminder in sender.sent} == {REMINDER_TEMPLATE_ID}


def test_context_carries_template_variables() -> None:
    due = TODAY + timedelta(days=15)
    sender = RecordingSender()

    _engine(FakeQueryService({due: [make_record(booster_date=due)]}), sender).run_check(15)

    assert sender.sent[0].context == {
        "owner_name": "Ana Souza",
        "pet_name": "Rex",
        "vaccine_name": "V10",
        "urgency": "in 15 days",
        "booster_date": "16/06/2024",
        "dashboard_url": DASHBOARD_URL,
        "logo_url": LOGO_REFERENCE,
    }


def test_booster_is_only_found_by_the_matching_offset() -> None:
    record = make_record(booster_date=date(2024, 6, 16))
    query_service = FakeQueryService({record.booster_date: [record]})
    sender = RecordingSender()
    engine = _engine(query_service, sender)

    for offset in (15, 7, 1):
        engine.run_check(offset)

    assert query_service.queried == [date(2024, 6, 16), date(2024, 6, 8), date(2024, 6, 2)]
    assert len(sender.sent) == 1
    assert sender.sent[0].context["urgency"] == "in 15 days"


def test_negative_offset_is_rejected_before_querying() -> None:
    query_service = FakeQueryService()

    with pytest.raises(ValueError):
        _engine(query_service, RecordingSender()).run_check(-1)

    assert query_service.queried == []


def test_query_failure_propagates() -> None:
    query_service = FakeQueryService(error=ConnectionError("database unavailable"))

    with pytest.raises(ConnectionError):
        _engine(query_service, RecordingSender()).run_check(1)


def test_send_failure_stops_the_remaining_records() -> None:
    due = TODAY + timedelta(days=1)
    records = [
        make_record(booster_date=due, owner_email=f"owner{index}@example.com", pet_id=index)
        for index in range(4)
    ]
    sender = RecordingSender(fail_at=1)

    with pytest.raises(RuntimeError):
        _engine(FakeQueryService({due: records}), sender).run_check(1)

    assert sender.attempts == 2
    assert [reminder.to_address for reminder in sender.sent] == ["owner0@example.com"]


def test_compose_subject() -> None:
    record = make_record(booster_date=TODAY, pet_name="Thor", vaccine_name="Leptospirosis")

    assert compose_subject(record) == "Booster Reminder: Thor (Leptospirosis)"
