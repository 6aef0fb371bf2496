"""Read-only view of the booster reminder scheduler."""

from fastapi import APIRouter, Request

from petdoc.config import get_settings
from petdoc.infrastructure.scheduler import ReminderScheduler
from petdoc.interfaces.api.schemas import ReminderScheduleRead

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.get("/schedule", response_model=ReminderScheduleRead)
def read_schedule(request: Request) -> ReminderScheduleRead:
    """Return the cadence, offsets and next firing of the reminder job."""

    scheduler: ReminderScheduler | None = getattr(
        request.app.state, "reminder_scheduler", None
    )
    if scheduler is None:
        return ReminderScheduleRead(
            enabled=False,
            mode=get_settings().deployment_mode,
        )

    return ReminderScheduleRead(
        enabled=True,
        running=scheduler.running,
        mode=scheduler.mode,
        offsets=list(scheduler.offsets),
        cadence=scheduler.schedule.describe(),
        next_run_time=scheduler.next_run_time(),
    )


__all__ = ["router"]
