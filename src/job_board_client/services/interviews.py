"""Interview scheduling service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any

from job_board_client.adapters.http_client import ApiClient
from job_board_client.domain.interviews import Interview

_ALREADY_SCHEDULED = "An interview has already been scheduled for this applicant."


@dataclass
class InterviewService:
    """CRUD operations on interview schedules plus date-based views.

    The date views fetch the full interview list on every call and filter it
    against the injected clock. Naive clock values and schedule dates are read
    as local time.
    """

    client: ApiClient
    clock: Callable[[], datetime] = field(default=datetime.now)

    async def create_interview(self, interview: dict[str, Any]) -> Interview:
        """Schedule a new interview."""
        payload = await self.client.post(
            "/InterviewSchedule",
            interview,
            action="create interview",
            status_messages={409: _ALREADY_SCHEDULED},
        )
        return Interview.model_validate(payload or {})

    async def get_all_interviews(self) -> list[Interview]:
        """Return every interview visible to the current user."""
        payload = await self.client.get("/InterviewSchedule", action="fetch interviews")
        return [Interview.model_validate(item) for item in payload or []]

    async def get_interviews_by_job_seeker(self, job_seeker_id: int) -> list[Interview]:
        """Return the interviews of a job seeker."""
        payload = await self.client.get(
            f"/InterviewSchedule/jobseeker/{job_seeker_id}",
            action="fetch interviews",
        )
        return [Interview.model_validate(item) for item in payload or []]

    async def get_interview_by_application(self, application_id: int) -> Interview | None:
        """Return the first interview scheduled for an application, if any."""
        interviews = await self.get_all_interviews()
        return next(
            (
                interview
                for interview in interviews
                if interview.job_application_id == application_id
            ),
            None,
        )

    async def get_interview_by_id(self, interview_id: int) -> Interview:
        """Return a single interview."""
        payload = await self.client.get(
            f"/InterviewSchedule/{interview_id}",
            action="fetch interview",
        )
        return Interview.model_validate(payload or {})

    async def update_interview(self, interview_id: int, interview: dict[str, Any]) -> None:
        """Update an interview."""
        await self.client.put(
            f"/InterviewSchedule/{interview_id}",
            interview,
            action="update interview",
        )

    async def delete_interview(self, interview_id: int) -> None:
        """Cancel an interview."""
        await self.client.delete(
            f"/InterviewSchedule/{interview_id}",
            action="delete interview",
        )

    async def get_upcoming_interviews(self) -> list[Interview]:
        """Return interviews at or after now, soonest first."""
        interviews = await self.get_all_interviews()
        return split_by_time(interviews, self.clock())[0]

    async def get_past_interviews(self) -> list[Interview]:
        """Return interviews before now, most recent first."""
        interviews = await self.get_all_interviews()
        return split_by_time(interviews, self.clock())[1]

    async def get_todays_interviews(self) -> list[Interview]:
        """Return interviews scheduled between today's midnight and tomorrow's."""
        interviews = await self.get_all_interviews()
        return on_day(interviews, self.clock())


def split_by_time(
    interviews: list[Interview], now: datetime
) -> tuple[list[Interview], list[Interview]]:
    """Partition dated interviews into (upcoming, past) around ``now``."""
    if now.tzinfo is None:
        now = now.astimezone()
    upcoming: list[tuple[datetime, Interview]] = []
    past: list[tuple[datetime, Interview]] = []
    for interview in interviews:
        scheduled = _scheduled_at(interview)
        if scheduled is None:
            continue
        if scheduled >= now:
            upcoming.append((scheduled, interview))
        else:
            past.append((scheduled, interview))
    upcoming.sort(key=lambda pair: pair[0])
    past.sort(key=lambda pair: pair[0], reverse=True)
    return [item for _, item in upcoming], [item for _, item in past]


def on_day(interviews: list[Interview], now: datetime) -> list[Interview]:
    """Return interviews in the half-open day window containing ``now``."""
    start = _at_midnight(now.date(), now.tzinfo)
    end = _at_midnight(now.date() + timedelta(days=1), now.tzinfo)
    window: list[Interview] = []
    for interview in interviews:
        scheduled = _scheduled_at(interview)
        if scheduled is not None and start <= scheduled < end:
            window.append(interview)
    return window


def _at_midnight(day: date, tz: tzinfo | None) -> datetime:
    """Return midnight of ``day`` in ``tz``, or in local time when naive."""
    midnight = datetime.combine(day, time())
    return midnight.astimezone() if tz is None else midnight.replace(tzinfo=tz)


def _scheduled_at(interview: Interview) -> datetime | None:
    """Return the schedule date as an aware datetime."""
    if interview.schedule_date is None:
        return None
    if interview.schedule_date.tzinfo is None:
        return interview.schedule_date.astimezone()
    return interview.schedule_date
