"""Domain models for interview schedules."""

import logging
from datetime import datetime
from typing import Any

from pydantic import field_validator

from job_board_client.domain.models import ApiModel

_logger = logging.getLogger(__name__)


class Interview(ApiModel):
    """Scheduled interview for a job application.

    Only ``job_application_id`` and ``schedule_date`` are read by the client;
    the other fields are passed through as the API sent them.
    """

    interview_schedule_id: Any = None
    job_application_id: Any = None
    job_seeker_id: Any = None
    schedule_date: datetime | None = None
    location: Any = None
    interview_type: Any = None
    notes: Any = None
    status: Any = None

    @field_validator("schedule_date", mode="before")
    @classmethod
    def _lenient_schedule_date(cls, value: object) -> datetime | None:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                pass
        _logger.warning("Ignoring unparseable scheduleDate: %r", value)
        return None
