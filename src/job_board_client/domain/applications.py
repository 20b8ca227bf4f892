"""Domain models for job applications."""

from enum import IntEnum
from typing import Any

from job_board_client.domain.interviews import Interview
from job_board_client.domain.models import ApiModel


class ApplicationStatus(IntEnum):
    """Application status codes used by the API."""

    PENDING = 0
    REVIEWED = 1
    ACCEPTED = 2
    REJECTED = 3


class JobApplication(ApiModel):
    """Job application as returned by the API."""

    job_application_id: Any = None
    job_post_id: Any = None
    job_seeker_id: Any = None
    application_status: Any = None
    date_applied: Any = None
    last_updated: Any = None
    resume: Any = None
    cover_letter: Any = None
    job_seeker: Any = None
    interview_schedule: Interview | None = None


class ApplicantDetails(ApiModel):
    """Flattened applicant view of a job application."""

    application_id: Any = None
    job_seeker_id: Any = None
    status: Any = None
    date_applied: Any = None
    last_updated: Any = None
    resume: Any = None
    cover_letter: Any = None
    job_seeker: Any = None
    interview: Interview | None = None
