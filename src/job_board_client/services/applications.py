"""Job application service."""

from dataclasses import dataclass
from typing import Any

from job_board_client.adapters.http_client import ApiClient
from job_board_client.domain.applications import (
    ApplicantDetails,
    ApplicationStatus,
    JobApplication,
)


@dataclass
class ApplicationService:
    """Operations on job applications for job seekers and employers."""

    client: ApiClient

    async def apply_for_job(
        self, job_post_id: int, application_data: dict[str, Any]
    ) -> JobApplication:
        """Submit an application for a job post."""
        payload = await self.client.post(
            "/JobApplication",
            {**application_data, "jobPostId": job_post_id},
            action="apply for job",
        )
        return JobApplication.model_validate(payload or {})

    async def get_my_applications(self, job_seeker_id: int) -> list[JobApplication]:
        """Return the applications submitted by a job seeker."""
        payload = await self.client.get(
            f"/JobApplication/jobseeker/{job_seeker_id}",
            action="fetch applications",
        )
        return [JobApplication.model_validate(item) for item in payload or []]

    async def get_applications_by_job_post(
        self, job_post_id: int
    ) -> list[JobApplication]:
        """Return all applications for a job post (employer view)."""
        payload = await self.client.get(
            f"/JobApplication/jobpost/{job_post_id}",
            action="fetch applications",
        )
        return [JobApplication.model_validate(item) for item in payload or []]

    async def get_application_by_id(self, application_id: int) -> JobApplication:
        """Return a single application."""
        payload = await self.client.get(
            f"/JobApplication/{application_id}",
            action="fetch application",
        )
        return JobApplication.model_validate(payload or {})

    async def update_application_status(
        self, application_id: int, status: ApplicationStatus | int
    ) -> dict[str, Any] | None:
        """Change an application's status (employer action)."""
        return await self.client.put(
            f"/JobApplication/{application_id}/status",
            {"applicationStatus": int(status)},
            action="update application status",
        )

    async def get_applicant_details(self, application_id: int) -> ApplicantDetails:
        """Return a flattened applicant view of an application."""
        application = await self.get_application_by_id(application_id)
        return ApplicantDetails(
            application_id=application.job_application_id,
            job_seeker_id=application.job_seeker_id,
            status=application.application_status,
            date_applied=application.date_applied,
            last_updated=application.last_updated,
            resume=application.resume,
            cover_letter=application.cover_letter,
            job_seeker=application.job_seeker,
            interview=application.interview_schedule,
        )

    async def delete_application(self, application_id: int) -> None:
        """Delete an application."""
        await self.client.delete(
            f"/JobApplication/{application_id}",
            action="delete application",
        )
