"""CV file download service."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import httpx

from job_board_client.adapters.http_client import ApiClient
from job_board_client.domain.cv import CvFileInfo
from job_board_client.errors import JobBoardError

_logger = logging.getLogger(__name__)


@dataclass
class CvService:
    """Access to uploaded CV files."""

    client: ApiClient

    async def download_cv(self, file_id: int | str) -> bytes:
        """Download the raw CV file."""
        return await self.client.get_bytes(
            f"/FileUpload/cv/{file_id}", action="download CV"
        )

    async def view_cv(self, file_id: int) -> bytes:
        """Return the CV file contents for viewing."""
        return await self.download_cv(file_id)

    async def get_cv_info(self, file_id: int) -> CvFileInfo:
        """Return metadata for a CV file."""
        payload = await self.client.get(
            f"/FileUpload/info/{file_id}", action="fetch CV info"
        )
        return CvFileInfo.model_validate(payload or {})

    async def validate_cv_access(self, file_id: int) -> bool:
        """Return True if the current user may read the CV.

        The backend enforces access; this only checks the metadata endpoint.
        """
        try:
            await self.get_cv_info(file_id)
        except (JobBoardError, httpx.HTTPError) as exc:
            _logger.warning("CV access denied for file %s: %s", file_id, exc)
            return False
        return True

    async def get_cv_by_job_seeker(
        self, job_seeker: Mapping[str, object] | None
    ) -> bytes | None:
        """Download a job seeker's CV, or return None if unavailable."""
        file_id = (job_seeker or {}).get("resumeFileId")
        if not file_id:
            return None
        try:
            return await self.download_cv(str(file_id))
        except (JobBoardError, httpx.HTTPError) as exc:
            _logger.warning("Could not load CV for job seeker: %s", exc)
            return None

    async def download_and_save_cv(
        self, file_id: int, directory: Path, filename: str = "resume.pdf"
    ) -> Path:
        """Download a CV and write it to ``directory / filename``."""
        content = await self.download_cv(file_id)
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / Path(filename).name
        target.write_bytes(content)
        _logger.info("Saved CV %s to %s", file_id, target)
        return target
