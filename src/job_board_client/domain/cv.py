"""Domain models for uploaded CV files."""

from typing import Any

from job_board_client.domain.models import ApiModel


class CvFileInfo(ApiModel):
    """Metadata for an uploaded CV file."""

    file_id: Any = None
    file_name: Any = None
    content_type: Any = None
    file_size: Any = None
    uploaded_at: Any = None
