"""Domain models for notifications."""

from typing import Any

from job_board_client.domain.models import ApiModel


class Notification(ApiModel):
    """User notification."""

    notification_id: Any = None
    user_id: Any = None
    title: Any = None
    message: Any = None
    type: Any = None
    is_read: Any = None
    created_at: Any = None
