"""Domain models for direct messages."""

from typing import Any

from job_board_client.domain.models import ApiModel


class Message(ApiModel):
    """Message exchanged between two users."""

    message_id: Any = None
    sender_id: Any = None
    receiver_id: Any = None
    content: Any = None
    sent_at: Any = None
    is_read: Any = None


class Conversation(ApiModel):
    """Conversation summary with another user."""

    other_user_id: Any = None
    other_user_name: Any = None
    last_message: Any = None
    last_message_time: Any = None
    unread_count: Any = None
