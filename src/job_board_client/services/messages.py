"""Direct messaging service over plain HTTP."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from job_board_client.adapters.http_client import ApiClient
from job_board_client.domain.messages import Conversation, Message
from job_board_client.errors import JobBoardError

_logger = logging.getLogger(__name__)


@dataclass
class MessageService:
    """Send messages and read conversations."""

    client: ApiClient

    async def send_message(self, receiver_id: int, content: str) -> Message:
        """Send a message to another user."""
        _logger.info("Sending message to user %s", receiver_id)
        payload = await self.client.post(
            "/Message/send",
            {"receiverId": receiver_id, "content": content},
            action="send message",
        )
        return Message.model_validate(payload or {})

    async def get_conversations(self) -> list[Conversation]:
        """Return the current user's conversations."""
        payload = await self.client.get(
            "/Message/conversations",
            action="fetch conversations",
            require_auth=True,
        )
        conversations = [Conversation.model_validate(item) for item in payload or []]
        _logger.info("Loaded %s conversations", len(conversations))
        return conversations

    async def get_conversation(self, other_user_id: int) -> list[Message]:
        """Return the messages exchanged with another user."""
        payload = await self.client.get(
            f"/Message/conversation/{other_user_id}",
            action="fetch conversation",
            require_auth=True,
        )
        messages = [Message.model_validate(item) for item in payload or []]
        _logger.info(
            "Loaded %s messages with user %s", len(messages), other_user_id
        )
        return messages

    async def get_unread_count(self) -> int:
        """Return the unread message count, or 0 if it cannot be fetched."""
        try:
            payload = await self.client.get(
                "/Message/unread-count", action="fetch unread count"
            )
        except (JobBoardError, httpx.HTTPError) as exc:
            _logger.warning("Unread message count unavailable: %s", exc)
            return 0
        return read_count(payload)

    async def mark_conversation_as_read(
        self, other_user_id: int
    ) -> dict[str, Any] | None:
        """Mark every message from another user as read."""
        return await self.client.put(
            f"/Message/conversation/{other_user_id}/read",
            action="mark conversation as read",
        )


def read_count(payload: object) -> int:
    """Extract ``count`` from an unread-count payload, defaulting to 0."""
    if not isinstance(payload, dict):
        return 0
    count = payload.get("count")
    return count if isinstance(count, int) else 0
