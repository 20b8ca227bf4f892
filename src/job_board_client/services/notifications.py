"""Notification service and subscription slot."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from job_board_client.adapters.http_client import ApiClient
from job_board_client.domain.notifications import Notification
from job_board_client.errors import JobBoardError
from job_board_client.services.messages import read_count

_logger = logging.getLogger(__name__)

NotificationCallback = Callable[[Notification], None]


@dataclass
class NotificationSubscription:
    """Single-slot observer for pushed notifications.

    No transport is attached; ``dispatch`` is the entry point a push channel
    would call.
    """

    callback: NotificationCallback | None = None

    def subscribe(self, callback: NotificationCallback) -> None:
        """Register the active callback, replacing any previous one."""
        self.callback = callback
        _logger.info("Subscribed to notifications")

    def unsubscribe(self) -> None:
        """Drop the active callback."""
        self.callback = None
        _logger.info("Unsubscribed from notifications")

    @property
    def is_active(self) -> bool:
        """Return True when a callback is registered."""
        return self.callback is not None

    def dispatch(self, notification: Notification) -> bool:
        """Deliver a notification to the active callback, if any."""
        if self.callback is None:
            return False
        self.callback(notification)
        return True


@dataclass
class NotificationService:
    """Read and manage the current user's notifications."""

    client: ApiClient
    subscription: NotificationSubscription = field(
        default_factory=NotificationSubscription
    )

    def subscribe_to_notifications(self, callback: NotificationCallback) -> None:
        """Register a callback for pushed notifications."""
        self.subscription.subscribe(callback)

    def unsubscribe(self) -> None:
        """Remove the registered notification callback."""
        self.subscription.unsubscribe()

    async def get_all_notifications(self) -> list[Notification]:
        """Return all notifications."""
        payload = await self.client.get("/Notification", action="fetch notifications")
        return [Notification.model_validate(item) for item in payload or []]

    async def get_unread_count(self) -> int:
        """Return the unread notification count, or 0 if it cannot be fetched."""
        try:
            payload = await self.client.get(
                "/Notification/unread", action="fetch unread count"
            )
        except (JobBoardError, httpx.HTTPError) as exc:
            _logger.warning("Unread notification count unavailable: %s", exc)
            return 0
        return read_count(payload)

    async def mark_as_read(self, notification_id: int) -> dict[str, Any] | None:
        """Mark a notification as read."""
        return await self.client.put(
            f"/Notification/{notification_id}/read",
            action="mark notification as read",
        )

    async def mark_all_as_read(self) -> dict[str, Any] | None:
        """Mark every notification as read."""
        return await self.client.put(
            "/Notification/read-all",
            action="mark all notifications as read",
        )

    async def delete_notification(self, notification_id: int) -> dict[str, Any] | None:
        """Delete a notification."""
        return await self.client.delete(
            f"/Notification/{notification_id}",
            action="delete notification",
        )
