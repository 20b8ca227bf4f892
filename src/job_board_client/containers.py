"""Dependency container wiring for the client."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx

from job_board_client.adapters.http_client import HttpxApiClient
from job_board_client.adapters.storage import JsonFileStorage, KeyValueStorage
from job_board_client.config import Settings
from job_board_client.services.applications import ApplicationService
from job_board_client.services.auth import AuthService
from job_board_client.services.cv import CvService
from job_board_client.services.faq import FaqService
from job_board_client.services.interviews import InterviewService
from job_board_client.services.messages import MessageService
from job_board_client.services.notifications import NotificationService
from job_board_client.services.session import SessionStore


@dataclass
class AppContainer:
    """Holds client-wide dependencies."""

    settings: Settings
    session_store: SessionStore
    api_client: HttpxApiClient
    auth_service: AuthService
    faq_service: FaqService
    application_service: ApplicationService
    interview_service: InterviewService
    message_service: MessageService
    notification_service: NotificationService
    cv_service: CvService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    session_store = SessionStore(
        storage or JsonFileStorage(resolved_settings.session_file)
    )
    client = HttpxApiClient.create(
        base_url=resolved_settings.api_url,
        session=session_store,
        timeout=resolved_settings.request_timeout_seconds,
        http_client=http_client,
    )

    notification_service = NotificationService(client)
    session_store.add_teardown_hook(notification_service.unsubscribe)

    async def close_resources() -> None:
        await client.close()

    return AppContainer(
        settings=resolved_settings,
        session_store=session_store,
        api_client=client,
        auth_service=AuthService(client, session_store),
        faq_service=FaqService(client),
        application_service=ApplicationService(client),
        interview_service=InterviewService(client),
        message_service=MessageService(client),
        notification_service=notification_service,
        cv_service=CvService(client),
        close_resources=close_resources,
    )
