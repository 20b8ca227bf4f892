"""Tests for direct messaging."""

import asyncio
import json

import httpx
import pytest

from job_board_client.adapters.http_client import HttpxApiClient
from job_board_client.domain.models import UserProfile
from job_board_client.errors import NotAuthenticatedError, RequestError
from job_board_client.services.messages import MessageService, read_count
from tests.conftest import FakeApi, json_route, text_route


def _login(api_client: HttpxApiClient) -> None:
    api_client.session.set_user_data("token", UserProfile(user_id=1))


def test_send_message_posts_receiver_and_content(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    _login(api_client)
    fake_api.add(
        "POST",
        "/Message/send",
        json_route(200, {"messageId": 3, "receiverId": 2, "content": "Hi"}),
    )

    message = asyncio.run(MessageService(api_client).send_message(2, "Hi"))

    assert json.loads(fake_api.last_request.content) == {
        "receiverId": 2,
        "content": "Hi",
    }
    assert message.message_id == 3


def test_send_message_failure_uses_response_text(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add("POST", "/Message/send", text_route(400, "Receiver not found"))

    with pytest.raises(RequestError, match="Receiver not found"):
        asyncio.run(MessageService(api_client).send_message(2, "Hi"))


def test_conversations_require_a_token(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    service = MessageService(api_client)

    with pytest.raises(NotAuthenticatedError):
        asyncio.run(service.get_conversations())
    with pytest.raises(NotAuthenticatedError):
        asyncio.run(service.get_conversation(2))

    assert fake_api.requests == []


def test_conversations_are_parsed(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    _login(api_client)
    fake_api.add(
        "GET",
        "/Message/conversations",
        json_route(200, [{"otherUserId": 2, "unreadCount": 1}]),
    )
    fake_api.add(
        "GET",
        "/Message/conversation/2",
        json_route(200, [{"messageId": 1}, {"messageId": 2}]),
    )
    service = MessageService(api_client)

    conversations = asyncio.run(service.get_conversations())
    messages = asyncio.run(service.get_conversation(2))

    assert conversations[0].other_user_id == 2
    assert [item.message_id for item in messages] == [1, 2]


def test_unread_count_reads_count_field(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add("GET", "/Message/unread-count", json_route(200, {"count": 4}))

    assert asyncio.run(MessageService(api_client).get_unread_count()) == 4


def test_unread_count_falls_back_to_zero_on_failure(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add("GET", "/Message/unread-count", text_route(500))

    assert asyncio.run(MessageService(api_client).get_unread_count()) == 0


def test_unread_count_falls_back_to_zero_on_transport_error(session_store) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = HttpxApiClient(
        base_url="https://jobs.test/api",
        session=session_store,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    assert asyncio.run(MessageService(client).get_unread_count()) == 0


def test_read_count_defaults() -> None:
    assert read_count({"count": 2}) == 2
    assert read_count({}) == 0
    assert read_count(None) == 0


def test_mark_conversation_as_read(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add(
        "PUT", "/Message/conversation/2/read", json_route(200, {"message": "ok"})
    )

    result = asyncio.run(MessageService(api_client).mark_conversation_as_read(2))

    assert result == {"message": "ok"}
    assert fake_api.last_request.content == b""
