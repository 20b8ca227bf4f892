"""Tests for FAQ management."""

import asyncio
import json

import pytest

from job_board_client.adapters.http_client import HttpxApiClient
from job_board_client.domain.faq import Faq
from job_board_client.errors import RequestError
from job_board_client.services.faq import FaqService
from tests.conftest import FakeApi, json_route, text_route


def test_get_all_faqs_parses_entries(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add(
        "GET",
        "/Faq",
        json_route(
            200,
            [
                {
                    "faqId": 1,
                    "question": "How do I apply?",
                    "answer": "Click apply.",
                    "category": "General",
                    "displayOrder": 0,
                    "isPublished": True,
                }
            ],
        ),
    )

    faqs = asyncio.run(FaqService(api_client).get_all_faqs())

    assert faqs == [
        Faq(
            faq_id=1,
            question="How do I apply?",
            answer="Click apply.",
            category="General",
            display_order=0,
            is_published=True,
        )
    ]


def test_get_all_faqs_empty_body_returns_empty_list(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add("GET", "/Faq", text_route(204))

    assert asyncio.run(FaqService(api_client).get_all_faqs()) == []


def test_create_and_update_send_camel_case_bodies(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add("POST", "/Faq", json_route(201, {"faqId": 5, "question": "Q"}))
    fake_api.add("PUT", "/Faq/5", text_route(204))
    service = FaqService(api_client)

    created = asyncio.run(
        service.create_faq(Faq(question="Q", answer="A", display_order=3))
    )
    assert json.loads(fake_api.last_request.content) == {
        "question": "Q",
        "answer": "A",
        "displayOrder": 3,
    }

    updated = asyncio.run(service.update_faq(5, Faq(question="Q2", answer="A2")))
    assert json.loads(fake_api.last_request.content) == {
        "faqId": 5,
        "question": "Q2",
        "answer": "A2",
    }

    assert created is not None
    assert created.faq_id == 5
    assert updated is None


def test_delete_faq_failure_raises(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add("DELETE", "/Faq/8", text_route(404))

    with pytest.raises(RequestError, match="^Failed to delete FAQ$"):
        asyncio.run(FaqService(api_client).delete_faq(8))


def test_get_all_faqs_keeps_unexpected_field_types(
    api_client: HttpxApiClient, fake_api: FakeApi
) -> None:
    fake_api.add(
        "GET",
        "/Faq",
        json_route(200, [{"faqId": 1, "category": 2, "isPublished": "yes"}]),
    )

    faqs = asyncio.run(FaqService(api_client).get_all_faqs())

    assert faqs[0].category == 2
    assert faqs[0].is_published == "yes"
