"""Tests for employer id resolution."""

import json

from job_board_client.adapters.storage import InMemoryStorage
from job_board_client.domain.models import UserProfile
from job_board_client.services.employer import get_employer_id_from_storage
from job_board_client.services.session import USER_KEY, SessionStore


def _store_with(user: object) -> SessionStore:
    return SessionStore(InMemoryStorage({USER_KEY: json.dumps(user)}))


def test_employer_id_from_role_data() -> None:
    assert get_employer_id_from_storage(_store_with({"roleData": {"employerId": 5}})) == (
        5,
        None,
    )


def test_employer_id_lookup_order() -> None:
    store = _store_with(
        {"employer": {"employerId": 6}, "employerId": 7, "roleData": {}}
    )

    assert get_employer_id_from_storage(store) == (6, None)
    assert get_employer_id_from_storage(_store_with({"employerId": 7})) == (7, None)


def test_employer_profile_missing() -> None:
    assert get_employer_id_from_storage(_store_with({})) == (
        None,
        "Employer profile not found. Please complete your employer profile.",
    )


def test_no_stored_user() -> None:
    store = SessionStore(InMemoryStorage())

    assert get_employer_id_from_storage(store) == (
        None,
        "No user data in localStorage",
    )


def test_unparseable_user() -> None:
    store = SessionStore(InMemoryStorage({USER_KEY: "{oops"}))

    assert get_employer_id_from_storage(store) == (None, "Failed to parse user data")


def test_profile_written_by_session_store() -> None:
    store = SessionStore(InMemoryStorage())
    store.set_user_data("token", UserProfile(user_id=1, employer_id=12))

    assert get_employer_id_from_storage(store) == (12, None)
