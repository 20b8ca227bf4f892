"""Helpers for resolving the employer profile of the stored user."""

import json
import logging

from job_board_client.services.session import USER_KEY, SessionStore

_logger = logging.getLogger(__name__)

NO_USER_DATA = "No user data in localStorage"
EMPLOYER_NOT_FOUND = "Employer profile not found. Please complete your employer profile."
PARSE_FAILED = "Failed to parse user data"


def get_employer_id_from_storage(
    session: SessionStore,
) -> tuple[int | None, str | None]:
    """Return ``(employer_id, error)`` for the stored user without raising."""
    raw = session.storage.get_item(USER_KEY)
    if not raw:
        return None, NO_USER_DATA
    try:
        user = json.loads(raw)
    except ValueError:
        _logger.exception("Error reading stored user data")
        return None, PARSE_FAILED
    if not isinstance(user, dict):
        return None, PARSE_FAILED

    employer_id = (
        _nested(user, "roleData", "employerId")
        or _nested(user, "employer", "employerId")
        or user.get("employerId")
        or None
    )
    if not employer_id:
        _logger.warning("Employer ID not found in user data")
        return None, EMPLOYER_NOT_FOUND
    return employer_id, None


def _nested(user: dict[str, object], key: str, field: str) -> object | None:
    container = user.get(key)
    if isinstance(container, dict):
        return container.get(field)
    return None
