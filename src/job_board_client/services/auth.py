"""Login and registration against the auth endpoints."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from job_board_client.adapters.http_client import ApiClient
from job_board_client.domain.models import LoginResponse, UserProfile
from job_board_client.errors import RequestError
from job_board_client.services.session import SessionStore

_logger = logging.getLogger(__name__)


@dataclass
class AuthService:
    """Authenticates users and manages the stored session."""

    client: ApiClient
    session: SessionStore

    async def login(self, email: str, password: str) -> LoginResponse:
        """Log in and persist the returned token and user profile."""
        _logger.info("Logging in: %s", email)
        raw = await self.client.post(
            "/Auth/login",
            {"email": email, "password": password},
            action="log in",
            fallback_message="Login failed",
        )
        try:
            response = LoginResponse.model_validate(raw)
        except ValidationError as exc:
            _logger.error("Login response without a token: %s", exc)
            raise RequestError("Login failed") from exc
        self.session.set_user_data(response.token, build_user_profile(response, email))
        return response

    async def register(self, user_data: dict[str, Any]) -> dict[str, Any] | None:
        """Register a new user and return the created user payload."""
        _logger.info("Registering user: %s", user_data.get("email"))
        return await self.client.post(
            "/Auth/register",
            user_data,
            action="register",
            fallback_message="Registration failed",
        )

    async def logout(self) -> None:
        """Clear the stored session."""
        await self.session.logout()


def build_user_profile(response: LoginResponse, email: str) -> UserProfile:
    """Merge the login response into the profile stored for the session."""
    profile: dict[str, Any] = {
        "userId": response.user_id,
        "role": response.role,
        "email": email,
    }
    if isinstance(response.user, dict):
        profile.update(response.user)
    profile["employerId"] = response.employer_id
    profile["jobSeekerId"] = response.job_seeker_id
    profile["adminId"] = response.admin_id
    return UserProfile.model_validate(profile)
