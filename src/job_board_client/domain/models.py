"""Base models and auth payloads for the job board API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model for API payloads using camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the model as a JSON-ready dict with API field names."""
        return self.model_dump(mode="json", by_alias=True)


class UserProfile(ApiModel):
    """Profile of the logged-in user as stored in the session."""

    user_id: Any = None
    role: Any = None
    email: Any = None
    employer_id: Any = None
    job_seeker_id: Any = None
    admin_id: Any = None
    role_data: Any = None
    employer: Any = None


class LoginResponse(ApiModel):
    """Response body of a successful login."""

    token: str
    user_id: Any = None
    role: Any = None
    user: Any = None
    employer_id: Any = None
    job_seeker_id: Any = None
    admin_id: Any = None
