"""Authenticated HTTP client for the job board API."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from job_board_client.config import normalize_base_url
from job_board_client.errors import NotAuthenticatedError, RequestError
from job_board_client.services.session import SessionStore

_logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {"Content-Type": "application/json"}


class ApiClient(Protocol):
    """Interface for calls against the job board API."""

    async def request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        *,
        payload: object | None = None,
        headers: Mapping[str, str] | None = None,
        action: str | None = None,
        status_messages: Mapping[int, str] | None = None,
        fallback_message: str | None = None,
        require_auth: bool = False,
    ) -> Any:
        """Send a request and return the parsed JSON body, or None."""

    async def get(self, path: str, **kwargs: Any) -> Any:
        """Send a GET request."""

    async def post(self, path: str, payload: object | None = None, **kwargs: Any) -> Any:
        """Send a POST request with a JSON body."""

    async def put(self, path: str, payload: object | None = None, **kwargs: Any) -> Any:
        """Send a PUT request with a JSON body."""

    async def delete(self, path: str, **kwargs: Any) -> Any:
        """Send a DELETE request."""

    async def get_bytes(self, path: str, *, action: str | None = None) -> bytes:
        """Send a GET request and return the raw response body."""


@dataclass
class HttpxApiClient(ApiClient):
    """API client implemented with httpx.

    Every call attaches the session's bearer token when one is stored.
    Non-success responses are turned into RequestError with the most useful
    message the body offers; success bodies that are empty or not valid JSON
    come back as None.
    """

    base_url: str
    session: SessionStore
    http_client: httpx.AsyncClient
    timeout: float = 30.0

    @classmethod
    def create(
        cls,
        base_url: str,
        session: SessionStore,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> "HttpxApiClient":
        """Create an API client, opening an httpx session unless one is given."""
        return cls(
            base_url=normalize_base_url(base_url),
            session=session,
            http_client=http_client or httpx.AsyncClient(),
            timeout=timeout,
        )

    async def request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        *,
        payload: object | None = None,
        headers: Mapping[str, str] | None = None,
        action: str | None = None,
        status_messages: Mapping[int, str] | None = None,
        fallback_message: str | None = None,
        require_auth: bool = False,
    ) -> Any:
        """Send a request and return the parsed JSON body, or None."""
        response = await self._send(
            method,
            path,
            payload=payload,
            headers=headers,
            require_auth=require_auth,
        )
        if not response.is_success:
            raise _request_error(
                response,
                action=action or f"{method} {path}",
                fallback=_fallback_message(
                    response.status_code, action, status_messages, fallback_message
                ),
            )
        return parse_response_body(response)

    async def get(self, path: str, **kwargs: Any) -> Any:
        """Send a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, payload: object | None = None, **kwargs: Any) -> Any:
        """Send a POST request with a JSON body."""
        return await self.request("POST", path, payload=payload, **kwargs)

    async def put(self, path: str, payload: object | None = None, **kwargs: Any) -> Any:
        """Send a PUT request with a JSON body."""
        return await self.request("PUT", path, payload=payload, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        """Send a DELETE request."""
        return await self.request("DELETE", path, **kwargs)

    async def get_bytes(self, path: str, *, action: str | None = None) -> bytes:
        """Send a GET request and return the raw response body."""
        response = await self._send("GET", path)
        if not response.is_success:
            raise _request_error(
                response,
                action=action or f"GET {path}",
                fallback=_fallback_message(response.status_code, action, None, None),
            )
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _send(
        self,
        method: str,
        path: str,
        *,
        payload: object | None = None,
        headers: Mapping[str, str] | None = None,
        require_auth: bool = False,
    ) -> httpx.Response:
        token = self.session.get_token()
        if require_auth and not token:
            raise NotAuthenticatedError
        merged_headers = {**_DEFAULT_HEADERS, **(headers or {})}
        if token:
            merged_headers["Authorization"] = f"Bearer {token}"

        content = None if payload is None else json.dumps(payload)
        return await self.http_client.request(
            method,
            f"{self.base_url}{path}",
            content=content,
            headers=merged_headers,
            timeout=self.timeout,
        )


def parse_response_body(response: httpx.Response) -> Any:
    """Parse a success body as JSON, returning None when there is nothing usable."""
    if response.status_code == httpx.codes.NO_CONTENT:
        return None
    if response.headers.get("content-length") == "0":
        return None
    text = response.text
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        _logger.debug(
            "Ignoring non-JSON response body (content-type=%s)",
            response.headers.get("content-type"),
        )
        return None


def extract_error_message(response: httpx.Response) -> str | None:
    """Return the most specific error message carried by a response body."""
    text = response.text
    if not text.strip():
        return None
    try:
        data = json.loads(text)
    except ValueError:
        return text

    if isinstance(data, str):
        return data or None
    if not isinstance(data, dict):
        return None
    if data.get("message"):
        return str(data["message"])
    errors = data.get("errors")
    if errors or isinstance(errors, dict | list):
        return ", ".join(_flatten_errors(errors)) or None
    if data.get("title"):
        return str(data["title"])
    return None


def _flatten_errors(errors: object) -> list[str]:
    """Flatten validation errors keyed by field into a list of messages."""
    if isinstance(errors, str):
        return [errors]
    if isinstance(errors, dict):
        values = list(errors.values())
    elif isinstance(errors, list):
        values = errors
    else:
        return [str(errors)]
    messages: list[str] = []
    for value in values:
        if isinstance(value, list):
            messages.extend(str(item) for item in value)
        elif value is not None:
            messages.append(str(value))
    return messages


def _request_error(
    response: httpx.Response, *, action: str, fallback: str
) -> RequestError:
    message = extract_error_message(response) or fallback
    _logger.error("Failed to %s: %s", action, message)
    return RequestError(message, status_code=response.status_code)


def _fallback_message(
    status_code: int,
    action: str | None,
    status_messages: Mapping[int, str] | None,
    fallback_message: str | None,
) -> str:
    if status_messages and status_code in status_messages:
        return status_messages[status_code]
    if fallback_message:
        return fallback_message
    if action:
        return f"Failed to {action}"
    return f"Request failed with status {status_code}"
