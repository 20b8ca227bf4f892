"""Persistent session store for the authenticated user."""

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from pydantic import ValidationError

from job_board_client.adapters.storage import KeyValueStorage
from job_board_client.domain.models import UserProfile

TOKEN_KEY = "token"
USER_KEY = "user"

_logger = logging.getLogger(__name__)

TeardownHook = Callable[[], Awaitable[None] | None]


@dataclass
class SessionStore:
    """Owns the auth token and user profile in client-side storage.

    Token and profile are written and cleared together. Teardown hooks run
    before the session is cleared on logout (for example to drop a
    notification subscription); logout callbacks run afterwards and play the
    role of sending the user back to the entry point.
    """

    storage: KeyValueStorage
    teardown_hooks: list[TeardownHook] = field(default_factory=list)
    logout_callbacks: list[Callable[[], None]] = field(default_factory=list)

    def get_token(self) -> str | None:
        """Return the stored bearer token, if any."""
        return self.storage.get_item(TOKEN_KEY)

    def get_user(self) -> UserProfile | None:
        """Return the stored user profile, or None if missing or malformed."""
        raw = self.storage.get_item(USER_KEY)
        if raw is None:
            return None
        try:
            return UserProfile.model_validate_json(raw)
        except ValidationError as exc:
            _logger.warning("Stored user profile is malformed: %s", exc)
            return None

    def set_user_data(self, token: str, user: UserProfile) -> None:
        """Store the token and user profile, replacing any previous session."""
        self.storage.set_item(TOKEN_KEY, token)
        self.storage.set_item(USER_KEY, user.model_dump_json(by_alias=True))

    def is_authenticated(self) -> bool:
        """Return True when a token is present. The token is not validated."""
        return bool(self.get_token())

    def add_teardown_hook(self, hook: TeardownHook) -> None:
        """Register a hook to run before the session is cleared."""
        self.teardown_hooks.append(hook)

    def on_logout(self, callback: Callable[[], None]) -> None:
        """Register a callback to run after the session is cleared."""
        self.logout_callbacks.append(callback)

    async def logout(self) -> None:
        """Tear down subscriptions, clear the session and notify listeners."""
        _logger.info("Logging out")
        for hook in list(self.teardown_hooks):
            try:
                result = hook()
                if inspect.isawaitable(result):
                    await result
            except Exception:
                _logger.warning("Session teardown hook failed", exc_info=True)

        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)
        _logger.info("Session cleared")

        for callback in list(self.logout_callbacks):
            callback()
