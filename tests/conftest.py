"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import httpx
import pytest

from job_board_client.adapters.http_client import HttpxApiClient
from job_board_client.adapters.storage import InMemoryStorage
from job_board_client.config import Settings
from job_board_client.containers import AppContainer, build_container
from job_board_client.services.session import SessionStore

BASE_URL = "https://jobs.test/api"

Route = Callable[[httpx.Request], httpx.Response]


def json_route(status_code: int = 200, body: object = None) -> Route:
    """Return a route answering with a JSON body."""

    def route(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=body)

    return route


def text_route(status_code: int, text: str = "", **headers: str) -> Route:
    """Return a route answering with a plain text body."""

    def route(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text, headers=headers or None)

    return route


@dataclass
class FakeApi:
    """In-memory stand-in for the job board API behind httpx.MockTransport."""

    routes: dict[tuple[str, str], Route] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def add(self, method: str, path: str, route: Route) -> None:
        self.routes[(method, path)] = route

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404)
        return route(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle))


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def session_store(storage: InMemoryStorage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def api_client(fake_api: FakeApi, session_store: SessionStore) -> HttpxApiClient:
    return HttpxApiClient(
        base_url=BASE_URL,
        session=session_store,
        http_client=fake_api.http_client(),
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(api_url=BASE_URL, session_file=tmp_path / "session.json")


@pytest.fixture
def container(
    settings: Settings, storage: InMemoryStorage, fake_api: FakeApi
) -> AppContainer:
    return build_container(
        settings, storage=storage, http_client=fake_api.http_client()
    )
