"""Shared fixtures: sample users, an in-memory upstream and an API client.

The route tests talk to the real FastAPI app through httpx's
ASGITransport.  Startup events do not run under ASGITransport, so the
``get_user_service`` dependency is overridden with a service wrapping
the in-memory upstream.
"""

import copy
from typing import Dict, List, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from user_directory_api.app.api.deps import get_user_service
from user_directory_api.app.clients.user_api_client import UpstreamError
from user_directory_api.app.main import app
from user_directory_api.app.schemas.user import User
from user_directory_api.app.services.user_service import UserService

LEANNE = {
    "id": 1,
    "name": "Leanne Graham",
    "username": "Bret",
    "email": "Sincere@april.biz",
    "address": {
        "street": "Kulas Light",
        "suite": "Apt. 556",
        "city": "Gwenborough",
        "zipcode": "92998-3874",
        "geo": {"lat": "-37.3159", "lng": "81.1496"},
    },
    "phone": "1-770-736-8031 x56442",
    "website": "hildegard.org",
    "company": {
        "name": "Romaguera-Crona",
        "catchPhrase": "Multi-layered client-server neural-net",
        "bs": "harness real-time e-markets",
    },
}

CLEMENTINE = {
    "id": 3,
    "name": "Clementine Bauch",
    "username": "Samantha",
    "email": "Nathan@yesenia.net",
    "address": {
        "street": "Douglas Extension",
        "suite": "Suite 847",
        "city": "McKenziehaven",
        "zipcode": "59590-4157",
        "geo": {"lat": "-68.6102", "lng": "-47.0653"},
    },
    "phone": "1-463-123-4447",
    "website": "ramiro.info",
    "company": {
        "name": "Romaguera-Jacobson",
        "catchPhrase": "Face to face bifurcated interface",
        "bs": "e-enable strategic applications",
    },
}


def make_user(raw: Dict, **overrides) -> User:
    data = copy.deepcopy(raw)
    data.update(overrides)
    return User.model_validate(data)


class FakeUserClient:
    """In-memory stand-in for ``UserApiClient``.

    Missing IDs raise ``UpstreamError`` with status 404, like the real
    upstream.  ``list_error`` / ``get_error`` make the next calls fail.
    """

    def __init__(self, users: List[User]) -> None:
        self.users = list(users)
        self.list_error: Optional[Exception] = None
        self.get_error: Optional[Exception] = None
        self.list_calls = 0
        self.get_calls: List[int] = []

    async def list_users(self) -> List[User]:
        self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return list(self.users)

    async def get_user(self, user_id: int) -> User:
        self.get_calls.append(user_id)
        if self.get_error is not None:
            raise self.get_error
        for user in self.users:
            if user.id == user_id:
                return user
        raise UpstreamError("Upstream returned 404", status_code=404)


@pytest.fixture
def users() -> List[User]:
    return [make_user(LEANNE), make_user(CLEMENTINE)]


@pytest.fixture
def fake_client(users) -> FakeUserClient:
    return FakeUserClient(users)


@pytest.fixture
def service(fake_client) -> UserService:
    return UserService(fake_client)


@pytest.fixture
async def client(service):
    """FastAPI test client with the user service overridden."""
    app.dependency_overrides[get_user_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
