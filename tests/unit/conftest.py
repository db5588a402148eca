"""
Unit Test Fixtures.

Fixtures for unit tests - the hub API is replaced by an in-memory fake
served through httpx.MockTransport. Unit tests never touch the network.
"""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest

from modules.api.client import HubClient
from modules.api.transport import HubTransport

TEST_BASE_URL = "https://hub.test/api/v1"
TEST_TOKEN = "test-token"


# =============================================================================
# Fake hub server
# =============================================================================


class FakeHub:
    """
    In-memory stand-in for the hub API.

    Stores visits keyed by (person_id, date) and records every request.
    Set `force_status` to make every response use that status code, or
    `raw_body` to return a fixed body for successful requests.
    """

    def __init__(self) -> None:
        self.profile = {"id": 42, "name": "Ada Lovelace", "email": "ada@example.com"}
        self.people = {42: "Ada Lovelace", 7: "Grace Hopper"}
        self.visits: dict[tuple[int, str], dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.force_status: int | None = None
        self.raw_body: bytes | None = None

    def add_visit(self, person_id: int, date: str, notes: str | None = None) -> dict[str, Any]:
        visit = {
            "date": date,
            "notes": notes,
            "person": {"id": person_id, "name": self.people.get(person_id, f"Person {person_id}")},
            "app_data": {},
        }
        self.visits[(person_id, date)] = visit
        return visit

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.force_status is not None:
            return httpx.Response(self.force_status, json={"message": "forced"})

        response = self._route(request)
        if self.raw_body is not None and response.is_success:
            return httpx.Response(response.status_code, content=self.raw_body)
        return response

    def _route(self, request: httpx.Request) -> httpx.Response:
        parts = request.url.path.removeprefix("/api/v1/").strip("/").split("/")

        if parts == ["profiles", "me"] and request.method == "GET":
            return httpx.Response(200, json=self.profile)

        if parts == ["hub_visits"] and request.method == "GET":
            date = request.url.params.get("date")
            visits = [v for (_, d), v in self.visits.items() if d == date]
            return httpx.Response(200, json=visits)

        if len(parts) == 3 and parts[0] == "hub_visits":
            key = (int(parts[1]), parts[2])
            if request.method == "GET":
                if key not in self.visits:
                    return httpx.Response(404, json={"message": "not found"})
                return httpx.Response(200, json=self.visits[key])
            if request.method == "PATCH":
                existing = self.visits.get(key)
                notes = existing["notes"] if existing else None
                if request.content:
                    notes = json.loads(request.content).get("notes")
                return httpx.Response(200, json=self.add_visit(key[0], key[1], notes))
            if request.method == "DELETE":
                self.visits.pop(key, None)
                return httpx.Response(204)

        return httpx.Response(404, json={"message": "no route"})


@pytest.fixture
def fake_hub() -> FakeHub:
    """Provide a fresh fake hub server."""
    return FakeHub()


@pytest.fixture
def make_hub_client(fake_hub: FakeHub):
    """
    Factory for HubClient instances wired to the fake hub.

    Usage:
        async def test_something(make_hub_client):
            client = make_hub_client()
            profile = await client.get_current_user()
    """

    def _make() -> HubClient:
        transport = HubTransport(
            TEST_TOKEN,
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(fake_hub.handler),
        )
        return HubClient(transport)

    return _make


@pytest.fixture
async def hub_client(make_hub_client) -> AsyncGenerator[HubClient, None]:
    """Provide a HubClient wired to the fake hub, closed after the test."""
    client = make_hub_client()
    yield client
    await client.close()
