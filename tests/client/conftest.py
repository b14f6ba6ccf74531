"""
Client test fixtures: a scriptable fake API served through httpx.MockTransport.

The fake keeps its own session list so refetches reflect server-side writes,
records every request, and lets a test override the response for any
(method, path) pair, or hold a request until an asyncio.Event is set.
"""

import asyncio
import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from therapy_dashboard.client.api_client import DashboardApiClient
from therapy_dashboard.client.dashboard import SessionDashboard


def session_json(id: int, status: str = "Scheduled", therapist: str = "Anna SLP",
                 patient: str = "Ariel Underwood", date: str = "2025-11-08T09:00:00Z") -> dict:
    return {
        "id": id,
        "therapist_id": 1,
        "patient_id": id,
        "date": date,
        "status": status,
        "therapist_name": therapist,
        "patient_name": patient,
    }


class FakeApi:
    def __init__(self) -> None:
        self.sessions = [
            session_json(1, patient="Ariel Underwood", date="2025-11-08T09:00:00Z"),
            session_json(2, patient="Nemo Fisher", date="2025-11-08T10:30:00Z"),
            session_json(3, status="Completed", patient="Moana Lee", date="2025-11-08T13:00:00Z"),
        ]
        self.requests: list[httpx.Request] = []
        self.overrides: dict[tuple[str, str], object] = {}
        self.gates: dict[tuple[str, str], asyncio.Event] = {}

    def count(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)

        gate = self.gates.get(key)
        if gate is not None:
            await gate.wait()

        override = self.overrides.get(key)
        if isinstance(override, Exception):
            raise override
        if isinstance(override, httpx.Response):
            return override

        if key == ("GET", "/api/sessions"):
            return httpx.Response(200, json=self.sessions)
        if key == ("GET", "/api/therapists"):
            return httpx.Response(200, json=[{"id": 1, "name": "Anna SLP", "specialty": "Speech Therapy"}])
        if key == ("GET", "/api/patients"):
            return httpx.Response(200, json=[{"id": 1, "name": "Ariel Underwood", "dob": "2018-06-15"}])
        if key == ("POST", "/api/sessions"):
            body = json.loads(request.content)
            created = session_json(len(self.sessions) + 1, date=body["date"])
            self.sessions.append(created)
            return httpx.Response(201, json=created)
        if request.method == "PATCH":
            session_id = int(request.url.path.rsplit("/", 1)[1])
            status = json.loads(request.content)["status"]
            for row in self.sessions:
                if row["id"] == session_id:
                    changed = row["status"] != status
                    row["status"] = status
                    message = (
                        "Session updated successfully" if changed
                        else "Session already has the requested status"
                    )
                    session = {k: row[k] for k in ("id", "therapist_id", "patient_id", "date", "status")}
                    return httpx.Response(200, json={"message": message, "session": session})
            return httpx.Response(404, json={"error": "Session not found", "code": "not_found"})
        return httpx.Response(404, json={"error": "Not Found", "code": "not_found"})


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
async def api(fake_api):
    client = DashboardApiClient(base_url="http://test", transport=httpx.MockTransport(fake_api.handler))
    yield client
    await client.aclose()


@pytest.fixture
async def dashboard(api, clock):
    board = SessionDashboard(api, page_size=10, banner_seconds=3, clock=clock)
    await board.refresh()
    return board
