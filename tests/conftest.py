"""Shared fixtures: sample upstream records and a fake OData service."""

from typing import Any, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from src.adapters.tweedekamer_activities import TweedeKamerActivitiesAdapter
from tests.factories import make_activity, make_person

BASE_URL = "https://odata.test/OData/v4/2.0"


@pytest.fixture
def sample_activities() -> List[Dict[str, Any]]:
    """Three upstream activities: one with actors, one empty, one without dates."""
    return [
        make_activity(
            "act-1",
            "Plenair debat over klimaat",
            [
                {
                    "Id": "actor-1",
                    "Functie": None,
                    "Relatie": "Deelnemer",
                    "Persoon": make_person("p-1", "Jan", "Berg", infix="van der", initials="J."),
                    "Fractie": {"Id": "f-vvd", "NaamNL": "Volkspartij voor Vrijheid en Democratie"},
                },
                {
                    "Id": "actor-2",
                    "Functie": "Voorzitter",
                    "Relatie": "Deelnemer",
                    "Persoon": make_person("p-2", "Piet", "Jansen"),
                    "Fractie": None,
                },
                {
                    "Id": "actor-3",
                    "Functie": "Griffier",
                    "Relatie": "Deelnemer",
                    "Persoon": None,
                    "Fractie": None,
                },
            ],
            Aanvangstijd="2024-03-15T14:30:00Z",
        ),
        make_activity("act-2", "Procedurevergadering", []),
        make_activity(
            "act-3",
            "Technische briefing",
            [
                {
                    "Id": "actor-4",
                    "Persoon": make_person("p-1", "Jan", "Berg", infix="van der"),
                    "Fractie": {"Id": "f-vvd", "NaamNL": "Volkspartij voor Vrijheid en Democratie"},
                },
            ],
        ),
    ]


class FakeODataService:
    """Answers OData requests from canned data and records every request."""

    def __init__(
        self,
        activities: Optional[List[Dict[str, Any]]] = None,
        count: Optional[int] = 42,
        status_code: int = 200,
        count_status_code: int = 200,
        detail: Optional[Dict[str, Any]] = None,
    ):
        self.activities = activities or []
        self.count = count
        self.status_code = status_code
        self.count_status_code = count_status_code
        self.detail = detail or {}
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params = request.url.params

        if params.get("$count") == "true":
            if self.count_status_code != 200:
                return httpx.Response(self.count_status_code)
            body: Dict[str, Any] = {"value": []}
            if self.count is not None:
                body["@odata.count"] = self.count
            return httpx.Response(200, json=body)

        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": "upstream failure"})

        if request.url.path.endswith(")"):
            return httpx.Response(200, json=self.detail)

        return httpx.Response(200, json={"value": self.activities})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def count_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.params.get("$count") == "true"]

    @property
    def data_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.params.get("$count") != "true"]


@pytest.fixture
def fake_odata(sample_activities) -> FakeODataService:
    return FakeODataService(activities=sample_activities)


@pytest_asyncio.fixture
async def adapter(fake_odata):
    """Initialized adapter talking to the fake service."""
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL, transport=fake_odata.transport)
    await adapter.initialize()
    yield adapter
    await adapter.close()
