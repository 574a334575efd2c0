import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from src.adapters.tweedekamer_activities import TweedeKamerActivitiesAdapter
from src.config import AppConfig, Settings, UpstreamConfig
from tests.conftest import BASE_URL


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        app=AppConfig(static_dir=str(tmp_path / "missing")),
        upstream=UpstreamConfig(base_url=BASE_URL),
    )


@pytest.fixture
def client(settings, fake_odata):
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL, transport=fake_odata.transport)
    app = create_app(settings, adapter=adapter)
    with TestClient(app) as client:
        yield client


def test_attendance_returns_records_and_metadata(client, fake_odata) -> None:
    response = client.get("/api/attendance", params={"limit": 10})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["metadata"] == {
        "totalActivities": 3,
        "totalRegistrations": 3,
        "totalCount": 42,
        "skip": 0,
        "limit": 10,
    }
    first = body["data"][0]
    assert first["personName"] == "Jan van der Berg"
    assert first["activityDate"] == "15-03-2024"
    assert first["role"] == "Participant"
    assert body["data"][1]["fraction"] == "Unknown"
    assert body["data"][1]["fractionId"] is None


def test_attendance_paged_request_has_no_total(client, fake_odata) -> None:
    response = client.get("/api/attendance", params={"skip": 50, "limit": 10})

    assert response.status_code == 200
    assert response.json()["metadata"]["totalCount"] is None
    assert fake_odata.count_requests == []


def test_attendance_passes_filters_upstream(client, fake_odata) -> None:
    client.get(
        "/api/attendance",
        params={"dateFrom": "2024-01-01", "dateTo": "2024-12-31", "activityType": "debat"},
    )

    upstream_filter = fake_odata.data_requests[0].url.params["$filter"]
    assert "aanvangstijd ge 2024-01-01T00:00:00Z" in upstream_filter
    assert "aanvangstijd le 2024-12-31T23:59:59Z" in upstream_filter
    assert "tolower('debat')" in upstream_filter


def test_attendance_blank_filters_mean_no_constraint(client, fake_odata) -> None:
    response = client.get("/api/attendance", params={"dateFrom": "", "activityType": ""})

    assert response.status_code == 200
    assert fake_odata.data_requests[0].url.params["$filter"] == "verwijderd eq false"


def test_attendance_rejects_malformed_dates(client) -> None:
    response = client.get("/api/attendance", params={"dateFrom": "15-03-2024"})

    assert response.status_code == 422


def test_attendance_rejects_negative_skip(client) -> None:
    assert client.get("/api/attendance", params={"skip": -1}).status_code == 422


def test_attendance_upstream_failure_is_500(client, fake_odata) -> None:
    fake_odata.status_code = 503

    response = client.get("/api/attendance")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "API request failed: 503 Service Unavailable",
        "details": "Failed to fetch attendance data from Dutch Parliament API",
    }


def test_activity_returns_raw_record(client, fake_odata) -> None:
    fake_odata.detail = {"Id": "abc", "Onderwerp": "Debat", "ActiviteitActor": []}

    response = client.get("/api/activity/abc")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": fake_odata.detail}


def test_activity_failure_is_500(client, fake_odata) -> None:
    fake_odata.status_code = 404

    response = client.get("/api/activity/missing")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "API request failed: 404 Not Found"


def test_stats(client) -> None:
    response = client.get("/api/stats", params={"activityType": "debat"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "stats": {
            "totalActivities": 42,
            "sampleRegistrations": 3,
            "uniquePeopleInSample": 2,
            "uniqueFractionsInSample": 2,
            "note": "Statistics are based on a sample of activities due to API limitations",
        },
    }


def test_health_reports_fetch_available(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["fetchAvailable"] is True
    assert body["message"] == "Dutch Parliament Attendance API is running"
    assert body["timestamp"].endswith("Z")


def test_requests_before_startup_are_rejected(settings, fake_odata) -> None:
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL, transport=fake_odata.transport)
    app = create_app(settings, adapter=adapter)

    # no context manager: lifespan never runs, so the client is never created
    client = TestClient(app)

    health = client.get("/api/health").json()
    assert health["fetchAvailable"] is False

    response = client.get("/api/attendance")
    assert response.status_code == 500
    assert "not initialized" in response.json()["error"]
    assert fake_odata.requests == []


def test_index_page_lists_endpoints(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/api/attendance" in response.text
    assert "Upstream client ready" in response.text


def test_static_files_are_served_when_present(tmp_path, fake_odata) -> None:
    (tmp_path / "app.js").write_text("console.log('charts');")
    settings = Settings(
        app=AppConfig(static_dir=str(tmp_path)),
        upstream=UpstreamConfig(base_url=BASE_URL),
    )
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL, transport=fake_odata.transport)

    with TestClient(create_app(settings, adapter=adapter)) as client:
        assert client.get("/app.js").text == "console.log('charts');"
        assert client.get("/api/health").json()["success"] is True
