import httpx
import pytest

from src.adapters.errors import UpstreamHTTPError, UpstreamUnavailableError
from src.adapters.tweedekamer_activities import TweedeKamerActivitiesAdapter
from src.models.activity import Activity
from tests.conftest import BASE_URL, FakeODataService
from tests.factories import make_activity, make_person


async def test_fetch_before_initialize_is_rejected() -> None:
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL)

    assert adapter.is_ready is False
    with pytest.raises(UpstreamUnavailableError, match="not initialized"):
        await adapter.fetch_activities(["verwijderd eq false"])


async def test_initialize_and_close_toggle_readiness(fake_odata) -> None:
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL, transport=fake_odata.transport)

    await adapter.initialize()
    assert adapter.is_ready is True

    await adapter.close()
    assert adapter.is_ready is False


async def test_fetch_activities_returns_value_array(adapter, fake_odata, sample_activities) -> None:
    activities = await adapter.fetch_activities(
        ["verwijderd eq false"], top=25, skip=50, orderby="aanvangstijd desc"
    )

    assert activities == sample_activities
    request = fake_odata.requests[0]
    assert request.url.path == "/OData/v4/2.0/Activiteit"
    assert request.url.params["$filter"] == "verwijderd eq false"
    assert request.url.params["$expand"] == "ActiviteitActor($expand=Persoon,Fractie)"
    assert request.url.params["$top"] == "25"
    assert request.url.params["$skip"] == "50"
    assert request.url.params["$orderby"] == "aanvangstijd desc"
    assert request.url.params["$format"] == "json"
    assert request.headers["Accept"] == "application/json"


async def test_fetch_activities_missing_value_is_empty(fake_odata, adapter) -> None:
    fake_odata.activities = []

    assert await adapter.fetch_activities(["verwijderd eq false"]) == []


async def test_fetch_count_requests_no_records(adapter, fake_odata) -> None:
    count = await adapter.fetch_count(["verwijderd eq false"])

    assert count == 42
    request = fake_odata.requests[0]
    assert request.url.params["$count"] == "true"
    assert request.url.params["$top"] == "0"
    assert "$expand" not in request.url.params


async def test_fetch_count_missing_from_response(adapter, fake_odata) -> None:
    fake_odata.count = None

    assert await adapter.fetch_count(["verwijderd eq false"]) is None


async def test_fetch_activity_uses_key_path(adapter, fake_odata) -> None:
    fake_odata.detail = {"Id": "abc", "Onderwerp": "Debat", "ActiviteitActor": []}

    data = await adapter.fetch_activity("abc")

    assert data == fake_odata.detail
    request = fake_odata.requests[0]
    assert request.url.path == "/OData/v4/2.0/Activiteit(abc)"
    assert request.url.params["$expand"] == "ActiviteitActor($expand=Persoon,Fractie)"
    assert "$filter" not in request.url.params


async def test_fetch_activity_escapes_id_in_key_path(adapter, fake_odata) -> None:
    fake_odata.detail = {"Id": "a/b#c"}

    await adapter.fetch_activity("a/b#c")

    request = fake_odata.requests[0]
    assert request.url.raw_path.startswith(b"/OData/v4/2.0/Activiteit(a%2Fb%23c)?")
    assert request.url.params["$format"] == "json"


async def test_non_success_status_raises_http_error(adapter, fake_odata) -> None:
    fake_odata.status_code = 503

    with pytest.raises(UpstreamHTTPError) as exc_info:
        await adapter.fetch_activities(["verwijderd eq false"])

    assert exc_info.value.status_code == 503
    assert str(exc_info.value) == "API request failed: 503 Service Unavailable"


async def test_transport_failure_raises_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    await adapter.initialize()
    try:
        with pytest.raises(UpstreamUnavailableError, match="connection refused"):
            await adapter.fetch_activities(["verwijderd eq false"])
    finally:
        await adapter.close()


def test_normalize_many_drops_malformed_records(sample_activities) -> None:
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL)
    broken = "not an activity"

    activities = adapter.normalize_many(sample_activities + [broken])

    assert [a.id for a in activities] == ["act-1", "act-2", "act-3"]
    assert all(isinstance(a, Activity) for a in activities)


def test_normalize_raises_value_error_for_bad_record() -> None:
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL)

    with pytest.raises(ValueError, match="Invalid activity record"):
        adapter.normalize(["not", "a", "record"])


def test_normalize_keeps_activity_with_null_deleted_flag() -> None:
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL)

    activity = adapter.normalize(make_activity("act-9", "Debat", [], Verwijderd=None))

    assert activity.id == "act-9"
    assert activity.deleted is None
    assert activity.actors == []


def test_normalize_defaults_fields_with_unexpected_types() -> None:
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL)
    raw = make_activity(
        "act-9",
        {"nl": "Debat"},
        [{"Functie": 7, "Persoon": make_person("p-1", "Jan", "Jansen"), "Fractie": "VVD"}],
        Verwijderd="soms",
    )

    activity = adapter.normalize(raw)

    assert activity.subject is None
    assert activity.deleted is None
    actor = activity.actors[0]
    assert actor.function is None
    assert actor.fraction is None
    assert actor.person.full_name() == "Jan Jansen"


def test_normalize_non_list_actors_become_none() -> None:
    adapter = TweedeKamerActivitiesAdapter(base_url=BASE_URL)

    activity = adapter.normalize({"Id": "act-9", "ActiviteitActor": "not a list"})

    assert activity.id == "act-9"
    assert activity.actors is None
