from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from dealmetrics.api.app import app
from dealmetrics.api.deps import get_summarizer
from dealmetrics.api.routes.comparables import SUMMARY_FAILED

PAYLOAD = {
    "location": "Austin, TX",
    "radius": 5,
    "square_footage_range": "1500-2000",
    "property_types": "single family, duplex",
    "property_listings_csv": "address,price,sqft\n1 Elm St,410000,1650\n",
}


@pytest.fixture
def summarizer():
    fake = AsyncMock()
    app.dependency_overrides[get_summarizer] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client(summarizer):
    return TestClient(app)


class TestComparablesSummary:
    def test_success(self, client, summarizer):
        summarizer.summarize.return_value = "Three comparable duplexes near downtown."
        resp = client.post("/api/v1/comparables/summary", json=PAYLOAD)
        assert resp.status_code == 200
        assert resp.json() == {"summary": "Three comparable duplexes near downtown."}

        criteria = summarizer.summarize.call_args.args[0]
        assert criteria.location == "Austin, TX"
        assert criteria.listings_csv == PAYLOAD["property_listings_csv"]

    def test_generation_failure(self, client, summarizer):
        summarizer.summarize.return_value = None
        resp = client.post("/api/v1/comparables/summary", json=PAYLOAD)
        assert resp.status_code == 502
        assert resp.json()["detail"] == SUMMARY_FAILED

    @pytest.mark.parametrize("override", [
        {"location": ""},
        {"radius": 0},
        {"square_footage_range": ""},
        {"property_types": ""},
        {"property_listings_csv": ""},
    ])
    def test_invalid_form(self, client, summarizer, override):
        resp = client.post("/api/v1/comparables/summary", json={**PAYLOAD, **override})
        assert resp.status_code == 422
        summarizer.summarize.assert_not_called()

    def test_missing_csv(self, client, summarizer):
        payload = {k: v for k, v in PAYLOAD.items() if k != "property_listings_csv"}
        assert client.post("/api/v1/comparables/summary", json=payload).status_code == 422
