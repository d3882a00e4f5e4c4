"""
Tests for the FastAPI adapter.
"""

import pytest
from fastapi.testclient import TestClient

from catalog_facets.api.server import app


@pytest.fixture
def client():
    return TestClient(app)


class TestDiscovery:
    def test_health(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["kinds"] == ["pets", "products"]
        assert data["config"]["available_status"] == "available"

    def test_list_kinds(self, client):
        assert client.get("/filters").json() == {"kinds": ["pets", "products"], "default_kind": "pets"}

    def test_filter_config(self, client):
        response = client.get("/filters/products/config")
        assert response.status_code == 200
        data = response.json()
        assert data["display_name"] == "Products"
        assert list(data["filters"])[:5] == ["category", "type", "price", "brand", "rating"]
        assert data["default_filters"]["sort"] == "newest"
        labels = [p["label"] for p in data["suggested_filters"]]
        assert "Top Rated" in labels

    @pytest.mark.parametrize("path", [
        "/filters/birds/config",
        "/filters/birds/decode?qs=type%3Ddog",
    ])
    def test_unknown_kind_is_404(self, client, path):
        response = client.get(path)
        assert response.status_code == 404
        assert "birds" in response.json()["detail"]

    def test_unknown_kind_is_404_for_posts(self, client):
        response = client.post("/filters/birds/validate", json={"filters": {}})
        assert response.status_code == 404


class TestValidate:
    def test_validate_reports_stale_input(self, client):
        response = client.post("/filters/pets/validate", json={
            "filters": {"category": "Dogs", "search": " lab ", "color": "red", "size": "huge"},
        })
        assert response.status_code == 200
        data = response.json()
        assert data["filters"]["category"] == "dogs"
        assert data["filters"]["size"] == "all"
        assert data["unknown_keys"] == ["color"]
        assert data["replaced"] == ["size"]
        assert data["query_string"] == "category=dogs&search=lab"
        assert data["active_filter_count"] == 2

    def test_unencodable_search_is_replaced(self, client):
        # Lone surrogate, escaped so the body itself is valid JSON
        response = client.post(
            "/filters/pets/validate",
            content=b'{"filters": {"search": "lab\\ud800"}}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["filters"]["search"] == ""
        assert data["replaced"] == ["search"]
        assert data["query_string"] == ""

    def test_missing_body_fields_default(self, client):
        data = client.post("/filters/pets/validate", json={}).json()
        assert data["filters"]["available"] is True
        assert data["query_string"] == ""


class TestCodecEndpoints:
    def test_encode(self, client):
        response = client.post("/filters/products/encode", json={"filters": {"price": "100+", "brand": "all"}})
        assert response.json()["query_string"] == "price=100%2B"

    def test_decode_validates(self, client):
        response = client.get("/filters/pets/decode", params={"qs": "?category=dogs&bogus=1&size=tiny"})
        data = response.json()
        assert data["raw"] == {"category": "dogs", "bogus": "1", "size": "tiny"}
        assert data["filters"]["category"] == "dogs"
        assert data["filters"]["size"] == "all"
        assert "bogus" not in data["filters"]

    def test_decode_without_query(self, client):
        data = client.get("/filters/pets/decode").json()
        assert data["raw"] == {}
        assert data["filters"]["sort"] == "newest"


class TestBackendQuery:
    def test_query_and_sort(self, client):
        response = client.post("/filters/products/query", json={
            "filters": {"category": "food", "price": "15-30", "sort": "price-low"},
        })
        data = response.json()
        assert data["query"] == {
            "status": "available",
            "category": {"$in": ["dry-food", "treats", "wet-food"]},
            "price": {"$gte": 15, "$lte": 30},
        }
        assert data["sort"] == [["price", 1]]


class TestApply:
    def test_apply_filters_and_counts(self, client, pet_records):
        response = client.post("/filters/pets/apply", json={
            "filters": {"size": "small", "available": "all"},
            "entities": pet_records,
        })
        data = response.json()
        assert [p["name"] for p in data["results"]] == ["Whiskers", "Nemo", "Peanut"]
        assert data["total_results"] == 3
        assert data["facets"]["size"]["small"] == 3
        assert data["facets"]["category"]["all"] == 5
        assert data["active_filter_count"] == 2

    def test_apply_with_sort(self, client, product_records):
        response = client.post("/filters/products/apply", json={
            "filters": {"sort": "price-high"},
            "entities": product_records,
            "sort": True,
        })
        names = [p["name"] for p in response.json()["results"]]
        # Discontinued products are filtered out by the availability default
        assert names == ["Orthopedic Dog Bed", "Travel Carrier", "Indoor Cat Formula", "KONG Classic"]
