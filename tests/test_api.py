"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

import pytest
from fastapi.testclient import TestClient

from store_api.catalog.store import ProductStore
from store_api.core.dependencies import get_store_optional
from store_api.main import app


ERROR_KEYS = {"timestamp", "status", "error", "path"}


def assert_validation_error(response) -> None:
    """Check the generic 400 body."""
    assert response.status_code == 400
    data = response.json()
    assert set(data.keys()) == ERROR_KEYS
    assert data["status"] == 400
    assert data["error"] == "Validation failed"
    assert data["path"] == "/products"


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check reports a loaded catalog."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["catalog"] == "healthy"

    def test_health_reports_injected_store(self, client: TestClient, valid_product: dict):
        """Test products_loaded follows the store the endpoints write to."""
        client.post("/products", json=valid_product)
        response = client.get("/health")
        assert response.json()["details"]["products_loaded"] == 6

    def test_health_degraded_without_store(self, client: TestClient):
        """Test a missing store is reported, not raised."""
        app.dependency_overrides[get_store_optional] = lambda: None
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["components"]["catalog"] == "not_loaded"

    def test_readiness_probe(self, client: TestClient):
        """Test readiness probe."""
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json()["ready"] is True

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestListProducts:
    """Tests for GET /products."""

    def test_no_type_returns_empty_list(self, client: TestClient):
        """Known quirk: an absent filter matches nothing, seeds included."""
        response = client.get("/products")
        assert response.status_code == 200
        assert response.json() == []

    def test_filter_book(self, client: TestClient):
        """Test only the seeded book is returned."""
        response = client.get("/products", params={"type": "book"})
        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "name": "Game of Thrones", "type": "book", "inventory": 50, "cost": 200.0}
        ]

    def test_filter_gadget_keeps_insertion_order(self, client: TestClient):
        """Test gadgets come back in insertion order."""
        response = client.get("/products", params={"type": "gadget"})
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Camera", "iPhone"]

    def test_empty_type_matches_nothing(self, client: TestClient):
        """Test an empty type value is treated like an absent one."""
        response = client.get("/products?type=")
        assert response.status_code == 200
        assert response.json() == []

    def test_unknown_type_is_rejected(self, client: TestClient):
        """Test an unknown type value gets the generic error body."""
        response = client.get("/products", params={"type": "toy"})
        assert_validation_error(response)


class TestCreateProduct:
    """Tests for POST /products."""

    def test_create_success(self, client: TestClient, valid_product: dict):
        """Test valid create returns 201 and an integer id."""
        response = client.post("/products", json=valid_product)
        assert response.status_code == 201
        data = response.json()
        assert data == {"id": 6}

    def test_cost_is_optional(self, client: TestClient):
        """Test a body without cost is accepted."""
        response = client.post(
            "/products",
            json={"name": "Bread", "type": "food", "inventory": 1}
        )
        assert response.status_code == 201

    def test_returned_id_is_store_size(self, client: TestClient, store: ProductStore, valid_product: dict):
        """Test the returned id equals the store size after the write."""
        response = client.post("/products", json=valid_product)
        assert response.json()["id"] == len(store)

    def test_sequential_creates_return_distinct_ids(self, client: TestClient, valid_product: dict):
        """Test returned ids strictly increase."""
        first = client.post("/products", json=valid_product).json()["id"]
        second = client.post("/products", json={**valid_product, "name": "Kobo"}).json()["id"]
        assert second > first

    def test_created_product_appears_in_filter(self, client: TestClient, valid_product: dict):
        """Test round-trip of submitted fields through the type filter."""
        client.post("/products", json=valid_product)

        response = client.get("/products", params={"type": "gadget"})
        products = response.json()
        assert [p["name"] for p in products] == ["Camera", "iPhone", "Kindle"]

        created = products[-1]
        for field in ("name", "type", "inventory", "cost"):
            assert created[field] == valid_product[field]

    def test_client_id_is_ignored(self, client: TestClient, valid_product: dict):
        """Test the store assigns the id regardless of the body."""
        client.post("/products", json={**valid_product, "id": 1})

        products = client.get("/products", params={"type": "gadget"}).json()
        assert products[-1]["id"] == 6
        assert len({p["id"] for p in products}) == len(products)

    @pytest.mark.parametrize("overrides", [
        {"name": ""},
        {"name": "iPhone15"},
        {"name": "Milk Shake"},
        {"name": "Caf$"},
        {"name": "true"},
        {"name": "false"},
        {"name": "null"},
        {"inventory": 0},
        {"inventory": 10000},
        {"inventory": None},
        {"type": "toy"},
        {"cost": "cheap"},
    ])
    def test_invalid_create(self, client: TestClient, valid_product: dict, overrides: dict):
        """Test invalid bodies get the generic error body."""
        response = client.post("/products", json={**valid_product, **overrides})
        assert_validation_error(response)

    @pytest.mark.parametrize("missing", ["name", "type", "inventory"])
    def test_missing_required_field(self, client: TestClient, valid_product: dict, missing: str):
        """Test required fields."""
        body = {k: v for k, v in valid_product.items() if k != missing}
        response = client.post("/products", json=body)
        assert_validation_error(response)

    @pytest.mark.parametrize("cost", [b"NaN", b"Infinity", b"-Infinity", b"1e400"])
    def test_non_finite_cost_is_rejected(self, client: TestClient, store: ProductStore, cost: bytes):
        """Test costs that cannot be written back as JSON numbers."""
        response = client.post(
            "/products",
            content=b'{"name": "Kindle", "type": "gadget", "inventory": 3, "cost": ' + cost + b"}",
            headers={"Content-Type": "application/json"}
        )
        assert_validation_error(response)
        assert len(store) == 5

    def test_malformed_json(self, client: TestClient):
        """Test a non-JSON body."""
        response = client.post(
            "/products",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )
        assert_validation_error(response)

    def test_error_body_hides_field_messages(self, client: TestClient, valid_product: dict):
        """Test violation text stays out of the response."""
        response = client.post("/products", json={**valid_product, "inventory": 0})
        assert "Inventory" not in response.text
        assert "inventory" not in response.text

    def test_invalid_create_does_not_touch_store(self, client: TestClient, store: ProductStore, valid_product: dict):
        """Test rejected bodies are never stored."""
        client.post("/products", json={**valid_product, "name": "null"})
        assert len(store) == 5
