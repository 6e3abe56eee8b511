"""HTTP tests for the product endpoints."""

import asyncio
import time
from uuid import uuid4

import httpx
import pytest
from fastapi.testclient import TestClient

from src.catalog.api.http.app import create_app
from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.entities import Product, ProductRepository


@pytest.fixture
def category(client: TestClient, user_headers: dict[str, str]) -> dict:
    response = client.post(
        "/categories", json={"name": "Books", "description": "Paper"}, headers=user_headers
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product(client: TestClient, admin_headers: dict[str, str], category: dict) -> dict:
    response = client.post(
        "/products",
        json={
            "name": "Clean Architecture",
            "description": "A craftsman's guide",
            "image_url": "https://img.example.com/ca.png",
            "price": "34.99",
            "category": {"id": category["id"], "name": "ignored"},
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()


class TestProductAuthorization:
    def test_anonymous_can_list(self, client: TestClient):
        response = client.get("/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_admin_can_create(self, product: dict, category: dict):
        assert product["name"] == "Clean Architecture"
        assert product["price"] == "34.99"
        assert product["category"] == {
            "id": category["id"],
            "name": "Books",
            "description": "Paper",
        }

    def test_user_role_is_forbidden(self, client: TestClient, user_headers: dict[str, str]):
        response = client.post(
            "/products", json={"name": "Nope", "price": "1.00"}, headers=user_headers
        )

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_anonymous_write_is_unauthorized(self, client: TestClient):
        response = client.post("/products", json={"name": "Nope", "price": "1.00"})

        assert response.status_code == 401

    def test_invalid_token_is_rejected(self, client: TestClient):
        response = client.get("/products", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == 401
        assert response.json()["detail"].startswith("JWT error:")
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_expired_token_is_rejected(self, client: TestClient, token_factory):
        token = token_factory("admin-1", ["ADMIN"], expires_in_seconds=-3600)

        response = client.delete(
            f"/products/{uuid4()}", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401


class TestProductEndpoints:
    def test_create_ignores_client_id(self, client: TestClient, admin_headers: dict[str, str]):
        client_id = str(uuid4())

        response = client.post(
            "/products", json={"id": client_id, "name": "Fresh", "price": "2.00"}, headers=admin_headers
        )

        assert response.status_code == 201
        assert response.json()["id"] != client_id
        assert response.json()["category"] is None

    def test_create_with_unknown_category(self, client: TestClient, admin_headers: dict[str, str]):
        response = client.post(
            "/products",
            json={"name": "Orphan", "price": "2.00", "category": {"id": str(uuid4()), "name": "x"}},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_get_by_id(self, client: TestClient, product: dict):
        response = client.get(f"/products/{product['id']}")

        assert response.status_code == 200
        assert response.json() == product

    def test_get_missing(self, client: TestClient):
        product_id = uuid4()

        response = client.get(f"/products/{product_id}")

        assert response.status_code == 404
        body = response.json()
        assert body["detail"] == f"Product with ID: {product_id} not available."
        assert body["request_id"] == response.headers["X-Request-ID"]

    def test_malformed_id(self, client: TestClient):
        assert client.get("/products/not-a-uuid").status_code == 422

    def test_replace_forces_path_id(
        self, client: TestClient, admin_headers: dict[str, str], product: dict
    ):
        response = client.put(
            f"/products/{product['id']}",
            json={"id": str(uuid4()), "name": "Clean Code", "price": "29.00"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["id"] == product["id"]
        assert client.get(f"/products/{product['id']}").json()["name"] == "Clean Code"

    def test_replace_missing(self, client: TestClient, admin_headers: dict[str, str]):
        response = client.put(
            f"/products/{uuid4()}", json={"name": "Ghost", "price": "1.00"}, headers=admin_headers
        )

        assert response.status_code == 404

    def test_delete(self, client: TestClient, admin_headers: dict[str, str], product: dict):
        response = client.delete(f"/products/{product['id']}", headers=admin_headers)

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/products/{product['id']}").status_code == 404
        assert client.delete(f"/products/{product['id']}", headers=admin_headers).status_code == 404

    def test_bulk(self, client: TestClient, admin_headers: dict[str, str], product: dict):
        other = client.post(
            "/products", json={"name": "Other", "price": "5.00"}, headers=admin_headers
        ).json()

        response = client.post("/products/bulk", json=[other["id"], product["id"]])

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [other["id"], product["id"]]

    def test_bulk_collapses_duplicate_ids(self, client: TestClient, product: dict):
        response = client.post("/products/bulk", json=[product["id"], product["id"]])

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [product["id"]]

    def test_bulk_partial_miss(self, client: TestClient, product: dict):
        missing = str(uuid4())

        response = client.post("/products/bulk", json=[product["id"], missing])

        assert response.status_code == 404
        assert response.json()["details"] == {"missing_ids": [missing]}

    def test_list_by_category(
        self, client: TestClient, admin_headers: dict[str, str], product: dict, category: dict
    ):
        client.post("/products", json={"name": "Loose", "price": "1.00"}, headers=admin_headers)

        response = client.get(f"/products/category/{category['id']}")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [product["id"]]

    def test_validation_error(self, client: TestClient, admin_headers: dict[str, str]):
        response = client.post("/products", json={"name": "", "price": "-1"}, headers=admin_headers)

        assert response.status_code == 422
        assert response.json()["request_id"]


class TestConcurrentReads:
    async def test_slow_database_reads_overlap(
        self, app_dependencies: ApplicationDependencies, monkeypatch: pytest.MonkeyPatch
    ):
        def slow_get(self, product_id: str) -> Product:
            time.sleep(0.5)
            return Product(id=product_id, name="Slow", price="1.00")

        monkeypatch.setattr(ProductRepository, "get", slow_get)
        transport = httpx.ASGITransport(app=create_app(app_dependencies))

        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            started = time.perf_counter()
            responses = await asyncio.gather(
                http.get(f"/products/{uuid4()}"), http.get(f"/products/{uuid4()}")
            )
            elapsed = time.perf_counter() - started

        assert [r.status_code for r in responses] == [200, 200]
        # Two blocking reads of 0.5s each finish together when off the event loop
        assert elapsed < 0.9
