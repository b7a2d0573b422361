# =============================================================================
# tests/test_products.py - Product Endpoint Tests
# =============================================================================

import pytest


class TestProductCrud:
    """Tests for /api/products."""

    def test_create_product(self, product, category):
        assert product["name"] == "Veggie Tray"
        assert product["price"] == 24.5
        assert product["category_id"] == category["id"]
        assert product["is_available"] is True
        assert product["created_at"] is not None

    def test_create_requires_admin(self, client, customer_headers, category):
        response = client.post(
            "/api/products",
            json={"name": "Cake", "price": 10, "category_id": category["id"]},
            headers=customer_headers,
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Admin access required"

    def test_create_rejects_unknown_category(self, client, admin_headers):
        response = client.post(
            "/api/products",
            json={"name": "Cake", "price": 10, "category_id": "64b0000000000000000000ff"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["details"] == {"category_id": "64b0000000000000000000ff"}

    @pytest.mark.parametrize("price", [0, -5])
    def test_create_rejects_non_positive_price(self, client, admin_headers, category, price):
        response = client.post(
            "/api/products",
            json={"name": "Cake", "price": price, "category_id": category["id"]},
            headers=admin_headers,
        )

        assert response.status_code == 422

    def test_get_product(self, client, product):
        response = client.get(f"/api/products/{product['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == product["id"]

    @pytest.mark.parametrize("product_id", ["64b0000000000000000000ff", "not-an-id"])
    def test_get_missing_product(self, client, product_id):
        response = client.get(f"/api/products/{product_id}")

        assert response.status_code == 404
        assert response.json()["code"] == "PRODUCT_NOT_FOUND"

    def test_update_product(self, client, admin_headers, product):
        response = client.put(
            f"/api/products/{product['id']}",
            json={"price": 30, "is_featured": True},
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["price"] == 30
        assert body["is_featured"] is True
        assert body["name"] == "Veggie Tray"

    def test_delete_product(self, client, admin_headers, product):
        response = client.delete(f"/api/products/{product['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["id"] == product["id"]
        assert client.get(f"/api/products/{product['id']}").status_code == 404


class TestProductList:
    """Tests for filtering and pagination."""

    @pytest.fixture
    def catalog(self, client, admin_headers, category):
        names = ["Chicken Skewers", "Cheese Board", "Fruit Cup", "Mini Quiche", "Chocolate Cake"]
        for index, name in enumerate(names):
            client.post(
                "/api/products",
                json={
                    "name": name,
                    "price": 5 + index,
                    "category_id": category["id"],
                    "is_featured": index % 2 == 0,
                },
                headers=admin_headers,
            )
        return names

    def test_pagination_and_content_range(self, client, catalog):
        response = client.get("/api/products", params={"page": 2, "limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 5
        assert body["page"] == 2
        assert body["limit"] == 2
        assert len(body["items"]) == 2
        assert response.headers["content-range"] == "products 2-3/5"

    def test_empty_page_content_range(self, client, catalog):
        response = client.get("/api/products", params={"page": 9, "limit": 2})

        assert response.json()["items"] == []
        assert response.headers["content-range"] == "products */5"

    def test_limit_capped(self, client):
        assert client.get("/api/products", params={"limit": 101}).status_code == 422

    def test_search_is_case_insensitive(self, client, catalog):
        body = client.get("/api/products", params={"search": "CHEESE"}).json()

        assert [item["name"] for item in body["items"]] == ["Cheese Board"]

    def test_featured_filter(self, client, catalog):
        body = client.get("/api/products", params={"featured": "true"}).json()

        assert body["total"] == 3
        assert all(item["is_featured"] for item in body["items"])

    def test_category_filter(self, client, catalog, category):
        assert client.get("/api/products", params={"category": category["id"]}).json()["total"] == 5
        assert client.get("/api/products", params={"category": "other"}).json()["total"] == 0
