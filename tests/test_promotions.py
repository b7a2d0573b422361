# =============================================================================
# tests/test_promotions.py - Offer and Banner Tests
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from core.models.promotion import OfferCreate


def iso(delta: timedelta) -> str:
    return (datetime.now(timezone.utc) + delta).isoformat()


class TestOfferModel:
    """Tests for OfferCreate validation."""

    def test_window_must_be_ordered(self):
        now = datetime.now(timezone.utc)
        with pytest.raises(ValidationError):
            OfferCreate(title="Bad", discount_percent=10, starts_at=now, ends_at=now - timedelta(days=1))

    @pytest.mark.parametrize("percent", [0, 101])
    def test_discount_bounds(self, percent):
        with pytest.raises(ValidationError):
            OfferCreate(title="Bad", discount_percent=percent)

    def test_open_window_allowed(self):
        offer = OfferCreate(title="Always", discount_percent=5)
        assert offer.starts_at is None
        assert offer.ends_at is None


class TestOffers:
    """Tests for /api/offers."""

    @pytest.fixture
    def offers(self, client, admin_headers):
        payloads = [
            {"title": "Live", "discount_percent": 10, "starts_at": iso(-timedelta(days=1)), "ends_at": iso(timedelta(days=1))},
            {"title": "Open ended", "discount_percent": 5},
            {"title": "Expired", "discount_percent": 20, "starts_at": iso(-timedelta(days=5)), "ends_at": iso(-timedelta(days=2))},
            {"title": "Upcoming", "discount_percent": 15, "starts_at": iso(timedelta(days=2))},
            {"title": "Disabled", "discount_percent": 25, "is_active": False},
        ]
        created = {}
        for payload in payloads:
            response = client.post("/api/offers", json=payload, headers=admin_headers)
            assert response.status_code == 201
            created[payload["title"]] = response.json()
        return created

    def test_list_all(self, client, offers):
        assert client.get("/api/offers").json()["total"] == 5

    def test_active_only_returns_live_window(self, client, offers):
        body = client.get("/api/offers", params={"active": "true"}).json()

        assert {item["title"] for item in body["items"]} == {"Live", "Open ended"}

    def test_inactive_filter(self, client, offers):
        body = client.get("/api/offers", params={"active": "false"}).json()

        assert [item["title"] for item in body["items"]] == ["Disabled"]

    def test_update_rechecks_window(self, client, admin_headers, offers):
        live = offers["Live"]

        response = client.put(
            f"/api/offers/{live['id']}",
            json={"ends_at": iso(-timedelta(days=3))},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert "ends_at must be after starts_at" in response.json()["message"]

    def test_update_offer(self, client, admin_headers, offers):
        response = client.put(
            f"/api/offers/{offers['Live']['id']}",
            json={"discount_percent": 12.5},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["discount_percent"] == 12.5

    def test_delete_offer(self, client, admin_headers, offers):
        offer_id = offers["Expired"]["id"]

        assert client.delete(f"/api/offers/{offer_id}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/offers/{offer_id}").status_code == 404

    def test_create_requires_admin(self, client, customer_headers):
        response = client.post("/api/offers", json={"title": "x", "discount_percent": 5}, headers=customer_headers)

        assert response.status_code == 403


class TestBanners:
    """Tests for /api/banners."""

    def test_sorted_by_position(self, client, admin_headers):
        for title, position in [("Third", 3), ("First", 1), ("Second", 2)]:
            client.post(
                "/api/banners",
                json={"title": title, "image": f"https://img.example/{title}.jpg", "position": position},
                headers=admin_headers,
            )

        body = client.get("/api/banners").json()

        assert [item["title"] for item in body["items"]] == ["First", "Second", "Third"]

    def test_image_required(self, client, admin_headers):
        response = client.post("/api/banners", json={"title": "No image"}, headers=admin_headers)

        assert response.status_code == 422

    def test_update_and_filter(self, client, admin_headers):
        banner = client.post(
            "/api/banners",
            json={"title": "Summer", "image": "https://img.example/summer.jpg"},
            headers=admin_headers,
        ).json()

        client.put(f"/api/banners/{banner['id']}", json={"is_active": False}, headers=admin_headers)

        assert client.get("/api/banners", params={"active": "true"}).json()["total"] == 0
        assert client.get("/api/banners", params={"active": "false"}).json()["total"] == 1
