"""Integration tests for lot and service endpoints."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.lots.models import Lot


class LotAPITests(APITestCase):
    def setUp(self) -> None:
        self.lot = Lot.objects.create(
            name="Central Station Parking",
            address="1 Station Road",
            latitude=Decimal("12.977500"),
            longitude=Decimal("77.572200"),
            total_slots=10,
            available_slots=7,
            price_per_hour=Decimal("30.00"),
        )

    def test_lot_detail_shows_live_counts(self) -> None:
        response = self.client.get(reverse("lot-detail", args=[self.lot.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["success"])
        data = response.data["data"]
        self.assertEqual(data["name"], "Central Station Parking")
        self.assertEqual(data["total_slots"], 10)
        self.assertEqual(data["available_slots"], 7)
        self.assertEqual(data["price_per_hour"], "30.00")

    def test_unknown_lot_returns_404_envelope(self) -> None:
        for lot_id in (uuid.uuid4(), "garbage"):
            response = self.client.get(reverse("lot-detail", args=[lot_id]))

            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
            self.assertEqual(response.data, {"success": False, "error": "Parking lot not found", "kind": "not_found"})

    def test_health_check(self) -> None:
        response = self.client.get(reverse("health"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "ok")
