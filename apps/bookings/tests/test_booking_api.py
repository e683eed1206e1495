"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
import uuid

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.lots.models import Lot


class BookingAPITests(APITestCase):
    """Covers creation, conflicts, cancellation and reads of bookings."""

    def setUp(self) -> None:
        self.lot = Lot.objects.create(
            name="Central Plaza Parking",
            address="MG Road, Bengaluru",
            latitude=Decimal("12.975500"),
            longitude=Decimal("77.606800"),
            total_slots=1,
            price_per_hour=Decimal("20.00"),
        )
        self.tomorrow = timezone.localdate() + timedelta(days=1)
        self.create_url = reverse("booking-create")

    def _payload(self, start: str, end: str, user_id: str = "guest-1") -> dict[str, str]:
        return {
            "lot_id": str(self.lot.id),
            "user_id": user_id,
            "vehicle_number": "KA01AB1234",
            "date": str(self.tomorrow),
            "start_time": start,
            "end_time": end,
        }

    def _create(self, start: str = "09:00", end: str = "11:00", user_id: str = "guest-1"):
        return self.client.post(self.create_url, self._payload(start, end, user_id), format="json")

    def test_guest_can_create_booking(self) -> None:
        response = self._create()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["success"])
        data = response.data["data"]
        self.assertEqual(data["lot_name"], "Central Plaza Parking")
        self.assertEqual(data["start_time"], "09:00")
        self.assertEqual(data["end_time"], "11:00")
        self.assertEqual(data["duration_hours"], "2.00")
        self.assertEqual(data["total_cost"], "40.00")
        self.assertEqual(data["status"], Booking.Status.CONFIRMED)
        self.assertEqual(data["available_slots"], 0)
        self.assertEqual(data["total_slots"], 1)

        self.lot.refresh_from_db()
        self.assertEqual(self.lot.available_slots, 0)

    def test_conflicting_booking_returns_409(self) -> None:
        self.assertEqual(self._create().status_code, status.HTTP_201_CREATED)

        response = self._create("10:00", "12:00", user_id="guest-2")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertFalse(response.data["success"])
        self.assertEqual(response.data["kind"], "conflict")
        self.assertEqual(Booking.objects.count(), 1)

    def test_invalid_window_returns_400(self) -> None:
        response = self._create("11:00", "09:00")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Start time must be before end time")

    def test_missing_fields_return_400(self) -> None:
        response = self.client.post(self.create_url, {"lot_id": str(self.lot.id)}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("All fields are required", response.data["error"])

    def test_malformed_time_returns_400(self) -> None:
        response = self._create("9 o'clock", "11:00")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data["success"])
        self.assertTrue(response.data["error"].startswith("start_time"))

    def test_unknown_lot_returns_404(self) -> None:
        payload = self._payload("09:00", "10:00")
        payload["lot_id"] = str(uuid.uuid4())

        response = self.client.post(self.create_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Parking lot not found")

    def test_guest_can_cancel_booking(self) -> None:
        booking_id = self._create().data["data"]["id"]

        response = self.client.patch(
            reverse("booking-cancel", args=[booking_id]), {"user_id": "guest-1"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        data = response.data["data"]
        self.assertEqual(data["status"], Booking.Status.CANCELLED)
        self.assertTrue(data["slot_released"])
        self.assertEqual(data["refund_note"], "Slot has been released. Refund will be processed.")
        self.assertEqual(data["available_slots"], 1)
        self.assertIsNotNone(data["cancelled_at"])

    def test_other_user_cannot_cancel(self) -> None:
        booking_id = self._create().data["data"]["id"]

        response = self.client.patch(
            reverse("booking-cancel", args=[booking_id]), {"user_id": "guest-2"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["kind"], "forbidden")

    def test_second_cancel_returns_400(self) -> None:
        booking_id = self._create().data["data"]["id"]
        url = reverse("booking-cancel", args=[booking_id])
        self.assertEqual(self.client.patch(url, {}, format="json").status_code, status.HTTP_200_OK)

        response = self.client.patch(url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "This booking is already cancelled")
        self.lot.refresh_from_db()
        self.assertEqual(self.lot.available_slots, 1)

    def test_booking_detail(self) -> None:
        booking_id = self._create().data["data"]["id"]

        response = self.client.get(reverse("booking-detail", args=[booking_id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(str(data["id"]), str(booking_id))
        self.assertEqual(data["lot_address"], "MG Road, Bengaluru")
        self.assertEqual(data["price_per_hour"], "20.00")

    def test_unknown_booking_returns_404(self) -> None:
        response = self.client.get(reverse("booking-detail", args=[uuid.uuid4()]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"success": False, "error": "Booking not found", "kind": "not_found"})

    def test_user_bookings_list(self) -> None:
        Lot.objects.filter(pk=self.lot.pk).update(total_slots=2, available_slots=2)
        self._create("09:00", "10:00")
        self._create("10:00", "11:00", user_id="guest-2")

        response = self.client.get(reverse("booking-user-list", args=["guest-1"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 1)
        self.assertEqual(response.data["data"][0]["user_id"], "guest-1")
