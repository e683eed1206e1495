"""
Booking Queries

Read-only paths over the ledger and the registry. No transaction beyond
the database's default read consistency.
"""

from __future__ import annotations

from django.db import DEFAULT_DB_ALIAS

from apps.bookings.ledger import ReservationLedger
from apps.bookings.models import Booking
from apps.lots.models import Lot
from apps.lots.registry import LotRegistry
from shared.domain.errors import InvalidRequest


class BookingQueryService:
    def __init__(
        self,
        ledger: ReservationLedger | None = None,
        registry: LotRegistry | None = None,
        *,
        using: str = DEFAULT_DB_ALIAS,
    ):
        self.ledger = ledger or ReservationLedger(using=using)
        self.registry = registry or LotRegistry(using=using)

    def get_booking(self, booking_id) -> Booking:
        """Single booking with its lot's display fields joined."""
        if not booking_id:
            raise InvalidRequest("Booking ID is required")
        return self.ledger.get(booking_id)

    def get_requester_bookings(self, user_id: str) -> list[Booking]:
        """All bookings of a requester, newest first."""
        if not user_id:
            raise InvalidRequest("User ID is required")
        return self.ledger.for_requester(user_id)

    def get_lot(self, lot_id) -> Lot:
        if not lot_id:
            raise InvalidRequest("Parking ID is required")
        return self.registry.get_lot(lot_id)
