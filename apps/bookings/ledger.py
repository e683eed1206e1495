"""Reservation ledger: append-mostly store of bookings.

Rows are inserted once by the admission path and afterwards only their
``status``/``cancelled_at`` change, through a conditional update that
succeeds for at most one caller.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

from django.db import DEFAULT_DB_ALIAS  # type: ignore

from apps.lots.models import Lot
from shared.domain.errors import NotFound
from shared.domain.value_objects import TimeWindow
from shared.infrastructure.identifiers import parse_identifier

from .models import Booking

logger = logging.getLogger(__name__)

BOOKING_NOT_FOUND = "Booking not found"


class ReservationLedger:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def _bookings(self):
        return Booking.objects.using(self.using)

    def get(self, booking_id) -> Booking:
        """Booking with its lot joined, or ``NotFound``."""
        pk = parse_identifier(booking_id)
        if pk is None:
            raise NotFound(BOOKING_NOT_FOUND)
        try:
            return self._bookings().select_related("lot").get(pk=pk)
        except Booking.DoesNotExist:
            raise NotFound(BOOKING_NOT_FOUND)

    def for_requester(self, user_id: str) -> list[Booking]:
        return list(
            self._bookings()
            .select_related("lot")
            .filter(user_id=user_id)
            .order_by("-created_at")
        )

    def confirmed_on(self, lot_id, on_date: date):
        return self._bookings().filter(lot_id=lot_id, date=on_date, status=Booking.Status.CONFIRMED)

    def record(
        self,
        *,
        lot: Lot,
        user_id: str,
        vehicle_number: str | None,
        on_date: date,
        window: TimeWindow,
        duration_hours: Decimal,
        total_cost: Decimal,
    ) -> Booking:
        booking = self._bookings().create(
            lot=lot,
            user_id=user_id,
            vehicle_number=vehicle_number or None,
            date=on_date,
            start_time=window.start,
            end_time=window.end,
            duration_hours=duration_hours,
            total_cost=total_cost,
            status=Booking.Status.CONFIRMED,
        )
        logger.debug(f"Recorded booking {booking.id} at lot {lot.pk}")
        return booking

    def mark_cancelled(self, booking_id, cancelled_at: datetime) -> Booking | None:
        """Move a confirmed booking to cancelled. ``None`` if it was no longer confirmed."""
        updated = self._bookings().filter(pk=booking_id, status=Booking.Status.CONFIRMED).update(
            status=Booking.Status.CANCELLED,
            cancelled_at=cancelled_at,
        )
        if not updated:
            return None
        return self._bookings().select_related("lot").get(pk=booking_id)
