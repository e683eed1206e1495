"""Overlap and capacity checks for booking windows."""

from __future__ import annotations

from datetime import date

from django.db.models import Q  # type: ignore

from apps.lots.models import Lot
from shared.domain.value_objects import TimeWindow

from .ledger import ReservationLedger


class OverlapChecker:
    """Counts confirmed bookings competing with a window for a lot's slots.

    Must run inside the same transaction as the capacity decrement and the
    ledger insert; on its own it only rejects windows that are already
    fully booked.
    """

    def __init__(self, ledger: ReservationLedger):
        self.ledger = ledger

    def count_overlapping(self, lot_id, on_date: date, window: TimeWindow) -> int:
        # [s1, e1) and [s2, e2) overlap iff s1 < e2 and s2 < e1
        overlapping_filter = Q(start_time__lt=window.end) & Q(end_time__gt=window.start)
        return self.ledger.confirmed_on(lot_id, on_date).filter(overlapping_filter).count()

    def has_capacity(self, lot: Lot, on_date: date, window: TimeWindow) -> bool:
        return self.count_overlapping(lot.pk, on_date, window) < lot.total_slots
