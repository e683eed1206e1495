"""
Booking Engine

Composition root for the booking use cases. The database alias is the
injected store client: every collaborator is built on it and no
module-level connection state is shared between requests.
"""

from __future__ import annotations

from django.db import DEFAULT_DB_ALIAS
from django.utils import timezone

from apps.bookings.application.command_handlers import (
    AdmissionResult,
    CancelBookingCommand,
    CancelBookingHandler,
    CancellationResult,
    Clock,
    CreateBookingCommand,
    CreateBookingHandler,
)
from apps.bookings.application.queries import BookingQueryService
from apps.bookings.ledger import ReservationLedger
from apps.bookings.models import Booking
from apps.bookings.services import OverlapChecker
from apps.lots.registry import LotRegistry


class BookingEngine:
    """Public surface of the booking core: create, cancel and read bookings."""

    def __init__(
        self,
        registry: LotRegistry,
        ledger: ReservationLedger,
        checker: OverlapChecker,
        *,
        using: str = DEFAULT_DB_ALIAS,
        clock: Clock = timezone.now,
    ):
        self.registry = registry
        self.ledger = ledger
        self.checker = checker
        self.create_handler = CreateBookingHandler(registry, ledger, checker, using=using, clock=clock)
        self.cancel_handler = CancelBookingHandler(registry, ledger, using=using, clock=clock)
        self.queries = BookingQueryService(ledger, registry, using=using)

    def create_booking(self, command: CreateBookingCommand) -> AdmissionResult:
        return self.create_handler.handle(command)

    def cancel_booking(self, command: CancelBookingCommand) -> CancellationResult:
        return self.cancel_handler.handle(command)

    def get_booking(self, booking_id) -> Booking:
        return self.queries.get_booking(booking_id)

    def get_requester_bookings(self, user_id: str) -> list[Booking]:
        return self.queries.get_requester_bookings(user_id)


def build_booking_engine(using: str = DEFAULT_DB_ALIAS, clock: Clock = timezone.now) -> BookingEngine:
    registry = LotRegistry(using=using)
    ledger = ReservationLedger(using=using)
    return BookingEngine(registry, ledger, OverlapChecker(ledger), using=using, clock=clock)
