"""
Booking Command Handlers

The use cases of the booking engine. Each handler validates its command,
then performs all writes inside one DjangoUnitOfWork so that the lot's
capacity counter and the ledger always move together.

Commands:
- CreateBookingCommand: Admit a new booking
- CancelBookingCommand: Cancel a confirmed booking and release its slot
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable
import logging

from django.conf import settings
from django.utils import timezone

from apps.bookings.domain.events import BookingCancelled, BookingCreated
from apps.bookings.ledger import ReservationLedger
from apps.bookings.models import Booking
from apps.bookings.services import OverlapChecker
from apps.lots.models import Lot
from apps.lots.registry import LotRegistry
from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import Conflict, Forbidden, InvalidRequest, InvalidState
from shared.domain.value_objects import CENT, TimeWindow

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

REFUND_RELEASED = "Slot has been released. Refund will be processed."
REFUND_PAST = "No refund — booking time has already passed"
REFUND_NOT_RELEASED = "Booking cancelled. Refund will be processed."


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """Request to reserve one slot at a lot for a window on a date."""
    lot_id: str | None
    user_id: str | None
    date: date | None
    start_time: time | None
    end_time: time | None
    vehicle_number: str | None = None


@dataclass
class CancelBookingCommand:
    """Request to cancel a booking, optionally checking who owns it."""
    booking_id: str | None
    user_id: str | None = None


# ===== Results =====

@dataclass
class AdmissionResult:
    """Admitted booking plus the lot's counters right after the decrement."""
    booking: Booking
    lot: Lot
    available_slots: int
    total_slots: int


@dataclass
class CancellationResult:
    booking: Booking
    slot_released: bool
    refund_note: str
    available_slots: int | None = None
    total_slots: int | None = None


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Validation fails fast in a fixed order (fields, date, window, duration,
    lot, static capacity). Then, in one transaction:
    1. Lock the lot row and count overlapping confirmed bookings
    2. Conditionally decrement the lot's available slots
    3. Insert the booking row
    The conditional decrement is the authoritative guard; the static check
    and the overlap count only reject earlier.
    """

    def __init__(
        self,
        registry: LotRegistry,
        ledger: ReservationLedger,
        checker: OverlapChecker,
        *,
        using: str,
        clock: Clock = timezone.now,
    ):
        self.registry = registry
        self.ledger = ledger
        self.checker = checker
        self.using = using
        self.clock = clock

    def handle(self, command: CreateBookingCommand) -> AdmissionResult:
        on_date, window, duration_hours = self._validate(command)

        lot = self.registry.get_lot(command.lot_id)

        # Static check before opening a transaction
        if lot.is_full:
            raise Conflict("This parking lot is currently full. No slots available.")

        total_cost = (lot.hourly_rate * duration_hours).rounded().amount

        logger.info(
            f"Admitting booking at lot {lot.pk} for user {command.user_id}, "
            f"{on_date} {window}"
        )

        with DjangoUnitOfWork(using=self.using) as uow:
            locked = self.registry.lock_lot(lot.pk)

            if not self.checker.has_capacity(locked, on_date, window):
                raise Conflict(
                    f"No slots available for this time period. All {locked.total_slots} slots "
                    f"are booked between {window.start:%H:%M} and {window.end:%H:%M}."
                )

            updated = self.registry.decrement_available(locked.pk)
            if updated is None:
                raise Conflict("No parking slots available. Someone may have just booked the last one.")

            booking = self.ledger.record(
                lot=updated,
                user_id=command.user_id,
                vehicle_number=command.vehicle_number,
                on_date=on_date,
                window=window,
                duration_hours=duration_hours.quantize(CENT, rounding=ROUND_HALF_UP),
                total_cost=total_cost,
            )

            uow.add_event(BookingCreated(
                aggregate_id=booking.id,
                booking_id=booking.id,
                lot_id=updated.pk,
                user_id=booking.user_id,
                date=booking.date,
                window=window,
                total_cost=booking.total_cost,
                available_slots=updated.available_slots,
            ))

        logger.info(
            f"Booking {booking.id} admitted at lot {updated.pk} "
            f"({updated.available_slots}/{updated.total_slots} slots left)"
        )

        return AdmissionResult(
            booking=booking,
            lot=updated,
            available_slots=updated.available_slots,
            total_slots=updated.total_slots,
        )

    def _validate(self, command: CreateBookingCommand) -> tuple[date, TimeWindow, Decimal]:
        required = (command.lot_id, command.user_id, command.date, command.start_time, command.end_time)
        if any(value is None or value == "" for value in required):
            raise InvalidRequest("All fields are required: lot_id, user_id, date, start_time, end_time")

        on_date = _as_date(command.date)
        start, end = _as_time(command.start_time), _as_time(command.end_time)

        # Time of day is ignored here; bookings later today are allowed.
        today = timezone.localtime(self.clock()).date()
        if on_date < today:
            raise InvalidRequest("Cannot book for a past date")

        if start >= end:
            raise InvalidRequest("Start time must be before end time")

        window = TimeWindow(start, end)
        duration_hours = window.hours
        if duration_hours <= 0:
            raise InvalidRequest("End time must be after start time")
        max_hours = settings.PARKING_MAX_BOOKING_HOURS
        if duration_hours > max_hours:
            raise InvalidRequest(f"Maximum booking duration is {max_hours} hours")

        return on_date, window, duration_hours


class CancelBookingHandler:
    """
    Handler for CancelBooking command

    The status transition is a conditional update, so of two concurrent
    cancellations exactly one succeeds and only that one releases the
    slot. Slots of bookings whose start has already passed are not
    returned to the lot.
    """

    def __init__(
        self,
        registry: LotRegistry,
        ledger: ReservationLedger,
        *,
        using: str,
        clock: Clock = timezone.now,
    ):
        self.registry = registry
        self.ledger = ledger
        self.using = using
        self.clock = clock

    def handle(self, command: CancelBookingCommand) -> CancellationResult:
        if not command.booking_id:
            raise InvalidRequest("Booking ID is required")

        booking = self.ledger.get(command.booking_id)

        if booking.status == Booking.Status.CANCELLED:
            raise InvalidState("This booking is already cancelled")
        if not booking.is_confirmed:
            raise InvalidState(f"Cannot cancel a {booking.status} booking")

        if command.user_id and booking.user_id != command.user_id:
            raise Forbidden("You can only cancel your own bookings")

        now = self.clock()
        is_past = booking.starts_at() < now

        logger.info(f"Cancelling booking {booking.id} (window started: {is_past})")

        with DjangoUnitOfWork(using=self.using) as uow:
            cancelled = self.ledger.mark_cancelled(booking.pk, now)
            if cancelled is None:
                raise Conflict("Failed to cancel booking. It may have already been cancelled.")

            updated = None
            if not is_past:
                updated = self.registry.increment_available(cancelled.lot_id)
                if updated is None:
                    logger.warning(
                        f"Lot {cancelled.lot_id} was already at capacity while releasing booking {cancelled.pk}"
                    )

            uow.add_event(BookingCancelled(
                aggregate_id=cancelled.pk,
                booking_id=cancelled.pk,
                lot_id=cancelled.lot_id,
                user_id=cancelled.user_id,
                slot_released=updated is not None,
            ))

        logger.info(f"Booking {cancelled.pk} cancelled successfully")

        return CancellationResult(
            booking=cancelled,
            slot_released=updated is not None,
            refund_note=_refund_note(is_past, updated is not None),
            available_slots=updated.available_slots if updated else None,
            total_slots=updated.total_slots if updated else None,
        )


def _refund_note(is_past: bool, slot_released: bool) -> str:
    if is_past:
        return REFUND_PAST
    return REFUND_RELEASED if slot_released else REFUND_NOT_RELEASED

def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise InvalidRequest(f"Invalid date: {value!r}")


def _as_time(value) -> time:
    if isinstance(value, time):
        return value.replace(tzinfo=None)
    try:
        return time.fromisoformat(str(value))
    except ValueError:
        raise InvalidRequest(f"Invalid time: {value!r}")
