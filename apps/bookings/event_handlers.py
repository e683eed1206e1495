"""Default subscribers for booking events: the booking audit log."""

from __future__ import annotations

import logging

from shared.application.message_bus import message_bus

from .domain.events import BookingCancelled, BookingCreated

audit_logger = logging.getLogger("apps.bookings.audit")


def log_booking_created(event: BookingCreated) -> None:
    audit_logger.info(
        f"booking_created booking={event.booking_id} lot={event.lot_id} user={event.user_id} "
        f"date={event.date} window={event.window} cost={event.total_cost} "
        f"available={event.available_slots}"
    )


def log_booking_cancelled(event: BookingCancelled) -> None:
    audit_logger.info(
        f"booking_cancelled booking={event.booking_id} lot={event.lot_id} user={event.user_id} "
        f"slot_released={event.slot_released}"
    )


def register_event_handlers() -> None:
    message_bus.register_event_handler(BookingCreated, log_booking_created)
    message_bus.register_event_handler(BookingCancelled, log_booking_cancelled)
