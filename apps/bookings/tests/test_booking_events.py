from datetime import time
from unittest import mock

import pytest

from apps.bookings import event_handlers
from apps.bookings.application.command_handlers import CancelBookingCommand
from apps.bookings.domain.events import BookingCancelled, BookingCreated
from apps.bookings.event_handlers import log_booking_cancelled, log_booking_created
from shared.application.message_bus import message_bus


@pytest.fixture
def published():
    events = []
    handler = events.append
    message_bus.register_event_handler(BookingCreated, handler)
    message_bus.register_event_handler(BookingCancelled, handler)
    yield events
    message_bus.unregister_event_handler(BookingCreated, handler)
    message_bus.unregister_event_handler(BookingCancelled, handler)


def test_audit_handlers_are_registered_on_startup():
    assert log_booking_created in message_bus.handlers_for(BookingCreated)
    assert log_booking_cancelled in message_bus.handlers_for(BookingCancelled)


def test_created_event_is_published_on_commit(make_lot, book, published, django_capture_on_commit_callbacks):
    lot = make_lot(total_slots=3)

    with django_capture_on_commit_callbacks(execute=False) as callbacks:
        result = book(lot, time(9), time(10))
    assert published == []

    for callback in callbacks:
        callback()

    [event] = published
    assert isinstance(event, BookingCreated)
    assert event.booking_id == result.booking.pk
    assert event.aggregate_id == result.booking.pk
    assert event.available_slots == 2
    assert str(event.window) == "09:00 - 10:00"


def test_cancelled_event_reports_release(make_lot, book, engine, published, django_capture_on_commit_callbacks):
    lot = make_lot()
    booking = book(lot, time(9), time(10)).booking

    with django_capture_on_commit_callbacks(execute=True):
        engine.cancel_booking(CancelBookingCommand(booking_id=str(booking.pk)))

    [event] = published
    assert isinstance(event, BookingCancelled)
    assert event.slot_released is True
    assert event.lot_id == lot.pk


def test_rejected_booking_publishes_nothing(make_lot, book, published, django_capture_on_commit_callbacks):
    from shared.domain.errors import Conflict

    lot = make_lot()
    with django_capture_on_commit_callbacks(execute=True):
        book(lot, time(9), time(10))
    published.clear()

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with pytest.raises(Conflict):
            book(lot, time(9), time(10))

    assert callbacks == []
    assert published == []


def test_audit_log_line(make_lot, book, django_capture_on_commit_callbacks):
    lot = make_lot()

    with mock.patch.object(event_handlers.audit_logger, "info") as audit:
        with django_capture_on_commit_callbacks(execute=True):
            result = book(lot, time(9), time(10))

    [line] = [call.args[0] for call in audit.call_args_list]
    assert line.startswith(f"booking_created booking={result.booking.pk} lot={lot.pk} user=user-1")
