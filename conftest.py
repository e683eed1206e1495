"""Shared pytest fixtures."""

from __future__ import annotations

from datetime import datetime, time, timezone as dt_timezone
from decimal import Decimal

import pytest

# Wednesday morning; test settings run in UTC.
FIXED_NOW = datetime(2030, 6, 5, 8, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def make_lot(db):
    from apps.lots.models import Lot

    def _make(**kwargs):
        data = {
            "name": "Test Lot",
            "address": "1 Test Street",
            "total_slots": 1,
            "price_per_hour": Decimal("20.00"),
        }
        data.update(kwargs)
        return Lot.objects.create(**data)

    return _make


@pytest.fixture
def make_engine(db):
    from apps.bookings.application.engine import build_booking_engine

    def _make(now: datetime = FIXED_NOW):
        return build_booking_engine(clock=lambda: now)

    return _make


@pytest.fixture
def engine(make_engine):
    return make_engine()


@pytest.fixture
def book(engine):
    from apps.bookings.application.command_handlers import CreateBookingCommand

    def _book(lot, start: time, end: time, *, user_id="user-1", on_date=None, vehicle_number=None, using_engine=None):
        command = CreateBookingCommand(
            lot_id=str(lot.pk),
            user_id=user_id,
            date=on_date or FIXED_NOW.date(),
            start_time=start,
            end_time=end,
            vehicle_number=vehicle_number,
        )
        return (using_engine or engine).create_booking(command)

    return _book
