"""
Booking Domain Events

Published on the message bus after the admitting or cancelling
transaction has committed.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from shared.domain.base import DomainEvent
from shared.domain.value_objects import TimeWindow


@dataclass
class BookingCreated(DomainEvent):
    """A booking was admitted and one slot was taken from the lot."""
    booking_id: UUID
    lot_id: UUID
    user_id: str
    date: date
    window: TimeWindow
    total_cost: Decimal
    available_slots: int


@dataclass
class BookingCancelled(DomainEvent):
    """
    A confirmed booking was cancelled

    ``slot_released`` is False when the booking window had already
    started, in which case the lot keeps its current count.
    """
    booking_id: UUID
    lot_id: UUID
    user_id: str
    slot_released: bool
