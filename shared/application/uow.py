"""
Unit of Work Pattern

Wraps one database transaction and ensures that domain events
are published only after that transaction commits.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""

    @abstractmethod
    def add_event(self, event: DomainEvent):
        """Queue an event for publishing after commit"""


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Opens ``transaction.atomic()`` on the injected database alias. Any
    exception raised inside the block rolls back every write made through
    that alias, so a capacity decrement is never committed without its
    booking row (and vice versa).

    Usage:
        with DjangoUnitOfWork(using="default") as uow:
            lot = registry.decrement_available(lot_id)
            booking = ledger.record(...)
            uow.add_event(BookingCreated(...))
        # Transaction committed, events published
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self._events: List[DomainEvent] = []
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic(using=self.using)
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """
        Schedule event publishing

        The actual COMMIT happens when the atomic block exits; events are
        handed to ``transaction.on_commit`` so they never escape a
        transaction that ends up rolled back.
        """
        logger.debug(f"Committing transaction on '{self.using}' with {len(self._events)} events")

        events = self._events.copy()
        self._events.clear()

        if events:
            transaction.on_commit(lambda: self._publish_events(events), using=self.using)

    def rollback(self):
        """Discard events; the atomic block rolls back the writes"""
        logger.warning(f"Rolling back transaction on '{self.using}', discarding {len(self._events)} events")
        self._events.clear()

    def add_event(self, event: DomainEvent):
        self._events.append(event)

    def _publish_events(self, events: List[DomainEvent]):
        """Publish collected events to the message bus after commit"""
        from shared.application.message_bus import message_bus

        logger.info(f"Publishing {len(events)} domain events after commit")
        message_bus.publish_events(events)
