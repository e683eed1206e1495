"""Resource registry: capacity bookkeeping for parking lots.

``available_slots`` is never read-modified-written in Python. Both
mutations are single conditional ``UPDATE`` statements whose ``WHERE``
clause carries the precondition, so two concurrent callers can never both
take the last slot (or both return the same one): the database applies
them one after the other and the loser matches zero rows.
"""

from __future__ import annotations

import logging
from uuid import UUID

from django.db import DEFAULT_DB_ALIAS, transaction  # type: ignore
from django.db.models import F  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from shared.domain.errors import NotFound
from shared.infrastructure.identifiers import parse_identifier

from .models import Lot

logger = logging.getLogger(__name__)

LOT_NOT_FOUND = "Parking lot not found"


class LotRegistry:
    """Reads lots and applies atomic capacity updates on one database alias."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def _lots(self):
        return Lot.objects.using(self.using)

    def _lock_queryset_if_possible(self, queryset):
        """Apply select_for_update when inside transaction.atomic()."""

        if not transaction.get_connection(self.using).in_atomic_block:
            return queryset

        try:
            return queryset.select_for_update()
        except NotSupportedError:
            return queryset

    def _pk(self, lot_id) -> UUID:
        pk = parse_identifier(lot_id)
        if pk is None:
            raise NotFound(LOT_NOT_FOUND)
        return pk

    def get_lot(self, lot_id) -> Lot:
        try:
            return self._lots().get(pk=self._pk(lot_id))
        except Lot.DoesNotExist:
            raise NotFound(LOT_NOT_FOUND)

    def lock_lot(self, lot_id) -> Lot:
        """Re-read the lot, holding its row lock until the transaction ends."""
        queryset = self._lock_queryset_if_possible(self._lots().filter(pk=self._pk(lot_id)))
        lot = queryset.first()
        if lot is None:
            raise NotFound(LOT_NOT_FOUND)
        return lot

    def decrement_available(self, lot_id) -> Lot | None:
        """Take one slot. ``None`` means no slot was left when the update ran."""
        pk = self._pk(lot_id)
        updated = self._lots().filter(pk=pk, available_slots__gt=0).update(
            available_slots=F("available_slots") - 1
        )
        if not updated:
            logger.info(f"Decrement rejected for lot {pk}: no available slots")
            return None
        return self._lots().get(pk=pk)

    def increment_available(self, lot_id) -> Lot | None:
        """Return one slot. ``None`` means the lot was already at full capacity."""
        pk = self._pk(lot_id)
        updated = self._lots().filter(pk=pk, available_slots__lt=F("total_slots")).update(
            available_slots=F("available_slots") + 1
        )
        if not updated:
            logger.warning(f"Increment rejected for lot {pk}: already at total capacity")
            return None
        return self._lots().get(pk=pk)
