"""Booking ledger models."""

from __future__ import annotations

import uuid
from datetime import datetime

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import TimeWindow


class Booking(models.Model):
    """Reservation of one slot at a lot for a time window on one day."""

    class Status(models.TextChoices):
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")
        # Reserved; no current flow moves a booking here.
        COMPLETED = "completed", _("Completed")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    lot = models.ForeignKey(
        "lots.Lot",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    user_id = models.CharField(max_length=128, db_index=True)
    vehicle_number = models.CharField(max_length=32, null=True, blank=True)
    date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    duration_hours = models.DecimalField(max_digits=5, decimal_places=2)
    total_cost = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.CONFIRMED,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="booking_valid_window",
            ),
        ]
        indexes = [
            models.Index(fields=["lot", "date", "status"], name="booking_lot_date_status"),
            models.Index(fields=["user_id", "-created_at"], name="booking_user_created"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.id} at {self.lot_id} on {self.date} {self.window}"

    @property
    def window(self) -> TimeWindow:
        return TimeWindow(self.start_time, self.end_time)

    def starts_at(self) -> datetime:
        """Scheduled start in the server's current time zone."""
        naive = datetime.combine(self.date, self.start_time)
        return timezone.make_aware(naive) if timezone.is_naive(naive) else naive

    @property
    def is_confirmed(self) -> bool:
        return self.status == self.Status.CONFIRMED
