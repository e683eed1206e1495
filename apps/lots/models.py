"""Parking lot models."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import Money


class Lot(models.Model):
    """Parking facility with a fixed number of slots."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255, blank=True)
    latitude = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("-90")), MaxValueValidator(Decimal("90"))],
    )
    longitude = models.DecimalField(
        max_digits=9,
        decimal_places=6,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("-180")), MaxValueValidator(Decimal("180"))],
    )
    total_slots = models.PositiveIntegerField(
        help_text=_("Fixed capacity of the lot."),
    )
    available_slots = models.PositiveIntegerField(
        help_text=_("Slots free right now. Changed only by conditional updates."),
    )
    price_per_hour = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Parking lot")
        verbose_name_plural = _("Parking lots")
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(available_slots__gte=0),
                name="lot_available_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(available_slots__lte=models.F("total_slots")),
                name="lot_available_within_total",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.available_slots}/{self.total_slots})"

    def save(self, *args, **kwargs):  # type: ignore
        if self._state.adding and self.available_slots is None:
            self.available_slots = self.total_slots
        super().save(*args, **kwargs)

    @property
    def hourly_rate(self) -> Money:
        """Rate used for pricing; lots without a rate fall back to the default."""
        amount = self.price_per_hour or Decimal(str(settings.PARKING_DEFAULT_PRICE_PER_HOUR))
        return Money(Decimal(amount), settings.PARKING_CURRENCY)

    @property
    def is_full(self) -> bool:
        return self.available_slots <= 0
