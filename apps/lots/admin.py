"""Admin registration for parking lots."""

from __future__ import annotations

from django.contrib import admin

from .models import Lot


@admin.register(Lot)
class LotAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "address",
        "total_slots",
        "available_slots",
        "price_per_hour",
        "created_at",
    )
    search_fields = ("name", "address")
    readonly_fields = ("created_at",)

    def get_readonly_fields(self, request, obj=None):  # type: ignore
        # Capacity is fixed at creation and the counter belongs to the registry.
        if obj is not None:
            return self.readonly_fields + ("total_slots", "available_slots")
        return self.readonly_fields
