"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "lot",
        "user_id",
        "vehicle_number",
        "date",
        "start_time",
        "end_time",
        "status",
        "total_cost",
        "created_at",
    )
    list_filter = ("status", "date")
    search_fields = ("id", "user_id", "vehicle_number", "lot__name")
    list_select_related = ("lot",)

    # Bookings are created and cancelled only through the booking engine.
    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
