"""Serializers for the booking API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .application.command_handlers import (
    AdmissionResult,
    CancelBookingCommand,
    CancellationResult,
    CreateBookingCommand,
)
from .models import Booking

TIME_INPUT_FORMATS = ["%H:%M", "%H:%M:%S"]


class BookingCreateSerializer(serializers.Serializer):
    """Parses a booking request; presence and range checks belong to the engine."""

    lot_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    user_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=128)
    vehicle_number = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=32)
    date = serializers.DateField(required=False, allow_null=True)
    start_time = serializers.TimeField(required=False, allow_null=True, input_formats=TIME_INPUT_FORMATS)
    end_time = serializers.TimeField(required=False, allow_null=True, input_formats=TIME_INPUT_FORMATS)

    def to_command(self) -> CreateBookingCommand:
        data = self.validated_data
        return CreateBookingCommand(
            lot_id=data.get("lot_id"),
            user_id=data.get("user_id"),
            date=data.get("date"),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            vehicle_number=data.get("vehicle_number"),
        )


class BookingCancelSerializer(serializers.Serializer):
    user_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def to_command(self, booking_id: str) -> CancelBookingCommand:
        return CancelBookingCommand(booking_id=booking_id, user_id=self.validated_data.get("user_id") or None)


class BookingSerializer(serializers.ModelSerializer):
    """Booking with the lot's display fields joined."""

    lot_id = serializers.ReadOnlyField(source="lot.id")
    lot_name = serializers.ReadOnlyField(source="lot.name")
    lot_address = serializers.ReadOnlyField(source="lot.address")
    latitude = serializers.DecimalField(source="lot.latitude", max_digits=9, decimal_places=6, read_only=True)
    longitude = serializers.DecimalField(source="lot.longitude", max_digits=9, decimal_places=6, read_only=True)
    price_per_hour = serializers.SerializerMethodField()
    start_time = serializers.TimeField(format="%H:%M", read_only=True)
    end_time = serializers.TimeField(format="%H:%M", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "lot_id",
            "lot_name",
            "lot_address",
            "latitude",
            "longitude",
            "user_id",
            "vehicle_number",
            "date",
            "start_time",
            "end_time",
            "duration_hours",
            "total_cost",
            "price_per_hour",
            "status",
            "created_at",
            "cancelled_at",
        ]
        read_only_fields = fields

    def get_price_per_hour(self, obj: Booking) -> str:
        return f"{obj.lot.hourly_rate.amount:.2f}"


def admission_payload(result: AdmissionResult) -> dict:
    data = dict(BookingSerializer(result.booking).data)
    data["available_slots"] = result.available_slots
    data["total_slots"] = result.total_slots
    return data


def cancellation_payload(result: CancellationResult) -> dict:
    data = dict(BookingSerializer(result.booking).data)
    data["slot_released"] = result.slot_released
    data["refund_note"] = result.refund_note
    data["available_slots"] = result.available_slots
    data["total_slots"] = result.total_slots
    return data
