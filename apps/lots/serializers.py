"""Serializers for parking lots."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Lot


class LotSerializer(serializers.ModelSerializer):
    """Read-only representation of a lot for display."""

    price_per_hour = serializers.SerializerMethodField()

    class Meta:
        model = Lot
        fields = [
            "id",
            "name",
            "address",
            "latitude",
            "longitude",
            "total_slots",
            "available_slots",
            "price_per_hour",
            "created_at",
        ]
        read_only_fields = fields

    def get_price_per_hour(self, obj: Lot) -> str:
        return f"{obj.hourly_rate.amount:.2f}"
