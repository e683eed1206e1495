"""API views for parking lots."""

from __future__ import annotations

from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.application.queries import BookingQueryService

from .serializers import LotSerializer


class LotDetailView(APIView):
    """Lot detail with live slot counts."""

    serializer_class = LotSerializer
    query_service_class = BookingQueryService

    def get(self, request, lot_id: str):  # type: ignore
        lot = self.query_service_class().get_lot(lot_id)
        return Response({"success": True, "data": LotSerializer(lot).data})
