"""API views for the booking engine.

Thin wrappers: parse the request, call the engine, wrap the result in the
``{"success": ..., "data": ...}`` envelope. Engine errors are rendered by
``shared.infrastructure.exception_handler``.
"""

from __future__ import annotations

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .application.engine import build_booking_engine
from .serializers import (
    BookingCancelSerializer,
    BookingCreateSerializer,
    BookingSerializer,
    admission_payload,
    cancellation_payload,
)


class BookingEngineMixin:
    database_alias = "default"

    def get_engine(self):  # type: ignore
        return build_booking_engine(using=self.database_alias)


class BookingCreateView(BookingEngineMixin, APIView):
    serializer_class = BookingCreateSerializer

    def post(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_engine().create_booking(serializer.to_command())
        return Response({"success": True, "data": admission_payload(result)}, status=status.HTTP_201_CREATED)


class BookingCancelView(BookingEngineMixin, APIView):
    serializer_class = BookingCancelSerializer

    def patch(self, request, booking_id: str):  # type: ignore
        serializer = BookingCancelSerializer(data=request.data or {})
        serializer.is_valid(raise_exception=True)
        result = self.get_engine().cancel_booking(serializer.to_command(booking_id))
        return Response({"success": True, "data": cancellation_payload(result)})


class BookingDetailView(BookingEngineMixin, APIView):
    serializer_class = BookingSerializer

    def get(self, request, booking_id: str):  # type: ignore
        booking = self.get_engine().get_booking(booking_id)
        return Response({"success": True, "data": BookingSerializer(booking).data})


class RequesterBookingsView(BookingEngineMixin, APIView):
    serializer_class = BookingSerializer

    def get(self, request, user_id: str):  # type: ignore
        bookings = self.get_engine().get_requester_bookings(user_id)
        return Response(
            {
                "success": True,
                "count": len(bookings),
                "data": BookingSerializer(bookings, many=True).data,
            }
        )
