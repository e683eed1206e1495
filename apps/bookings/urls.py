"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingCancelView, BookingCreateView, BookingDetailView, RequesterBookingsView

urlpatterns = [
    path("", BookingCreateView.as_view(), name="booking-create"),
    path("detail/<str:booking_id>/", BookingDetailView.as_view(), name="booking-detail"),
    path("<str:booking_id>/cancel/", BookingCancelView.as_view(), name="booking-cancel"),
    path("user/<str:user_id>/", RequesterBookingsView.as_view(), name="booking-user-list"),
]
