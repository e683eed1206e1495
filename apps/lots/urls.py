"""URL routing for parking lots."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import LotDetailView

urlpatterns = [
    path("<str:lot_id>/", LotDetailView.as_view(), name="lot-detail"),
]
