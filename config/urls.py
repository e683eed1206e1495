"""URL configuration for the parking reservation service.

The `urlpatterns` list routes URLs to views: the Django admin, the lot
and booking APIs, the health check and the OpenAPI schema.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

from .views import health_check

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health/', health_check, name='health'),
    path('api/parking/', include('apps.lots.urls')),
    path('api/booking/', include('apps.bookings.urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
]
