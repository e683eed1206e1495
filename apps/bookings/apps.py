from django.apps import AppConfig


class BookingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.bookings"
    label = "bookings"
    verbose_name = "Parking bookings"

    def ready(self) -> None:
        from .event_handlers import register_event_handlers

        register_event_handlers()
