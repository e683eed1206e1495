"""Create sample parking lots for local development."""

from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand  # type: ignore
from django.db import transaction  # type: ignore

from apps.lots.models import Lot

SAMPLE_LOTS = [
    {
        "name": "Central Station Parking",
        "address": "1 Station Road",
        "latitude": Decimal("12.977500"),
        "longitude": Decimal("77.572200"),
        "total_slots": 50,
        "price_per_hour": Decimal("30.00"),
    },
    {
        "name": "City Mall Basement",
        "address": "24 Market Street",
        "latitude": Decimal("12.971600"),
        "longitude": Decimal("77.594600"),
        "total_slots": 120,
        "price_per_hour": Decimal("40.00"),
    },
    {
        "name": "Lakeside Open Lot",
        "address": "Lake View Avenue",
        "latitude": Decimal("12.935200"),
        "longitude": Decimal("77.624500"),
        "total_slots": 25,
        "price_per_hour": Decimal("20.00"),
    },
    {
        "name": "Tech Park Multilevel",
        "address": "Outer Ring Road, Block C",
        "latitude": Decimal("12.925800"),
        "longitude": Decimal("77.676400"),
        "total_slots": 300,
        "price_per_hour": Decimal("25.00"),
    },
    {
        "name": "Old Town Kerbside",
        "address": "Heritage Lane",
        "latitude": Decimal("12.963000"),
        "longitude": Decimal("77.577000"),
        "total_slots": 1,
        "price_per_hour": Decimal("0.00"),
    },
]


class Command(BaseCommand):
    help = "Create sample parking lots (existing lots with the same name are left untouched)."

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument("--database", default="default", help="Database alias to seed.")

    def handle(self, *args, **options):  # type: ignore
        using = options["database"]
        created = 0
        with transaction.atomic(using=using):
            for data in SAMPLE_LOTS:
                defaults = {key: value for key, value in data.items() if key != "name"}
                defaults["available_slots"] = data["total_slots"]
                _, was_created = Lot.objects.using(using).get_or_create(name=data["name"], defaults=defaults)
                created += int(was_created)

        self.stdout.write(self.style.SUCCESS(f"Seeded {created} parking lots ({len(SAMPLE_LOTS) - created} already present)."))
