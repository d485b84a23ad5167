from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Cake

STARTER_CAKES = [
    {
        "name": "Chocolate Fudge",
        "description": "Dark chocolate sponge layered with fudge frosting.",
        "price": Decimal("25.99"),
        "category": "Chocolate",
    },
    {
        "name": "Black Forest",
        "description": "Chocolate sponge, cherries and whipped cream.",
        "price": Decimal("28.50"),
        "category": "Chocolate",
    },
    {
        "name": "Lemon Drizzle",
        "description": "Zesty lemon loaf with a crunchy sugar glaze.",
        "price": Decimal("22.50"),
        "category": "Fruit",
    },
    {
        "name": "Strawberry Shortcake",
        "description": "Vanilla sponge with fresh strawberries and cream.",
        "price": Decimal("24.00"),
        "category": "Fruit",
    },
    {
        "name": "Classic Victoria Sponge",
        "description": "Jam and buttercream between two vanilla sponges.",
        "price": Decimal("19.99"),
        "category": "Classic",
    },
    {
        "name": "Red Velvet",
        "description": "Cocoa sponge with cream cheese frosting.",
        "price": Decimal("27.00"),
        "category": "Classic",
    },
    {
        "name": "Two Tier Wedding Cake",
        "description": "Vanilla and raspberry tiers finished in white fondant.",
        "price": Decimal("180.00"),
        "category": "Wedding",
    },
]


class Command(BaseCommand):
    help = "Seeds a starter cake catalog"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete cakes that no order refers to before seeding",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["reset"]:
            deleted, _ = Cake.objects.filter(order_items__isnull=True).delete()
            self.stdout.write(f"Removed {deleted} unreferenced cake(s)")

        created = 0
        for data in STARTER_CAKES:
            _, was_created = Cake.objects.get_or_create(
                name=data["name"],
                defaults={key: value for key, value in data.items() if key != "name"},
            )
            created += was_created

        self.stdout.write(self.style.SUCCESS(
            f"Seeded {created} new cake(s), {len(STARTER_CAKES) - created} already present"
        ))
