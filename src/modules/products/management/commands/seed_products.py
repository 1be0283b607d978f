from __future__ import annotations

from decimal import Decimal

from django.apps import apps
from django.core.management.base import BaseCommand

from modules.products.dtos import ProductDTO
from modules.products.services import ProductService

CATALOG = [
    ("Widget", "Tools", Decimal("9.99"), 120, "Everyday steel widget"),
    ("Torque Wrench", "Tools", Decimal("64.50"), 35, "3/8in drive, 10-80 Nm"),
    ("Cordless Drill", "Tools", Decimal("129.00"), 18, None),
    ("Mechanical Keyboard", "Electronics", Decimal("89.99"), 80, "Hot-swap switches"),
    ("USB-C Hub", "Electronics", Decimal("39.99"), 120, None),
    ("27in Monitor", "Electronics", Decimal("329.99"), 25, "1440p IPS panel"),
    ("Desk Lamp", "Office", Decimal("24.90"), 60, "LED, dimmable"),
    ("A4 Paper (500)", "Office", Decimal("6.49"), 400, None),
]


class Command(BaseCommand):
    help = "Seed the product collection with sample catalog data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Insert the sample products even if the collection is not empty.",
        )

    def handle(self, *args, **options):
        service = ProductService(repository=apps.get_app_config("products").repository)

        if service.list_products() and not options["force"]:
            self.stdout.write(
                self.style.WARNING("Products already present; use --force to add more.")
            )
            return

        self.stdout.write("Creating products...")
        created = 0
        for name, category, price, stock, description in CATALOG:
            service.create_product(
                ProductDTO(
                    name=name,
                    category=category,
                    price=price,
                    stock=stock,
                    description=description,
                )
            )
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))
