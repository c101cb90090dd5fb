from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.categories.models import Category
from apps.images.models import Image
from apps.products.models import Product, ProductCategory, ProductVariation

CATEGORIES = [
    "Pizzas",
    "Hamburgers",
    "Drinks",
    "Desserts",
]

# (name, description, category, [(size_name, price), ...])
PRODUCTS = [
    (
        "Margherita",
        "Tomato sauce, mozzarella and fresh basil",
        ProductCategory.PIZZA,
        [("Small", "29.90"), ("Medium", "39.90"), ("Large", "49.90")],
    ),
    (
        "Classic Burger",
        "Beef patty, cheddar, lettuce and tomato",
        ProductCategory.HAMBURGER,
        [("Single", "24.90"), ("Double", "32.90")],
    ),
]

# 1x1 transparent PNG
PLACEHOLDER_IMAGE = (
    "placeholder.png",
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII=",
    68,
)


class Command(BaseCommand):
    help = "Seed sample categories, products and a placeholder image."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing data before seeding"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            # Variations are removed with their products
            Product.objects.all().delete()
            Category.objects.all().delete()
            Image.objects.all().delete()

        self.stdout.write("Seeding categories...")
        for name in CATEGORIES:
            if not Category.objects.filter(name__iexact=name).exists():
                Category.objects.create(name=name)

        self.stdout.write("Seeding products...")
        for name, description, category, sizes in PRODUCTS:
            product, created = Product.objects.get_or_create(
                name=name,
                category=category,
                defaults={"description": description, "available": True},
            )
            if not created:
                continue
            for size_name, price in sizes:
                ProductVariation.objects.create(
                    product=product,
                    size_name=size_name,
                    price=Decimal(price),
                )

        self.stdout.write("Seeding images...")
        name, base64, size = PLACEHOLDER_IMAGE
        Image.objects.get_or_create(name=name, defaults={"base64": base64, "size": size})

        self.stdout.write(self.style.SUCCESS("Seeding complete."))
