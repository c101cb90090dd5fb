from decimal import Decimal
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase

from apps.products.container import build_product_service
from apps.products.dtos import CreateProductDTO, CreateProductVariationDTO
from apps.products.models import Product, ProductVariation


def make_product_dto(name="Classic Burger", sizes=("Single", "Double")):
    return CreateProductDTO(
        name=name,
        category="HAMBURGER",
        variations=[
            CreateProductVariationDTO(size_name=size, price=Decimal("10.00"))
            for size in sizes
        ],
    )


class FailOnSecondVariationSave:
    """Stand-in for ProductVariation.save that breaks on its second call."""

    def __init__(self):
        self.calls = 0
        self.original = ProductVariation.save

    def __call__(self, instance, *args, **kwargs):
        self.calls += 1
        if self.calls == 2:
            raise DatabaseError("variation insert failed")
        return self.original(instance, *args, **kwargs)


class ProductTransactionTests(TestCase):
    def setUp(self):
        self.service = build_product_service()

    def test_failed_create_leaves_no_rows(self):
        with patch.object(
            ProductVariation, "save", autospec=True, side_effect=FailOnSecondVariationSave()
        ):
            with self.assertRaises(DatabaseError):
                self.service.create_product(make_product_dto())

        self.assertEqual(Product.objects.count(), 0)
        self.assertEqual(ProductVariation.objects.count(), 0)

    def test_failed_update_keeps_previous_state(self):
        created = self.service.create_product(make_product_dto())
        original_ids = [v.id for v in created.variations]

        with patch.object(
            ProductVariation, "save", autospec=True, side_effect=FailOnSecondVariationSave()
        ):
            with self.assertRaises(DatabaseError):
                self.service.update_product(
                    created.id, make_product_dto(name="Renamed", sizes=("Kids", "Large"))
                )

        product = Product.objects.get(id=created.id)
        self.assertEqual(product.name, "Classic Burger")
        self.assertEqual(
            list(product.variations.values_list("id", flat=True)), original_ids
        )
        self.assertEqual(
            list(product.variations.values_list("size_name", flat=True)),
            ["Single", "Double"],
        )
