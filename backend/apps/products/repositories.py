from typing import List

from apps.common.repository import GenericRepository
from .models import Product, ProductVariation


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def list(self, **filters):  # type: ignore[override]
        """Return products with variations prefetched to avoid N+1 during DTO mapping."""
        return super().list(**filters).prefetch_related("variations")

    def save_with_variations(
        self, product: Product, variations: List[ProductVariation]
    ) -> Product:
        product.save()
        self._attach(product, variations)
        return product

    def replace_variations(
        self, product: Product, variations: List[ProductVariation]
    ) -> Product:
        """Save scalar changes and swap the whole variation set for ``variations``."""
        product.save()
        ProductVariation.objects.filter(product=product).delete()
        self._attach(product, variations)
        return product

    @staticmethod
    def _attach(product: Product, variations: List[ProductVariation]) -> None:
        for variation in variations:
            variation.product = product
            variation.save()
