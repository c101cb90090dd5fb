from __future__ import annotations

from .mappers import ProductMapper, ProductVariationMapper
from .repositories import ProductRepository
from .services import ProductService


def build_product_service() -> ProductService:
    return ProductService(
        products=ProductRepository(),
        mapper=ProductMapper(variation_mapper=ProductVariationMapper()),
    )
