from typing import Iterable, List, Optional

from apps.common.mapping import overwrite_all

from .dtos import (
    CreateProductDTO,
    CreateProductVariationDTO,
    RecoveryProductDTO,
    RecoveryProductVariationDTO,
)
from .models import Product, ProductVariation

PRODUCT_WRITABLE_FIELDS = ("name", "description", "category", "available")


class ProductVariationMapper:
    def to_dto(self, variation: ProductVariation) -> RecoveryProductVariationDTO:
        return RecoveryProductVariationDTO(
            id=variation.id,
            size_name=variation.size_name,
            description=variation.description,
            available=variation.available,
            price=str(variation.price),
        )

    def many_to_dto(
        self, variations: Iterable[ProductVariation]
    ) -> List[RecoveryProductVariationDTO]:
        return [self.to_dto(v) for v in variations]

    def to_entity(self, dto: CreateProductVariationDTO) -> ProductVariation:
        # The owning product is attached by the repository on save
        return ProductVariation(
            size_name=dto.size_name,
            description=dto.description,
            available=dto.available,
            price=dto.price,
        )


class ProductMapper:
    def __init__(self, variation_mapper: Optional[ProductVariationMapper] = None) -> None:
        self.variation_mapper = variation_mapper or ProductVariationMapper()

    def to_dto(self, product: Product) -> RecoveryProductDTO:
        return RecoveryProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            category=product.category,
            available=product.available,
            variations=self.variation_mapper.many_to_dto(product.variations.all()),
        )

    def many_to_dto(self, products: Iterable[Product]) -> List[RecoveryProductDTO]:
        return [self.to_dto(p) for p in products]

    def to_entity(self, dto: CreateProductDTO) -> Product:
        return Product(
            name=dto.name,
            description=dto.description,
            category=dto.category,
            available=dto.available,
        )

    def variations_to_entities(self, dto: CreateProductDTO) -> List[ProductVariation]:
        return [self.variation_mapper.to_entity(v) for v in dto.variations]

    def overwrite_entity_from_dto(self, dto: CreateProductDTO, product: Product) -> Product:
        """Replace every scalar field; the variation set is replaced separately."""
        overwrite_all(dto, product, PRODUCT_WRITABLE_FIELDS)
        return product
