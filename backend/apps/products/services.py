from __future__ import annotations

from typing import List

from django.db import transaction

from apps.api.exceptions import NotFoundError
from apps.common import get_logger

from .dtos import CreateProductDTO, RecoveryProductDTO
from .protocols import ProductMapperProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="products", layer="service")


def _product_not_found(product_id: int) -> NotFoundError:
    return NotFoundError("Product not found", details={"id": str(product_id)})


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        mapper: ProductMapperProtocol,
    ):
        self.products = products
        self.mapper = mapper
        self.logger = logger.bind(service="ProductService")

    def create_product(self, dto: CreateProductDTO) -> RecoveryProductDTO:
        self.logger.info(
            "Creating product",
            name=dto.name,
            category=dto.category,
            variations=len(dto.variations),
        )
        with transaction.atomic():
            product = self.products.save_with_variations(
                self.mapper.to_entity(dto), self.mapper.variations_to_entities(dto)
            )
            result = self.mapper.to_dto(product)
        self.logger.info("Product created", product_id=product.id)
        return result

    def list_products(self) -> List[RecoveryProductDTO]:
        self.logger.debug("Listing products")
        with transaction.atomic():
            return self.mapper.many_to_dto(self.products.list())

    def get_product(self, product_id: int) -> RecoveryProductDTO:
        self.logger.debug("Fetching product", product_id=product_id)
        with transaction.atomic():
            product = self.products.get_by_id(product_id)
            if product is None:
                self.logger.warning("Product not found", product_id=product_id)
                raise _product_not_found(product_id)
            return self.mapper.to_dto(product)

    def update_product(
        self, product_id: int, dto: CreateProductDTO
    ) -> RecoveryProductDTO:
        """Overwrite the product fields and replace its whole variation set."""
        self.logger.info(
            "Updating product", product_id=product_id, variations=len(dto.variations)
        )
        with transaction.atomic():
            product = self.products.get_by_id(product_id)
            if product is None:
                self.logger.warning(
                    "Product update failed: not found", product_id=product_id
                )
                raise _product_not_found(product_id)
            self.mapper.overwrite_entity_from_dto(dto, product)
            product = self.products.replace_variations(
                product, self.mapper.variations_to_entities(dto)
            )
            result = self.mapper.to_dto(product)
        self.logger.info("Product updated", product_id=product_id)
        return result

    def delete_product(self, product_id: int) -> None:
        self.logger.info("Deleting product", product_id=product_id)
        with transaction.atomic():
            if not self.products.exists_by_id(product_id):
                self.logger.warning(
                    "Product deletion failed: not found", product_id=product_id
                )
                raise _product_not_found(product_id)
            self.products.delete_by_id(product_id)
        self.logger.info("Product deleted", product_id=product_id)
