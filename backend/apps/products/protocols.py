from __future__ import annotations

from typing import Any, Iterable, List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.products.dtos import CreateProductDTO, RecoveryProductDTO
    from apps.products.models import Product, ProductVariation


class ProductRepositoryProtocol(Protocol):
    def list(self, **filters) -> Iterable["Product"]: ...

    def get_by_id(self, pk: Any) -> Optional["Product"]: ...

    def exists_by_id(self, pk: Any) -> bool: ...

    def save_with_variations(
        self, product: "Product", variations: List["ProductVariation"]
    ) -> "Product": ...

    def replace_variations(
        self, product: "Product", variations: List["ProductVariation"]
    ) -> "Product": ...

    def delete_by_id(self, pk: Any) -> None: ...


class ProductMapperProtocol(Protocol):
    def to_dto(self, product: "Product") -> "RecoveryProductDTO": ...

    def many_to_dto(self, products: Iterable["Product"]) -> List["RecoveryProductDTO"]: ...

    def to_entity(self, dto: "CreateProductDTO") -> "Product": ...

    def variations_to_entities(
        self, dto: "CreateProductDTO"
    ) -> List["ProductVariation"]: ...

    def overwrite_entity_from_dto(
        self, dto: "CreateProductDTO", product: "Product"
    ) -> "Product": ...
