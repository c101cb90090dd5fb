from __future__ import annotations

from typing import Any, Iterable, List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.categories.dtos import CreateCategoryDTO, RecoveryCategoryDTO
    from apps.categories.models import Category


class CategoryRepositoryProtocol(Protocol):
    def list(self, **filters) -> Iterable["Category"]: ...

    def get_by_id(self, pk: Any) -> Optional["Category"]: ...

    def exists_by_id(self, pk: Any) -> bool: ...

    def exists_by_name_ignore_case(self, name: str) -> bool: ...

    def save(self, obj: "Category") -> "Category": ...

    def delete_by_id(self, pk: Any) -> None: ...


class CategoryMapperProtocol(Protocol):
    def to_dto(self, category: "Category") -> "RecoveryCategoryDTO": ...

    def many_to_dto(
        self, categories: Iterable["Category"]
    ) -> List["RecoveryCategoryDTO"]: ...

    def to_entity(self, dto: "CreateCategoryDTO") -> "Category": ...

    def update_entity_from_dto(
        self, dto: "CreateCategoryDTO", category: "Category"
    ) -> "Category": ...
