from typing import Iterable, List, Optional

from apps.common.mapping import merge_non_null

from .dtos import CreateCategoryDTO, RecoveryCategoryDTO
from .models import Category

# Fields a client may set; id and timestamps belong to the store
WRITABLE_FIELDS = ("name",)


def _isoformat(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


class CategoryMapper:
    def to_dto(self, category: Category) -> RecoveryCategoryDTO:
        return RecoveryCategoryDTO(
            id=category.id,
            name=category.name,
            created_at=_isoformat(category.created_at),
            updated_at=_isoformat(category.updated_at),
        )

    def many_to_dto(self, categories: Iterable[Category]) -> List[RecoveryCategoryDTO]:
        return [self.to_dto(c) for c in categories]

    def to_entity(self, dto: CreateCategoryDTO) -> Category:
        return Category(name=dto.name)

    def update_entity_from_dto(
        self, dto: CreateCategoryDTO, category: Category
    ) -> Category:
        """Merge update: fields that are None on ``dto`` keep their stored value."""
        merge_non_null(dto, category, WRITABLE_FIELDS)
        return category
