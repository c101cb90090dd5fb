from __future__ import annotations

from typing import List

from django.db import IntegrityError, transaction

from apps.api.exceptions import ConflictError, NotFoundError
from apps.common import get_logger

from .dtos import CreateCategoryDTO, RecoveryCategoryDTO
from .protocols import CategoryMapperProtocol, CategoryRepositoryProtocol

logger = get_logger(__name__).bind(component="categories", layer="service")


def _duplicate_name(name) -> ConflictError:
    return ConflictError(
        f"A category with name '{name}' already exists",
        details={"name": name},
    )


class CategoryService:
    def __init__(
        self,
        categories: CategoryRepositoryProtocol,
        mapper: CategoryMapperProtocol,
    ):
        self.categories = categories
        self.mapper = mapper
        self.logger = logger.bind(service="CategoryService")

    def create_category(self, dto: CreateCategoryDTO) -> RecoveryCategoryDTO:
        self.logger.info("Creating category", name=dto.name)
        try:
            with transaction.atomic():
                if self.categories.exists_by_name_ignore_case(dto.name):
                    self.logger.warning(
                        "Category creation rejected: duplicate name", name=dto.name
                    )
                    raise _duplicate_name(dto.name)
                category = self.categories.save(self.mapper.to_entity(dto))
        except IntegrityError as exc:
            # Concurrent insert slipped past the existence check
            self.logger.warning(
                "Category creation rejected by unique constraint", name=dto.name
            )
            raise _duplicate_name(dto.name) from exc
        self.logger.info("Category created", category_id=category.id)
        return self.mapper.to_dto(category)

    def list_categories(self) -> List[RecoveryCategoryDTO]:
        self.logger.debug("Listing categories")
        with transaction.atomic():
            return self.mapper.many_to_dto(self.categories.list())

    def get_category(self, category_id: int) -> RecoveryCategoryDTO:
        self.logger.debug("Fetching category", category_id=category_id)
        with transaction.atomic():
            category = self.categories.get_by_id(category_id)
            if category is None:
                self.logger.warning("Category not found", category_id=category_id)
                raise NotFoundError(
                    "Category not found", details={"id": str(category_id)}
                )
            return self.mapper.to_dto(category)

    def update_category(
        self, category_id: int, dto: CreateCategoryDTO
    ) -> RecoveryCategoryDTO:
        """Merge ``dto`` onto the stored category; None fields keep their value.

        Name uniqueness is not re-checked here. A rename that collides with
        another category is still refused by the database constraint.
        """
        self.logger.info("Updating category", category_id=category_id)
        try:
            with transaction.atomic():
                category = self.categories.get_by_id(category_id)
                if category is None:
                    self.logger.warning(
                        "Category update failed: not found", category_id=category_id
                    )
                    raise NotFoundError(
                        "Category not found", details={"id": str(category_id)}
                    )
                self.mapper.update_entity_from_dto(dto, category)
                category = self.categories.save(category)
        except IntegrityError as exc:
            self.logger.warning(
                "Category update rejected by unique constraint",
                category_id=category_id,
                name=dto.name,
            )
            raise _duplicate_name(dto.name) from exc
        self.logger.info("Category updated", category_id=category_id)
        return self.mapper.to_dto(category)

    def delete_category(self, category_id: int) -> None:
        self.logger.info("Deleting category", category_id=category_id)
        with transaction.atomic():
            if not self.categories.exists_by_id(category_id):
                self.logger.warning(
                    "Category deletion failed: not found", category_id=category_id
                )
                raise NotFoundError(
                    "Category not found", details={"id": str(category_id)}
                )
            self.categories.delete_by_id(category_id)
        self.logger.info("Category deleted", category_id=category_id)
