from __future__ import annotations

from .mappers import CategoryMapper
from .repositories import CategoryRepository
from .services import CategoryService


def build_category_service() -> CategoryService:
    return CategoryService(categories=CategoryRepository(), mapper=CategoryMapper())
