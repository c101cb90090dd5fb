from __future__ import annotations

from .mappers import ImageMapper
from .repositories import ImageRepository
from .services import ImageService


def build_image_service() -> ImageService:
    return ImageService(images=ImageRepository(), mapper=ImageMapper())
