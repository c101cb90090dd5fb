from __future__ import annotations

from typing import List

from django.db import transaction

from apps.api.exceptions import NotFoundError
from apps.common import get_logger

from .dtos import CreateImageDTO, RecoveryImageDTO
from .protocols import ImageMapperProtocol, ImageRepositoryProtocol

logger = get_logger(__name__).bind(component="images", layer="service")


def _image_not_found(image_id: int) -> NotFoundError:
    return NotFoundError(
        f"Image not found with id: {image_id}", details={"id": str(image_id)}
    )


class ImageService:
    def __init__(
        self,
        images: ImageRepositoryProtocol,
        mapper: ImageMapperProtocol,
    ):
        self.images = images
        self.mapper = mapper
        self.logger = logger.bind(service="ImageService")

    def create_image(self, dto: CreateImageDTO) -> RecoveryImageDTO:
        self.logger.info("Creating image", name=dto.name, size=dto.size)
        with transaction.atomic():
            image = self.images.save(self.mapper.to_entity(dto))
        self.logger.info("Image created", image_id=image.id)
        return self.mapper.to_dto(image)

    def list_images(self) -> List[RecoveryImageDTO]:
        self.logger.debug("Listing images")
        with transaction.atomic():
            return self.mapper.many_to_dto(self.images.list())

    def get_image(self, image_id: int) -> RecoveryImageDTO:
        self.logger.debug("Fetching image", image_id=image_id)
        with transaction.atomic():
            image = self.images.get_by_id(image_id)
            if image is None:
                self.logger.warning("Image not found", image_id=image_id)
                raise _image_not_found(image_id)
            return self.mapper.to_dto(image)

    def update_image(self, image_id: int, dto: CreateImageDTO) -> RecoveryImageDTO:
        """Replace name, base64 and size with the DTO values, even empty ones."""
        self.logger.info("Updating image", image_id=image_id)
        with transaction.atomic():
            image = self.images.get_by_id(image_id)
            if image is None:
                self.logger.warning("Image update failed: not found", image_id=image_id)
                raise _image_not_found(image_id)
            self.mapper.overwrite_entity_from_dto(dto, image)
            image = self.images.save(image)
        self.logger.info("Image updated", image_id=image_id)
        return self.mapper.to_dto(image)

    def delete_image(self, image_id: int) -> None:
        self.logger.info("Deleting image", image_id=image_id)
        with transaction.atomic():
            if not self.images.exists_by_id(image_id):
                self.logger.warning(
                    "Image deletion failed: not found", image_id=image_id
                )
                raise _image_not_found(image_id)
            self.images.delete_by_id(image_id)
        self.logger.info("Image deleted", image_id=image_id)
