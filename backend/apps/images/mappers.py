from typing import Iterable, List, Optional

from apps.common.mapping import overwrite_all

from .dtos import CreateImageDTO, RecoveryImageDTO
from .models import Image

WRITABLE_FIELDS = ("name", "base64", "size")


def _isoformat(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


class ImageMapper:
    def to_dto(self, image: Image) -> RecoveryImageDTO:
        return RecoveryImageDTO(
            id=image.id,
            name=image.name,
            base64=image.base64,
            size=image.size,
            created_at=_isoformat(image.created_at),
            updated_at=_isoformat(image.updated_at),
        )

    def many_to_dto(self, images: Iterable[Image]) -> List[RecoveryImageDTO]:
        return [self.to_dto(i) for i in images]

    def to_entity(self, dto: CreateImageDTO) -> Image:
        return Image(name=dto.name, base64=dto.base64, size=dto.size)

    def overwrite_entity_from_dto(self, dto: CreateImageDTO, image: Image) -> Image:
        """Full overwrite: every writable field takes the DTO value, None included."""
        overwrite_all(dto, image, WRITABLE_FIELDS)
        return image
