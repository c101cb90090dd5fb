from __future__ import annotations

from typing import Any, Iterable, List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.images.dtos import CreateImageDTO, RecoveryImageDTO
    from apps.images.models import Image


class ImageRepositoryProtocol(Protocol):
    def list(self, **filters) -> Iterable["Image"]: ...

    def get_by_id(self, pk: Any) -> Optional["Image"]: ...

    def exists_by_id(self, pk: Any) -> bool: ...

    def save(self, obj: "Image") -> "Image": ...

    def delete_by_id(self, pk: Any) -> None: ...


class ImageMapperProtocol(Protocol):
    def to_dto(self, image: "Image") -> "RecoveryImageDTO": ...

    def many_to_dto(self, images: Iterable["Image"]) -> List["RecoveryImageDTO"]: ...

    def to_entity(self, dto: "CreateImageDTO") -> "Image": ...

    def overwrite_entity_from_dto(
        self, dto: "CreateImageDTO", image: "Image"
    ) -> "Image": ...
