from typing import Any, Generic, Iterable, Optional, Type, TypeVar

from django.db import models

T = TypeVar("T", bound=models.Model)


class GenericRepository(Generic[T]):
    """Primary-key oriented persistence operations shared by every entity."""

    def __init__(self, model: Type[T]):
        self.model = model

    def _base_queryset(self):
        return self.model.objects.all()

    def list(self, **filters) -> Iterable[T]:
        return self._base_queryset().filter(**filters).order_by("pk")

    def get(self, **filters) -> Optional[T]:
        return self._base_queryset().filter(**filters).first()

    def get_by_id(self, pk: Any) -> Optional[T]:
        return self.get(pk=pk)

    def exists(self, **filters) -> bool:
        return self.model.objects.filter(**filters).exists()

    def exists_by_id(self, pk: Any) -> bool:
        return self.exists(pk=pk)

    def save(self, obj: T) -> T:
        """Insert ``obj`` when it has no primary key yet, update it otherwise."""
        obj.save()
        return obj

    def delete_by_id(self, pk: Any) -> None:
        self.model.objects.filter(pk=pk).delete()
