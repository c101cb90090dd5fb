from apps.common.repository import GenericRepository
from .models import Category


class CategoryRepository(GenericRepository[Category]):
    def __init__(self):
        super().__init__(Category)

    def exists_by_name_ignore_case(self, name: str) -> bool:
        return self.model.objects.filter(name__iexact=name).exists()
