from apps.common.repository import GenericRepository
from .models import Image


class ImageRepository(GenericRepository[Image]):
    def __init__(self):
        super().__init__(Image)
