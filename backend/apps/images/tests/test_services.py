import unittest
from datetime import datetime, timezone
from unittest.mock import patch

from apps.api.exceptions import NotFoundError
from apps.images.dtos import CreateImageDTO
from apps.images.mappers import ImageMapper
from apps.images.services import ImageService


class DummyAtomic:
    def __call__(self, *args, **kwargs):
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class FakeImageRepository:
    def __init__(self):
        self._images = {}
        self._pk = 1

    def list(self, **filters):
        return [self._images[pk] for pk in sorted(self._images)]

    def get_by_id(self, pk):
        return self._images.get(pk)

    def exists_by_id(self, pk):
        return pk in self._images

    def save(self, obj):
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        if obj.id is None:
            obj.id = self._pk
            obj.created_at = now
            self._pk += 1
        obj.updated_at = now
        self._images[obj.id] = obj
        return obj

    def delete_by_id(self, pk):
        self._images.pop(pk, None)


class ImageServiceTests(unittest.TestCase):
    def setUp(self):
        self.atomic_patcher = patch(
            "apps.images.services.transaction.atomic", DummyAtomic()
        )
        self.atomic_patcher.start()
        self.repo = FakeImageRepository()
        self.service = ImageService(images=self.repo, mapper=ImageMapper())

    def tearDown(self):
        self.atomic_patcher.stop()

    def _create(self, name="logo.png", base64="aGVsbG8=", size=5):
        return self.service.create_image(
            CreateImageDTO(name=name, base64=base64, size=size)
        )

    def test_create_and_fetch(self):
        created = self._create()
        self.assertEqual(created.id, 1)
        fetched = self.service.get_image(created.id)
        self.assertEqual(fetched.name, "logo.png")
        self.assertEqual(fetched.size, 5)

    def test_list_images(self):
        self._create(name="a.png")
        self._create(name="b.png")
        self.assertEqual([i.name for i in self.service.list_images()], ["a.png", "b.png"])

    def test_get_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.service.get_image(3)
        self.assertEqual(ctx.exception.message, "Image not found with id: 3")

    def test_update_is_full_overwrite(self):
        created = self._create()
        updated = self.service.update_image(
            created.id, CreateImageDTO(name="", base64=None, size=None)
        )
        self.assertEqual(updated.name, "")
        self.assertIsNone(updated.base64)
        self.assertIsNone(updated.size)
        stored = self.repo.get_by_id(created.id)
        self.assertIsNone(stored.base64)

    def test_update_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.update_image(8, CreateImageDTO(name="x"))

    def test_delete_removes_image(self):
        created = self._create()
        self.service.delete_image(created.id)
        self.assertEqual(self.service.list_images(), [])

    def test_delete_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError):
            self.service.delete_image(8)
