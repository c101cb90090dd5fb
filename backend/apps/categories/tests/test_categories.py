from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.categories.models import Category


class CategoryApiTests(APITestCase):
    def setUp(self):
        self.list_url = reverse("categories-list")

    def detail_url(self, category_id):
        return reverse("categories-detail", args=[category_id])

    def test_create_conflict_delete_lifecycle(self):
        created = self.client.post(self.list_url, {"name": "Drinks"}, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual(created.data["name"], "Drinks")
        self.assertIsNotNone(created.data["createdAt"])
        self.assertIsNotNone(created.data["updatedAt"])
        category_id = created.data["id"]

        duplicate = self.client.post(self.list_url, {"name": "drinks"}, format="json")
        self.assertEqual(duplicate.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(duplicate.data["error"]["code"], "CONFLICT")
        self.assertEqual(Category.objects.count(), 1)

        deleted = self.client.delete(self.detail_url(category_id))
        self.assertEqual(deleted.status_code, status.HTTP_204_NO_CONTENT)

        missing = self.client.get(self.detail_url(category_id))
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(missing.data["error"]["code"], "NOT_FOUND")

    def test_get_by_id_matches_created_id(self):
        created = self.client.post(self.list_url, {"name": "Pizzas"}, format="json")
        fetched = self.client.get(self.detail_url(created.data["id"]))
        self.assertEqual(fetched.status_code, status.HTTP_200_OK)
        self.assertEqual(fetched.data["id"], created.data["id"])

    def test_list_categories(self):
        Category.objects.create(name="Pizzas")
        Category.objects.create(name="Burgers")
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([c["name"] for c in response.data], ["Pizzas", "Burgers"])

    def test_put_renames_category(self):
        category = Category.objects.create(name="Old")
        response = self.client.put(
            self.detail_url(category.id), {"name": "New"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        category.refresh_from_db()
        self.assertEqual(category.name, "New")

    def test_put_to_existing_name_is_conflict(self):
        Category.objects.create(name="Drinks")
        other = Category.objects.create(name="Sides")
        response = self.client.put(
            self.detail_url(other.id), {"name": "DRINKS"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        other.refresh_from_db()
        self.assertEqual(other.name, "Sides")

    def test_patch_without_name_keeps_name(self):
        category = Category.objects.create(name="Burgers")
        response = self.client.patch(self.detail_url(category.id), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Burgers")

    def test_put_missing_category_is_not_found(self):
        response = self.client.put(self.detail_url(999), {"name": "X"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_missing_category_is_not_found(self):
        response = self.client.delete(self.detail_url(999))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_invalid_name_returns_field_message(self):
        response = self.client.post(self.list_url, {"name": ""}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["details"]["name"], ["name is required"])

    def test_patch_with_null_name_keeps_name(self):
        category = Category.objects.create(name="Burgers")
        response = self.client.patch(
            self.detail_url(category.id), {"name": None}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        category.refresh_from_db()
        self.assertEqual(category.name, "Burgers")

    def test_put_with_null_name_is_rejected(self):
        category = Category.objects.create(name="Burgers")
        response = self.client.put(
            self.detail_url(category.id), {"name": None}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["details"]["name"], ["name is required"])

    def test_name_is_stored_and_compared_as_sent(self):
        self.client.post(self.list_url, {"name": "Drinks"}, format="json")
        padded = self.client.post(self.list_url, {"name": " Drinks"}, format="json")
        self.assertEqual(padded.status_code, status.HTTP_201_CREATED)
        self.assertEqual(padded.data["name"], " Drinks")
        self.assertEqual(Category.objects.get(id=padded.data["id"]).name, " Drinks")

    def test_whitespace_only_name_is_rejected(self):
        response = self.client.post(self.list_url, {"name": "   "}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["details"]["name"], ["name is required"])
        self.assertEqual(Category.objects.count(), 0)
