import unittest
from decimal import Decimal
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.api.exceptions import NotFoundError
from apps.products.dtos import RecoveryProductDTO, RecoveryProductVariationDTO
from apps.products.views import ProductDetailView, ProductListView


def make_product_dto(product_id=1, name="Margherita"):
    return RecoveryProductDTO(
        id=product_id,
        name=name,
        description="Tomato and mozzarella",
        category="PIZZA",
        available=True,
        variations=[
            RecoveryProductVariationDTO(
                id=10,
                size_name="Small",
                description="",
                available=True,
                price="9.90",
            )
        ],
    )


PAYLOAD = {
    "name": "Margherita",
    "category": "PIZZA",
    "description": "Tomato and mozzarella",
    "variations": [{"sizeName": "Small", "price": "9.90"}],
}


class ProductViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def test_post_creates_product_with_nested_variations(self):
        service_mock = Mock()
        service_mock.create_product.return_value = make_product_dto(3)
        with patch.object(ProductListView, "service", service_mock):
            request = self.factory.post("/api/products", PAYLOAD, format="json")
            response = ProductListView.as_view()(request)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["variations"][0]["sizeName"], "Small")
        (dto,), _ = service_mock.create_product.call_args
        self.assertEqual(dto.name, "Margherita")
        self.assertTrue(dto.available)
        self.assertEqual(dto.variations[0].size_name, "Small")
        self.assertEqual(dto.variations[0].price, Decimal("9.90"))

    def test_post_rejects_unknown_category(self):
        service_mock = Mock()
        with patch.object(ProductListView, "service", service_mock):
            request = self.factory.post(
                "/api/products", {**PAYLOAD, "category": "SUSHI"}, format="json"
            )
            response = ProductListView.as_view()(request)
        self.assertEqual(response.status_code, 400)
        self.assertIn("category", response.data["error"]["details"])
        service_mock.create_product.assert_not_called()

    def test_post_rejects_variation_without_price(self):
        service_mock = Mock()
        payload = {**PAYLOAD, "variations": [{"sizeName": "Small"}]}
        with patch.object(ProductListView, "service", service_mock):
            request = self.factory.post("/api/products", payload, format="json")
            response = ProductListView.as_view()(request)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")

    def test_list_products(self):
        service_mock = Mock()
        service_mock.list_products.return_value = [make_product_dto(1), make_product_dto(2)]
        with patch.object(ProductListView, "service", service_mock):
            response = ProductListView.as_view()(self.factory.get("/api/products"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["id"] for p in response.data], [1, 2])
        self.assertEqual(response.data[0]["variations"][0]["price"], "9.90")

    def test_get_missing_returns_404(self):
        service_mock = Mock()
        service_mock.get_product.side_effect = NotFoundError("Product not found")
        with patch.object(ProductDetailView, "service", service_mock):
            response = ProductDetailView.as_view()(
                self.factory.get("/api/products/5"), product_id=5
            )
        self.assertEqual(response.status_code, 404)

    def test_put_replaces_product(self):
        service_mock = Mock()
        service_mock.update_product.return_value = make_product_dto(1, "Renamed")
        with patch.object(ProductDetailView, "service", service_mock):
            request = self.factory.put(
                "/api/products/1", {**PAYLOAD, "name": "Renamed"}, format="json"
            )
            response = ProductDetailView.as_view()(request, product_id=1)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["name"], "Renamed")
        args, _ = service_mock.update_product.call_args
        self.assertEqual(args[0], 1)
        self.assertEqual(args[1].name, "Renamed")

    def test_delete_returns_204(self):
        service_mock = Mock()
        with patch.object(ProductDetailView, "service", service_mock):
            response = ProductDetailView.as_view()(
                self.factory.delete("/api/products/1"), product_id=1
            )
        self.assertEqual(response.status_code, 204)
        service_mock.delete_product.assert_called_once_with(1)
