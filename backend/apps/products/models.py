from django.db import models


class ProductCategory(models.TextChoices):
    PIZZA = "PIZZA", "Pizza"
    HAMBURGER = "HAMBURGER", "Hamburger"


class Product(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    category = models.CharField(max_length=20, choices=ProductCategory.choices)
    available = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
        ]

    def __str__(self):
        return self.name


class ProductVariation(models.Model):
    # Owned by the product: deleting the product deletes its variations
    product = models.ForeignKey(
        Product, related_name="variations", on_delete=models.CASCADE
    )
    size_name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    available = models.BooleanField(default=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = "product_variations"
        ordering = ["id"]

    def __str__(self):
        return f"{self.product_id}:{self.size_name}"
