from decimal import Decimal

from rest_framework import serializers

from .models import ProductCategory


class ProductVariationWriteSerializer(serializers.Serializer):
    sizeName = serializers.CharField(source="size_name", max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    available = serializers.BooleanField(required=False, default=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))


class ProductWriteSerializer(serializers.Serializer):
    # 'id' fields are server-assigned and never accepted on write
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    category = serializers.ChoiceField(choices=ProductCategory.choices)
    available = serializers.BooleanField(required=False, default=True)
    variations = ProductVariationWriteSerializer(many=True, required=False, default=list)


class ProductVariationReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    sizeName = serializers.CharField()
    description = serializers.CharField()
    available = serializers.BooleanField()
    price = serializers.CharField()

    def to_representation(self, instance):
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "id": instance.id,
                "sizeName": instance.size_name,
                "description": instance.description,
                "available": instance.available,
                "price": instance.price,
            }
        return super().to_representation(instance)


class ProductReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField()
    category = serializers.ChoiceField(choices=ProductCategory.choices)
    available = serializers.BooleanField()
    variations = ProductVariationReadSerializer(many=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "id": instance.id,
                "name": instance.name,
                "description": instance.description,
                "category": instance.category,
                "available": instance.available,
                "variations": ProductVariationReadSerializer(
                    instance.variations, many=True
                ).data,
            }
        return super().to_representation(instance)
