from rest_framework import serializers

# Upper bound of the BigIntegerField backing Image.size
BIGINT_MAX = 9223372036854775807


class ImageWriteSerializer(serializers.Serializer):
    # No field is mandatory; an update stores whatever arrives, nulls included
    name = serializers.CharField(
        max_length=255,
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    base64 = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    size = serializers.IntegerField(
        required=False, allow_null=True, min_value=0, max_value=BIGINT_MAX
    )


class ImageReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField(allow_null=True)
    base64 = serializers.CharField(allow_null=True)
    size = serializers.IntegerField(allow_null=True)
    createdAt = serializers.CharField(allow_null=True)
    updatedAt = serializers.CharField(allow_null=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "id": instance.id,
                "name": instance.name,
                "base64": instance.base64,
                "size": instance.size,
                "createdAt": instance.created_at,
                "updatedAt": instance.updated_at,
            }
        return super().to_representation(instance)
