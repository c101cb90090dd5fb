from rest_framework import serializers

NAME_MAX_LENGTH = 255


class CategoryWriteSerializer(serializers.Serializer):
    # Payload for POST/PUT (full) and PATCH (partial=True)
    name = serializers.CharField(
        max_length=NAME_MAX_LENGTH,
        trim_whitespace=False,
        error_messages={
            "required": "name is required",
            "null": "name is required",
            "blank": "name is required",
            "max_length": "name must not exceed 255 characters",
        },
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # A null name on PATCH means "keep the stored name"
        if self.partial:
            self.fields["name"].allow_null = True

    def validate_name(self, value):
        # Stored as sent; only all-whitespace names are refused
        if value is not None and not value.strip():
            raise serializers.ValidationError("name is required")
        return value


class CategoryReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    createdAt = serializers.CharField(allow_null=True)
    updatedAt = serializers.CharField(allow_null=True)

    def to_representation(self, instance):
        if instance is None:
            return None
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "id": instance.id,
                "name": instance.name,
                "createdAt": instance.created_at,
                "updatedAt": instance.updated_at,
            }
        return super().to_representation(instance)
