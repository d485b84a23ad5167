# apps/catalog/serializers.py
from rest_framework import serializers

from apps.utils.validators import validate_positive_amount, validate_not_blank
from .models import Cake


class CakeSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=255, validators=[validate_not_blank])
    description = serializers.CharField(validators=[validate_not_blank])
    image_url = serializers.URLField(max_length=500, required=False, allow_null=True)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[validate_positive_amount],
    )
    category = serializers.CharField(max_length=100, validators=[validate_not_blank])
    is_available = serializers.BooleanField(default=True)

    class Meta:
        model = Cake
        fields = [
            "id",
            "name",
            "description",
            "image_url",
            "price",
            "category",
            "is_available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

