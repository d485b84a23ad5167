from rest_framework import serializers

from apps.utils.validators import validate_positive_amount, validate_not_blank
from .models import CustomCakeRequest

MIN_DESCRIPTION_LENGTH = 10


class CustomCakeRequestSerializer(serializers.ModelSerializer):
    """
    Customer submission (input) and full record (output).
    Admin-owned fields are read-only here.
    """
    customer_name = serializers.CharField(max_length=255, validators=[validate_not_blank])
    customer_email = serializers.EmailField()
    customer_phone = serializers.CharField(max_length=50, validators=[validate_not_blank])
    cake_description = serializers.CharField(min_length=MIN_DESCRIPTION_LENGTH, trim_whitespace=False)

    class Meta:
        model = CustomCakeRequest
        fields = [
            "id",
            "customer_name",
            "customer_email",
            "customer_phone",
            "cake_description",
            "occasion",
            "size",
            "flavor_preferences",
            "design_preferences",
            "budget_range",
            "required_date",
            "status",
            "admin_notes",
            "quoted_price",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "status", "admin_notes", "quoted_price", "created_at", "updated_at"]


class CustomCakeRequestUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=CustomCakeRequest.Status.choices)
    admin_notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    quoted_price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        required=False,
        allow_null=True,
        validators=[validate_positive_amount],
    )
