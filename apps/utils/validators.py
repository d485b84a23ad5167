from decimal import Decimal
from rest_framework import serializers


def validate_positive_amount(value):
    if value is not None and value <= Decimal("0"):
        raise serializers.ValidationError("Amount must be greater than zero.")
    return value


def validate_not_blank(value):
    if not str(value).strip():
        raise serializers.ValidationError("This field may not be blank.")
    return value
