from rest_framework import serializers

from apps.utils.validators import validate_not_blank
from .models import Order, OrderItem

MAX_LINE_QUANTITY = 1000


class OrderItemSerializer(serializers.ModelSerializer):
    cake_id = serializers.IntegerField(read_only=True)
    cake_name = serializers.CharField(source='cake.name', read_only=True)

    class Meta:
        model = OrderItem
        fields = ['id', 'cake_id', 'cake_name', 'quantity', 'unit_price', 'total_price']


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'customer_name', 'customer_email', 'customer_phone',
            'delivery_address', 'total_amount', 'status', 'notes',
            'created_at', 'updated_at', 'items'
        ]


class OrderLineInputSerializer(serializers.Serializer):
    cake_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY)


class CreateOrderSerializer(serializers.Serializer):
    """
    Checkout payload. Prices are never accepted from the client.
    """
    customer_name = serializers.CharField(max_length=255, validators=[validate_not_blank])
    customer_email = serializers.EmailField()
    customer_phone = serializers.CharField(max_length=50, validators=[validate_not_blank])
    delivery_address = serializers.CharField(validators=[validate_not_blank])
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    items = OrderLineInputSerializer(many=True, allow_empty=False)


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.Status.choices)
