from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import OrderSerializer, CreateOrderSerializer, OrderStatusSerializer
from .services import OrderService


class OrderViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    Checkout and order administration.
    GET/POST /api/v1/orders/
    GET /api/v1/orders/{id}/
    PATCH /api/v1/orders/{id}/status/
    """
    serializer_class = OrderSerializer
    lookup_value_regex = r"[0-9]+"

    def get_queryset(self):
        return OrderService.list_orders()

    def retrieve(self, request, pk=None):
        order = OrderService.get_order(pk)
        if order is None:
            return Response(
                {"error": f"Order with id {pk} not found", "code": "not_found"},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(OrderSerializer(order).data)

    @extend_schema(request=CreateOrderSerializer, responses={201: OrderSerializer})
    def create(self, request):
        """
        Checkout endpoint.
        Expects: { "customer_name": ..., "items": [{"cake_id": 1, "quantity": 2}] }
        """
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderService.create_order(**serializer.validated_data)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=OrderStatusSerializer, responses={200: OrderSerializer})
    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        """
        PATCH /api/v1/orders/{id}/status/
        """
        serializer = OrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = OrderService.update_status(pk, serializer.validated_data['status'])
        return Response(OrderSerializer(order).data)
