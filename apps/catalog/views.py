from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema

from .filters import CakeFilter
from .serializers import CakeSerializer
from .services import CakeService


class CakeViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    Cake catalog.
    GET/POST /api/v1/catalog/cakes/
    GET/PATCH/DELETE /api/v1/catalog/cakes/{id}/
    """
    serializer_class = CakeSerializer
    lookup_value_regex = r"[0-9]+"
    filter_backends = [DjangoFilterBackend]
    filterset_class = CakeFilter

    def get_queryset(self):
        return CakeService.list_cakes()

    def retrieve(self, request, pk=None):
        cake = CakeService.get_cake(pk)
        if cake is None:
            return Response(
                {"error": f"Cake with id {pk} not found", "code": "not_found"},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(self.get_serializer(cake).data)

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        cake = CakeService.create_cake(serializer.validated_data)
        return Response(self.get_serializer(cake).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        cake = CakeService.update_cake(pk, serializer.validated_data)
        return Response(self.get_serializer(cake).data)

    def destroy(self, request, pk=None):
        CakeService.delete_cake(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'])
    def available(self, request):
        """
        GET /api/v1/catalog/cakes/available/
        Storefront listing.
        """
        cakes = CakeService.list_available_cakes()
        return Response(self.get_serializer(cakes, many=True).data)

    @extend_schema(responses={200: {"type": "array", "items": {"type": "string"}}})
    @action(detail=False, methods=['get'])
    def categories(self, request):
        """
        GET /api/v1/catalog/cakes/categories/
        """
        return Response(CakeService.list_categories())
