from rest_framework import viewsets, mixins, status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import CustomCakeRequestSerializer, CustomCakeRequestUpdateSerializer
from .services import CustomRequestService


class CustomCakeRequestViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    GET/POST /api/v1/custom-requests/
    GET/PATCH /api/v1/custom-requests/{id}/
    """
    serializer_class = CustomCakeRequestSerializer
    lookup_value_regex = r"[0-9]+"

    def get_queryset(self):
        return CustomRequestService.list_requests()

    def retrieve(self, request, pk=None):
        custom_request = CustomRequestService.get_request(pk)
        if custom_request is None:
            return Response(
                {"error": f"Custom cake request with id {pk} not found", "code": "not_found"},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(self.get_serializer(custom_request).data)

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        custom_request = CustomRequestService.create_request(serializer.validated_data)
        return Response(self.get_serializer(custom_request).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CustomCakeRequestUpdateSerializer, responses={200: CustomCakeRequestSerializer})
    def partial_update(self, request, pk=None):
        """
        Admin review: status is required, notes and quote are optional.
        """
        serializer = CustomCakeRequestUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        custom_request = CustomRequestService.update_request(pk, **serializer.validated_data)
        return Response(self.get_serializer(custom_request).data)
