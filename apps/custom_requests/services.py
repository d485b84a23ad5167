import logging

from django.db import transaction

from apps.utils.exceptions import NotFoundError
from .models import CustomCakeRequest

logger = logging.getLogger(__name__)


class CustomRequestService:

    @staticmethod
    def create_request(data: dict) -> CustomCakeRequest:
        request = CustomCakeRequest.objects.create(**data)
        logger.info(f"Custom cake request {request.pk} submitted")
        return request

    @staticmethod
    def list_requests():
        # Newest first
        return CustomCakeRequest.objects.order_by("-created_at", "-id")

    @staticmethod
    def get_request(request_id):
        return CustomCakeRequest.objects.filter(pk=request_id).first()

    @staticmethod
    @transaction.atomic
    def update_request(request_id, status: str, **changes) -> CustomCakeRequest:
        """
        Status is always written. admin_notes / quoted_price only when passed;
        quoted_price=None clears an existing quote.
        """
        request = CustomCakeRequest.objects.select_for_update().filter(pk=request_id).first()
        if request is None:
            raise NotFoundError(f"Custom cake request with id {request_id} not found")

        request.status = status
        update_fields = ["status", "updated_at"]
        for field in ("admin_notes", "quoted_price"):
            if field in changes:
                setattr(request, field, changes[field])
                update_fields.append(field)

        request.save(update_fields=update_fields)
        logger.info(f"Custom cake request {request.pk} moved to {status}")
        return request
