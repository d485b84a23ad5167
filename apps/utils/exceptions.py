from django.db.models import ProtectedError
from django.db import IntegrityError
from django.http import Http404
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework.exceptions import ValidationError, NotFound
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class BusinessLogicException(Exception):
    """
    Raised when a domain rule is violated (e.g. 'Cake is not available').
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "business_error"

    def __init__(self, message, code=None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class NotFoundError(BusinessLogicException):
    """
    The target of an update does not exist.
    """
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"


class ReferencedEntityNotFoundError(BusinessLogicException):
    """
    An order line points at a cake id that is not in the catalog.
    """
    default_code = "referenced_entity_not_found"


class EntityUnavailableError(BusinessLogicException):
    """
    An order line points at a cake that is switched off in the catalog.
    """
    status_code = status.HTTP_409_CONFLICT
    default_code = "entity_unavailable"


def custom_exception_handler(exc, context):
    # Domain errors first, DRF would treat them as unhandled
    if isinstance(exc, BusinessLogicException):
        return Response(
            {"error": exc.message, "code": exc.code},
            status=exc.status_code
        )

    if isinstance(exc, (ProtectedError, IntegrityError)):
        logger.warning("Store constraint violated: %s", exc, exc_info=True)
        return Response(
            {"error": "Operation conflicts with existing records.", "code": "conflict"},
            status=status.HTTP_409_CONFLICT
        )

    # Call REST framework's default exception handler
    response = exception_handler(exc, context)

    # If response is None, it's an unhandled server error (500)
    if response is None:
        logger.error(f"Unhandled Exception: {exc}", exc_info=True)
        return Response(
            {"error": "Internal Server Error", "code": "server_error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        response.data = {"error": response.data, "code": "validation_error"}
    elif isinstance(exc, (Http404, NotFound)):
        response.data = {"error": "Not found.", "code": "not_found"}
    elif isinstance(response.data, dict) and "detail" in response.data:
        detail = response.data["detail"]
        response.data = {"error": str(detail), "code": getattr(detail, "code", "error")}

    return response
