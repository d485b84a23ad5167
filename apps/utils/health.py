import logging
from django.http import JsonResponse
from django.db import connection, DatabaseError
from django.utils import timezone

logger = logging.getLogger(__name__)


def health_check(request):
    components = {"db": "unknown"}
    timestamp = timezone.now().isoformat()
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        components["db"] = "ok"
    except DatabaseError as e:
        logger.error("Health check failed: %s", e)
        components["db"] = "error"
        return JsonResponse(
            {"status": "error", "detail": str(e), "components": components, "timestamp": timestamp},
            status=503
        )

    return JsonResponse({"status": "ok", "components": components, "timestamp": timestamp}, status=200)
