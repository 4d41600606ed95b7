import structlog
from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

logger = structlog.get_logger(__name__)


@csrf_exempt
@require_http_methods(["GET"])
def healthz(request):
    """Liveness probe: the store must answer a trivial query."""
    components = {
        "notifier": settings.NOTIFIER_BACKEND.rsplit(".", 1)[-1],
        "payment_gateway": settings.PAYMENT_GATEWAY_CLIENT.rsplit(".", 1)[-1],
    }
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as exc:
        logger.error("healthz.fail", error=str(exc))
        return JsonResponse({"status": "unhealthy", "database": "unavailable", **components}, status=503)

    logger.debug("healthz.ok", database="connected")
    return JsonResponse({"status": "healthy", "database": "connected", **components}, status=200)
