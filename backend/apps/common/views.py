import time

from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="health")


def _db_check(alias="default"):
    started = time.monotonic()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute("SELECT 1")
    except OperationalError as e:
        logger.warning("Database health check failed", alias=alias, error=str(e))
        return {"status": "fail", "error": str(e)}
    latency = round((time.monotonic() - started) * 1000, 2)
    logger.debug("Database health check succeeded", alias=alias, latency_ms=latency)
    return {"status": "ok", "latency_ms": latency}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug("Liveness probe served")
    return JsonResponse({"status": "alive"})


def ready_health(request):
    """Readiness probe: the default database answers a trivial query."""
    checks = {"database": _db_check()}
    failing = [name for name, result in checks.items() if result.get("status") == "fail"]
    overall_status = "degraded" if failing else "ok"
    logger.info(
        "Readiness probe evaluated", status=overall_status, failing_components=failing
    )
    return JsonResponse(
        {"status": overall_status, "checks": checks},
        status=503 if failing else 200,
    )
