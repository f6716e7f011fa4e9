"""Health check endpoints for production monitoring."""

import os
import time
from typing import Any, Dict

from django.conf import settings
from django.core.cache import cache
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse
from django.utils import timezone

APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
APP_START_TIME = time.time()


def _get_uptime_formatted() -> Dict[str, Any]:
    """Get uptime in human-readable format and raw seconds."""
    uptime_seconds = int(time.time() - APP_START_TIME)
    days, remainder = divmod(uptime_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")

    return {"seconds": uptime_seconds, "formatted": " ".join(parts)}


def _no_cache(response):
    response["Cache-Control"] = "no-cache, no-store, must-revalidate, max-age=0"
    response["Pragma"] = "no-cache"
    return response


def check_database() -> bool:
    try:
        with connections["default"].cursor() as cursor:
            cursor.execute("SELECT 1")
            return cursor.fetchone() == (1,)
    except OperationalError:
        return False


def check_cache() -> bool:
    cache_key = "_health_check"
    cache.set(cache_key, "ok", 10)
    healthy = cache.get(cache_key) == "ok"
    cache.delete(cache_key)
    return healthy


def health_check(request):
    """
    Basic health check endpoint for load balancers.
    Returns 200 if the application is running.
    """
    return _no_cache(JsonResponse(
        {
            "status": "healthy",
            "version": APP_VERSION,
            "environment": "production" if not settings.DEBUG else "development",
            "timestamp": timezone.now().isoformat(),
            "uptime": _get_uptime_formatted(),
        }
    ))


def liveness_check(request):
    """Liveness check; never touches the database."""
    return _no_cache(JsonResponse({
        "status": "alive",
        "timestamp": timezone.now().isoformat(),
        "uptime": _get_uptime_formatted(),
        "version": APP_VERSION,
    }))


def readiness_check(request):
    """Readiness check - database and cache connectivity."""
    database_up = check_database()
    cache_up = check_cache()
    ready = database_up and cache_up

    return _no_cache(JsonResponse(
        {
            "status": "ready" if ready else "not_ready",
            "database": "up" if database_up else "down",
            "cache": "up" if cache_up else "down",
        },
        status=200 if ready else 503,
    ))
