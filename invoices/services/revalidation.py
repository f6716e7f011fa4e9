"""Route-scoped caching, invalidation and post-action navigation."""

import hashlib
import json
import logging
from typing import Any, Callable, Dict, List, Optional

from django.conf import settings
from django.core.cache import cache as default_cache
from django.urls import reverse

logger = logging.getLogger(__name__)

INVOICE_LIST_ROUTE = "invoices:invoice_list"


class RouteCache:
    """
    Caches page payloads per route.

    Each route owns a generation counter; payload keys embed the current
    generation, so ``invalidate`` makes every cached payload of the route
    unreachable in one write.
    """

    VERSION_KEY = "route:version:{route}"

    def __init__(self, backend=None, timeout: Optional[int] = None):
        self.backend = backend or default_cache
        self.timeout = timeout if timeout is not None else getattr(settings, "DASHBOARD_CACHE_TIMEOUT", 300)

    def version(self, route: str) -> int:
        key = self.VERSION_KEY.format(route=route)
        version = self.backend.get(key)
        if version is None:
            self.backend.add(key, 1, None)
            version = self.backend.get(key) or 1
        return version

    def make_key(self, route: str, params: Optional[Dict[str, Any]] = None) -> str:
        key_data = f"{route}:{self.version(route)}"
        if params:
            key_data += ":" + json.dumps(params, sort_keys=True, default=str)
        return "route:payload:" + hashlib.md5(key_data.encode()).hexdigest()

    def get_or_set(self, route: str, params: Optional[Dict[str, Any]], compute: Callable[[], Any]) -> Any:
        cache_key = self.make_key(route, params)
        result = self.backend.get(cache_key)
        if result is not None:
            return result

        result = compute()
        self.backend.set(cache_key, result, self.timeout)
        return result

    def invalidate(self, route: str) -> None:
        key = self.VERSION_KEY.format(route=route)
        try:
            self.backend.incr(key)
        except ValueError:
            # Counter expired or was never written.
            self.backend.set(key, 2, None)
        logger.info(f"Invalidated cached payloads for route {route}")


class Navigator:
    """Resolves route names to URLs and remembers where the user was sent."""

    def __init__(self):
        self.history: List[str] = []

    def redirect(self, route: str, **kwargs: Any) -> str:
        url = reverse(route, kwargs=kwargs or None)
        self.history.append(url)
        return url
