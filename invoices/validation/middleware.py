"""
Error Handling Middleware

Turns exceptions escaping dashboard views into standardized error responses.
Service failures always render the error envelope; other errors are converted
only for API-style requests and otherwise left to Django.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404, HttpRequest, HttpResponse

from .errors import APIError, DataAccessAPIError, ErrorCode, NotFoundError, api_error_for

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware:
    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if not getattr(request, "request_id", None):
            request.request_id = str(uuid.uuid4())
        return self.get_response(request)

    def process_exception(self, request: HttpRequest, exc: Exception) -> Optional[HttpResponse]:
        request_id = getattr(request, "request_id", None) or str(uuid.uuid4())
        is_api_request = self._is_api_request(request)

        api_error = api_error_for(exc, request_id)
        if api_error is None and is_api_request:
            api_error = self._api_error_for_django(exc, request_id)

        if api_error is not None:
            if isinstance(api_error, DataAccessAPIError):
                logger.error(f"Data access failure [request_id={request_id}]: {exc}")
            return api_error.to_json_response()

        if not isinstance(exc, (Http404, PermissionDenied)):
            logger.exception(
                f"Unhandled exception [request_id={request_id}]: {exc}",
                extra={"request_id": request_id},
            )
        return None

    def _api_error_for_django(self, exc: Exception, request_id: str) -> APIError:
        if isinstance(exc, Http404):
            return NotFoundError(str(exc) or "Resource not found", request_id=request_id)

        if isinstance(exc, PermissionDenied):
            return APIError(ErrorCode.PERMISSION_DENIED, str(exc) or "Permission denied", 403, request_id=request_id)

        logger.exception(
            f"Unhandled exception [request_id={request_id}]: {exc}",
            extra={"request_id": request_id},
        )
        message = "An unexpected error occurred. Please try again later."
        if settings.DEBUG:
            message = f"{type(exc).__name__}: {str(exc)}"
        return APIError(ErrorCode.INTERNAL_ERROR, message, 500, request_id=request_id)

    def _is_api_request(self, request: HttpRequest) -> bool:
        if request.path.startswith("/api/"):
            return True

        content_type = request.content_type or ""
        if "application/json" in content_type:
            return True

        accept = request.headers.get("Accept", "")
        if "application/json" in accept:
            return True

        return request.headers.get("X-Requested-With") == "XMLHttpRequest"
