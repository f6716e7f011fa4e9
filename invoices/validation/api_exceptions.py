"""
Django REST Framework Exception Handler

Provides consistent error format for all API endpoints, including the
service-layer failures raised by the dashboard queries.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from rest_framework.exceptions import (
    APIException,
    AuthenticationFailed,
    NotAuthenticated,
    NotFound,
    PermissionDenied,
    ValidationError as DRFValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .errors import (
    DataAccessAPIError,
    ErrorCode,
    ErrorDetail,
    ErrorResponse,
    FieldError,
    api_error_for,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    request = context.get("request")
    request_id = getattr(request, "request_id", None) if request else None
    if not request_id:
        request_id = str(uuid.uuid4())

    service_response = _handle_service_error(exc, request_id)
    if service_response is not None:
        return service_response

    response = exception_handler(exc, context)

    if response is not None:
        error_response = _convert_to_standard_format(exc, request_id)
        return Response(error_response.to_dict(), status=response.status_code)

    return response


def _handle_service_error(exc: Exception, request_id: str) -> Optional[Response]:
    api_error = api_error_for(exc, request_id)
    if api_error is None:
        return None

    if isinstance(api_error, DataAccessAPIError):
        logger.error(f"Data access failure [request_id={request_id}]: {exc}")
    return Response(api_error.to_response().to_dict(), status=api_error.status)


def _convert_to_standard_format(exc: Exception, request_id: str) -> ErrorResponse:
    if isinstance(exc, NotAuthenticated):
        detail = ErrorDetail(
            code=ErrorCode.AUTHENTICATION_REQUIRED.value,
            message="Authentication required. Please log in.",
        )
    elif isinstance(exc, AuthenticationFailed):
        detail = ErrorDetail(
            code=ErrorCode.AUTHENTICATION_FAILED.value,
            message=str(exc.detail) if exc.detail else "Authentication failed.",
        )
    elif isinstance(exc, PermissionDenied):
        detail = ErrorDetail(
            code=ErrorCode.PERMISSION_DENIED.value,
            message=str(exc.detail) if exc.detail else "You do not have permission to perform this action.",
        )
    elif isinstance(exc, NotFound):
        detail = ErrorDetail(
            code=ErrorCode.RESOURCE_NOT_FOUND.value,
            message=str(exc.detail) if exc.detail else "Resource not found.",
        )
    elif isinstance(exc, DRFValidationError):
        detail = ErrorDetail(
            code=ErrorCode.VALIDATION_ERROR.value,
            message="Validation failed. Please check your input.",
            fields=_extract_field_errors(exc.detail),
        )
    elif isinstance(exc, APIException):
        detail = ErrorDetail(
            code=ErrorCode.INTERNAL_ERROR.value,
            message=str(exc.detail) if exc.detail else "An error occurred.",
        )
    else:
        detail = ErrorDetail(
            code=ErrorCode.INTERNAL_ERROR.value,
            message="An unexpected error occurred.",
        )

    return ErrorResponse(error=detail, request_id=request_id)


def _extract_field_errors(detail: Any, prefix: str = "") -> List[FieldError]:
    errors = []

    if isinstance(detail, dict):
        for field_name, field_errors in detail.items():
            full_field = f"{prefix}{field_name}" if prefix else field_name

            if isinstance(field_errors, dict):
                errors.extend(_extract_field_errors(field_errors, f"{full_field}."))
                continue

            if not isinstance(field_errors, list):
                field_errors = [field_errors]
            for error in field_errors:
                errors.append(FieldError(
                    field=full_field,
                    code=_map_drf_code(getattr(error, "code", "invalid")),
                    message=str(error),
                ))

    elif isinstance(detail, list):
        for error in detail:
            errors.append(FieldError(
                field="__all__",
                code=_map_drf_code(getattr(error, "code", "invalid")),
                message=str(error),
            ))

    else:
        errors.append(FieldError(
            field="__all__",
            code=ErrorCode.FIELD_INVALID.value,
            message=str(detail),
        ))

    return errors


def _map_drf_code(code: str) -> str:
    code_mapping = {
        "required": ErrorCode.FIELD_REQUIRED.value,
        "blank": ErrorCode.FIELD_REQUIRED.value,
        "null": ErrorCode.FIELD_REQUIRED.value,
        "invalid": ErrorCode.FIELD_INVALID.value,
        "max_value": ErrorCode.FIELD_OUT_OF_RANGE.value,
        "min_value": ErrorCode.FIELD_OUT_OF_RANGE.value,
        "invalid_choice": ErrorCode.FIELD_INVALID.value,
        "does_not_exist": ErrorCode.RESOURCE_NOT_FOUND.value,
    }

    return code_mapping.get(code, ErrorCode.FIELD_INVALID.value)
