"""
Dashboard Error Envelope

Every error leaves the app in one shape:
{ success: false, error: { code, message, fields? }, request_id }

Service failures (validation, missing records, data access) are mapped onto
``APIError`` subclasses by ``api_error_for`` so the page middleware and the
REST exception handler render them identically.

HTTP status codes:
- 400: validation errors
- 401/403: authentication and permission failures
- 404: missing records
- 500: data access failures and unexpected errors
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from django.http import JsonResponse

from ..services.results import DataAccessError, InvoiceValidationError, RecordNotFound


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FIELD_REQUIRED = "FIELD_REQUIRED"
    FIELD_INVALID = "FIELD_INVALID"
    FIELD_OUT_OF_RANGE = "FIELD_OUT_OF_RANGE"
    FIELD_INVALID_FORMAT = "FIELD_INVALID_FORMAT"

    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    PERMISSION_DENIED = "PERMISSION_DENIED"

    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    DATA_ACCESS_ERROR = "DATA_ACCESS_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class FieldError:
    field: str
    code: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "code": self.code, "message": self.message}


@dataclass
class ErrorDetail:
    code: str
    message: str
    fields: Optional[List[FieldError]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.fields:
            payload["fields"] = [f.to_dict() for f in self.fields]
        return payload


@dataclass
class ErrorResponse:
    success: bool = False
    error: Optional[ErrorDetail] = None
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "error": self.error.to_dict() if self.error else None,
            "request_id": self.request_id,
        }

    def to_json_response(self, status: int = 400) -> JsonResponse:
        return JsonResponse(self.to_dict(), status=status)


class APIError(Exception):
    """An error with a code, a user-facing message and the HTTP status it renders with."""

    def __init__(
        self,
        code: Union[ErrorCode, str],
        message: str,
        status: int = 400,
        fields: Optional[List[FieldError]] = None,
        request_id: Optional[str] = None,
    ):
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message
        self.status = status
        self.fields = fields
        self.request_id = request_id or str(uuid.uuid4())
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error=ErrorDetail(code=self.code, message=self.message, fields=self.fields),
            request_id=self.request_id,
        )

    def to_json_response(self) -> JsonResponse:
        return self.to_response().to_json_response(self.status)


class FormValidationError(APIError):
    def __init__(self, errors: Dict[str, List[str]], message: str, request_id: Optional[str] = None):
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status=400,
            fields=format_validation_errors(errors),
            request_id=request_id,
        )


class NotFoundError(APIError):
    def __init__(self, message: str = "Resource not found", request_id: Optional[str] = None):
        super().__init__(code=ErrorCode.RESOURCE_NOT_FOUND, message=message, status=404, request_id=request_id)


class DataAccessAPIError(APIError):
    def __init__(self, message: str, request_id: Optional[str] = None):
        super().__init__(code=ErrorCode.DATA_ACCESS_ERROR, message=message, status=500, request_id=request_id)


def api_error_for(exc: Exception, request_id: Optional[str] = None) -> Optional[APIError]:
    """Map a service-layer exception to its API error, or ``None`` for anything else."""
    if isinstance(exc, DataAccessError):
        return DataAccessAPIError(str(exc), request_id=request_id)
    if isinstance(exc, RecordNotFound):
        return NotFoundError(str(exc) or "Resource not found", request_id=request_id)
    if isinstance(exc, InvoiceValidationError):
        return FormValidationError(exc.errors, exc.message, request_id=request_id)
    return None


def format_validation_errors(
    errors: Dict[str, Any],
    prefix: str = "",
) -> List[FieldError]:
    field_errors = []

    for field_name, error_list in errors.items():
        full_field = f"{prefix}{field_name}" if prefix else field_name

        if isinstance(error_list, dict):
            field_errors.extend(format_validation_errors(error_list, f"{full_field}."))
        elif isinstance(error_list, (list, tuple)):
            for error in error_list:
                error_str = str(error)
                field_errors.append(FieldError(
                    field=full_field,
                    code=_infer_error_code(error_str),
                    message=error_str,
                ))
        else:
            field_errors.append(FieldError(
                field=full_field,
                code=ErrorCode.FIELD_INVALID.value,
                message=str(error_list),
            ))

    return field_errors


def _infer_error_code(message: str) -> str:
    message_lower = message.lower()

    if "required" in message_lower or "select" in message_lower or "choose" in message_lower:
        return ErrorCode.FIELD_REQUIRED.value
    elif "greater than" in message_lower or "less than" in message_lower:
        return ErrorCode.FIELD_OUT_OF_RANGE.value
    elif "format" in message_lower or "valid" in message_lower:
        return ErrorCode.FIELD_INVALID_FORMAT.value
    else:
        return ErrorCode.FIELD_INVALID.value
