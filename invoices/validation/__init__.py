"""
Centralized Error Module

Error codes, payload shapes and the handlers that render them for both
plain Django views and the REST API.
"""

from .errors import (
    APIError,
    DataAccessAPIError,
    ErrorCode,
    ErrorResponse,
    FormValidationError,
    NotFoundError,
    api_error_for,
    format_validation_errors,
)

__all__ = [
    "APIError",
    "DataAccessAPIError",
    "ErrorCode",
    "ErrorResponse",
    "FormValidationError",
    "NotFoundError",
    "api_error_for",
    "format_validation_errors",
]
