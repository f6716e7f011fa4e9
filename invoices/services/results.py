"""
Outcome types shared by the query and action services.

Actions never raise for expected failures. They return a ``Result`` whose
error carries one of three kinds, so views can decide how to present it:

- VALIDATION: field-addressable messages, re-render the form
- DATA_ACCESS: opaque failure, render the error boundary
- NOT_FOUND: the target record does not exist
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class DataAccessError(Exception):
    """The persistence layer failed; the message is safe to show to users."""


class RecordNotFound(Exception):
    pass


class InvoiceValidationError(Exception):
    def __init__(self, errors: Dict[str, List[str]], message: str = "Validation failed"):
        self.errors = errors
        self.message = message
        super().__init__(message)


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    DATA_ACCESS = "data_access"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ActionError:
    kind: ErrorKind
    message: str
    field_errors: Dict[str, List[str]] = field(default_factory=dict)

    def to_state(self) -> Dict[str, object]:
        """Form state consumed when re-rendering the submitted form."""
        return {"errors": self.field_errors, "message": self.message}

    def to_exception(self) -> Exception:
        if self.kind == ErrorKind.VALIDATION:
            return InvoiceValidationError(self.field_errors, self.message)
        if self.kind == ErrorKind.NOT_FOUND:
            return RecordNotFound(self.message)
        return DataAccessError(self.message)


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[ActionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        field_errors: Optional[Dict[str, List[str]]] = None,
    ) -> "Result[T]":
        return cls(error=ActionError(kind=kind, message=message, field_errors=field_errors or {}))

    def unwrap(self) -> Optional[T]:
        if self.error is not None:
            raise self.error.to_exception()
        return self.value
