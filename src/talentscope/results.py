"""Discriminated success/failure results returned by every service call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONSENT = "consent"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    SERVICE_UNAVAILABLE = "service_unavailable"


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str

    @property
    def retryable(self) -> bool:
        return self.kind is ErrorKind.SERVICE_UNAVAILABLE


class ServiceFailure(Exception):
    """Raised by :meth:`ServiceResult.unwrap` on a failed result."""

    def __init__(self, error: ServiceError):
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    success: bool
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "ServiceResult[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "ServiceResult[T]":
        return cls(success=False, error=ServiceError(kind=kind, message=message))

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    def unwrap(self) -> T:
        if not self.success:
            assert self.error is not None
            raise ServiceFailure(self.error)
        return self.value  # type: ignore[return-value]
