"""Pydantic models for API I/O."""

from .report import AuthorizeRequest, ReportStatusResponse, SharingRequest, SharingResponse
from .search import (
    ContactRequestPayload,
    FacetsResponse,
    SavePlayerRequest,
    SearchRequest,
    SearchResponse,
)
from .session import (
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    PasswordChangeRequest,
    RoleRequest,
    SessionResponse,
)

__all__ = [
    "AuthorizeRequest",
    "ContactRequestPayload",
    "FacetsResponse",
    "ForgotPasswordRequest",
    "LoginRequest",
    "MessageResponse",
    "PasswordChangeRequest",
    "ReportStatusResponse",
    "RoleRequest",
    "SavePlayerRequest",
    "SearchRequest",
    "SearchResponse",
    "SessionResponse",
    "SharingRequest",
    "SharingResponse",
]
