"""Canonical models shared across the session, search and report services."""

from .identity import Identity, ProfileUpdate, RegistrationInput, Role
from .player import Experience, PlayerRecord
from .preferences import ConnectionRequest, ContactRequest
from .report import Pending, ProviderAuthorization, Ready, Report, ReportState, ReportStatus

__all__ = [
    "ConnectionRequest",
    "ContactRequest",
    "Experience",
    "Identity",
    "Pending",
    "PlayerRecord",
    "ProfileUpdate",
    "ProviderAuthorization",
    "Ready",
    "RegistrationInput",
    "Report",
    "ReportState",
    "ReportStatus",
    "Role",
]
