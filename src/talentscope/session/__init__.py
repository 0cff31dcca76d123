"""Session store: the active identity for a client context."""

from .store import MIN_PASSWORD_LENGTH, CredentialVerifier, SessionStore

__all__ = ["CredentialVerifier", "MIN_PASSWORD_LENGTH", "SessionStore"]
