"""Authentication session lifecycle backed by durable key-value storage."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol
from uuid import uuid4

from pydantic import ValidationError

from talentscope.config import Settings
from talentscope.latency import Latency
from talentscope.models import Identity, ProfileUpdate, RegistrationInput, Role
from talentscope.persistence import SESSION_KEY, KeyValueStore
from talentscope.results import ErrorKind, ServiceResult


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

MIN_PASSWORD_LENGTH = 6


class CredentialVerifier(Protocol):
    def verify(self, email: str, password: str) -> bool: ...


def _new_user_id() -> str:
    return f"user_{uuid4().hex}"


class SessionStore:
    """Holds the single active identity for one client context.

    Every mutating call rewrites the ``session_user`` record in the backing
    store so the session survives a restart until :meth:`logout`.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        settings: Optional[Settings] = None,
        verifier: Optional[CredentialVerifier] = None,
    ):
        self._store = store
        self._verifier = verifier
        self._latency = Latency(settings or Settings())
        self._current: Optional[Identity] = None
        self._deletion_hooks: List[Callable[[str], None]] = []

    def on_account_deleted(self, hook: Callable[[str], None]) -> None:
        self._deletion_hooks.append(hook)

    def _commit(self, identity: Identity) -> None:
        self._store.set(SESSION_KEY, identity.model_dump_json())
        self._current = identity

    async def register(self, data: RegistrationInput) -> ServiceResult[Identity]:
        await self._latency.pause("register")
        if data.password != data.confirm_password:
            return ServiceResult.fail(ErrorKind.VALIDATION, "Passwords do not match")
        if not data.email.strip() or not data.password:
            return ServiceResult.fail(ErrorKind.VALIDATION, "Email and password are required")
        if not data.agree_to_terms:
            return ServiceResult.fail(
                ErrorKind.CONSENT, "You must agree to the terms and privacy policy"
            )
        identity = Identity(
            id=_new_user_id(),
            username=data.username,
            email=data.email,
            region=data.region,
            primary_games=data.primary_games,
            discord_id=data.discord_id,
            steam_id=data.steam_id,
            game_id=data.game_id,
        )
        self._commit(identity)
        logger.info("Registered %s (%s)", identity.username, identity.id)
        return ServiceResult.ok(identity)

    async def login(self, email: str, password: str) -> ServiceResult[Identity]:
        await self._latency.pause("login")
        if not email or not password:
            return ServiceResult.fail(ErrorKind.VALIDATION, "Email and password are required")
        if self._verifier is not None and not self._verifier.verify(email, password):
            return ServiceResult.fail(ErrorKind.AUTH, "Invalid email or password")
        identity = Identity(
            id=_new_user_id(),
            username="DemoUser",
            email=email,
            region="Global",
            primary_games=["CS:GO"],
        )
        self._commit(identity)
        logger.info("Logged in %s (%s)", email, identity.id)
        return ServiceResult.ok(identity)

    async def forgot_password(self, email: str) -> ServiceResult[str]:
        await self._latency.pause("forgot_password")
        if not email or not email.strip():
            return ServiceResult.fail(ErrorKind.VALIDATION, "Please enter your email address")
        return ServiceResult.ok(f"Password reset instructions sent to {email.strip()}")

    def current_identity(self) -> Optional[Identity]:
        if self._current is not None:
            return self._current
        raw = self._store.get(SESSION_KEY)
        if raw is None:
            return None
        try:
            self._current = Identity.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Ignoring unreadable stored session: %s", exc)
            return None
        return self._current

    def set_role(self, role: Role | str) -> ServiceResult[Identity]:
        identity = self.current_identity()
        if identity is None:
            return ServiceResult.fail(ErrorKind.AUTH, "No active session")
        try:
            resolved = Role(role)
        except ValueError:
            return ServiceResult.fail(ErrorKind.VALIDATION, f"Unknown role: {role}")
        updated = identity.model_copy(update={"role": resolved})
        self._commit(updated)
        logger.info("User %s selected role %s", updated.id, resolved.value)
        return ServiceResult.ok(updated)

    async def update_profile(self, changes: ProfileUpdate) -> ServiceResult[Identity]:
        await self._latency.pause("update_profile")
        identity = self.current_identity()
        if identity is None:
            return ServiceResult.fail(ErrorKind.AUTH, "No active session")
        fields = changes.changes()
        for name in ("username", "email"):
            if name in fields and not fields[name].strip():
                return ServiceResult.fail(ErrorKind.VALIDATION, f"{name.capitalize()} cannot be empty")
        updated = Identity.model_validate({**identity.model_dump(), **fields, "id": identity.id})
        self._commit(updated)
        return ServiceResult.ok(updated)

    async def change_password(self, current: str, new: str, confirm: str) -> ServiceResult[None]:
        await self._latency.pause("change_password")
        if self.current_identity() is None:
            return ServiceResult.fail(ErrorKind.AUTH, "No active session")
        if new != confirm:
            return ServiceResult.fail(ErrorKind.VALIDATION, "New passwords don't match")
        if len(new) < MIN_PASSWORD_LENGTH:
            return ServiceResult.fail(
                ErrorKind.VALIDATION, f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        return ServiceResult.ok()

    async def delete_account(self) -> ServiceResult[None]:
        await self._latency.pause("delete_account")
        identity = self.current_identity()
        if identity is None:
            return ServiceResult.fail(ErrorKind.AUTH, "No active session")
        for hook in self._deletion_hooks:
            hook(identity.id)
        self.logout()
        logger.info("Deleted account %s", identity.id)
        return ServiceResult.ok()

    def logout(self) -> None:
        self._current = None
        self._store.delete(SESSION_KEY)
