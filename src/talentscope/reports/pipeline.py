"""Per-user report state machine: Pending -> Ready."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional
from uuid import uuid4

from talentscope.config import Settings
from talentscope.latency import Latency
from talentscope.models import (
    Pending,
    ProviderAuthorization,
    Ready,
    Report,
    ReportState,
    ReportStatus,
)
from talentscope.notifications import NotificationSink, report_ready_message
from talentscope.persistence import KeyValueStore, data_access_key, get_json, set_json
from talentscope.results import ErrorKind, ServiceResult
from talentscope.session import SessionStore


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)


def build_report(user_id: str) -> Report:
    """Fixed scoring stand-in for provider-derived analysis."""
    return Report(
        id=f"report_{uuid4().hex}",
        user_id=user_id,
        overall_rating=8.5,
        role_fit="Entry Fragger",
        strengths=["Aggressive positioning", "High first-kill rate", "Consistent aim"],
        areas_to_improve=["Utility usage", "Communication timing"],
        consistency_score=87,
        recent_form="Improving",
        status=ReportStatus.READY,
        created_at=datetime.now(timezone.utc),
    )


class ReportPipeline:
    """Owns one explicit :class:`ReportState` per user id.

    Users without an entry are :class:`Pending`. ``generate`` always replaces
    the stored report, so it can be re-run once a report is ready.
    """

    def __init__(
        self,
        store: KeyValueStore,
        session: SessionStore,
        *,
        settings: Optional[Settings] = None,
        notifier: Optional[NotificationSink] = None,
    ):
        self._settings = settings or Settings()
        self._store = store
        self._session = session
        self._notifier = notifier
        self._latency = Latency(self._settings)
        self._states: Dict[str, ReportState] = {}

    def state(self, user_id: str) -> ReportState:
        return self._states.get(user_id, Pending(eta=self._settings.report_eta))

    async def authorize_providers(
        self,
        user_id: str,
        provider_ids: Iterable[str],
        consent: bool,
    ) -> ServiceResult[ProviderAuthorization]:
        await self._latency.pause("authorize_providers")
        if not consent:
            return ServiceResult.fail(ErrorKind.CONSENT, "Data access consent is required")
        providers = list(dict.fromkeys(provider_ids))
        if not providers:
            return ServiceResult.fail(
                ErrorKind.VALIDATION, "Please select at least one data provider to continue"
            )
        authorization = ProviderAuthorization(
            user_id=user_id,
            providers=providers,
            authorized_at=datetime.now(timezone.utc),
        )
        set_json(self._store, data_access_key(user_id), authorization.model_dump(mode="json"))
        logger.info("User %s authorized providers %s", user_id, ", ".join(providers))
        return ServiceResult.ok(authorization)

    def authorization(self, user_id: str) -> Optional[ProviderAuthorization]:
        payload = get_json(self._store, data_access_key(user_id))
        if payload is None:
            return None
        return ProviderAuthorization.model_validate(payload)

    async def status(self, user_id: str) -> ServiceResult[dict]:
        await self._latency.pause("report_status")
        state = self.state(user_id)
        if isinstance(state, Pending):
            return ServiceResult.ok({"status": ReportStatus.PENDING.value, "eta": state.eta})
        return ServiceResult.ok({"status": ReportStatus.READY.value})

    async def generate(self, user_id: str) -> ServiceResult[None]:
        """Store a fresh report and mark the user Ready.

        The ready notification is delivered inline, so the sink's latency is
        part of this call; a delivery failure is logged and never fails it.
        """
        await self._latency.pause("generate_report")
        report = build_report(user_id)
        self._states[user_id] = Ready(report=report)
        logger.info("Report %s ready for user %s", report.id, user_id)
        await self._notify_ready(user_id)
        return ServiceResult.ok()

    async def _notify_ready(self, user_id: str) -> None:
        if self._notifier is None:
            return
        identity = self._session.current_identity()
        if identity is None or identity.id != user_id:
            return
        subject, body = report_ready_message(identity.username)
        result = await self._notifier.send(identity.email, subject, body)
        if not result.success:
            assert result.error is not None
            logger.warning("Report-ready notification for %s not delivered: %s", user_id, result.error.message)

    async def fetch(self, user_id: str) -> ServiceResult[Report]:
        await self._latency.pause("fetch_report")
        state = self.state(user_id)
        if isinstance(state, Ready):
            return ServiceResult.ok(state.report)
        return ServiceResult.fail(ErrorKind.NOT_FOUND, f"No report available for user {user_id}")

    def forget(self, user_id: str) -> None:
        self._states.pop(user_id, None)
        self._store.delete(data_access_key(user_id))
