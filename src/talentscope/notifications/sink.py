"""Fire-and-forget message delivery to a user's contact address."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Deque, List, Optional

from talentscope.config import Settings
from talentscope.latency import Latency
from talentscope.results import ErrorKind, ServiceResult


logger = logging.getLogger("uvicorn.error")

OUTBOX_LIMIT = 100


@dataclass(frozen=True)
class OutboundMessage:
    to: str
    subject: str
    body: str
    sent_at: datetime


class NotificationSink:
    """Logs messages and keeps the most recent ones in a bounded outbox; no real transport."""

    def __init__(self, *, settings: Optional[Settings] = None, outbox_limit: int = OUTBOX_LIMIT):
        self._latency = Latency(settings or Settings())
        self._outbox: Deque[OutboundMessage] = deque(maxlen=outbox_limit)

    @property
    def outbox(self) -> List[OutboundMessage]:
        return list(self._outbox)

    async def send(self, to: str, subject: str, body: str) -> ServiceResult[None]:
        await self._latency.pause("send_notification")
        if not to or not to.strip():
            return ServiceResult.fail(ErrorKind.VALIDATION, "Recipient address is required")
        message = OutboundMessage(to=to.strip(), subject=subject, body=body, sent_at=datetime.now(timezone.utc))
        self._outbox.append(message)
        logger.info("Notification sent to %s: %s", message.to, subject)
        return ServiceResult.ok()


def report_ready_message(username: str) -> tuple[str, str]:
    subject = "Your Player Report Is Ready"
    body = (
        f"Hi {username},\n\n"
        "Your TalentScope performance report has been completed and is ready for review. "
        "You can view it at any time in your dashboard.\n\n"
        "Best regards,\nThe TalentScope Team"
    )
    return subject, body
