"""Runtime settings loaded from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional


logger = logging.getLogger("uvicorn.error")

_DB_PATH_ENV = "TALENTSCOPE_DB_PATH"
_FAILURE_RATE_ENV = "TALENTSCOPE_SEARCH_FAILURE_RATE"
_LATENCY_SCALE_ENV = "TALENTSCOPE_LATENCY_SCALE"
_REPORT_ETA_ENV = "TALENTSCOPE_REPORT_ETA"
_SEED_ENV = "TALENTSCOPE_SEED"

DEFAULT_DB_PATH = Path.home() / ".talentscope" / "talentscope.sqlite"
DEFAULT_SEARCH_FAILURE_RATE = 0.1
DEFAULT_REPORT_ETA = "7 days"

# Base delays in seconds, scaled by ``latency_scale``.
OPERATION_LATENCY: Mapping[str, float] = {
    "register": 0.8,
    "login": 0.6,
    "forgot_password": 0.5,
    "update_profile": 0.8,
    "change_password": 1.0,
    "delete_account": 1.0,
    "search": 1.2,
    "save_player": 0.3,
    "request_contact": 0.5,
    "authorize_providers": 1.5,
    "report_status": 0.4,
    "generate_report": 2.0,
    "fetch_report": 0.5,
    "set_sharing": 0.3,
    "connection_request": 0.8,
    "send_notification": 0.5,
}


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; ignoring", name, raw)
        return None


@dataclass(frozen=True)
class Settings:
    db_path: Path | str = DEFAULT_DB_PATH
    search_failure_rate: float = DEFAULT_SEARCH_FAILURE_RATE
    latency_scale: float = 0.0
    report_eta: str = DEFAULT_REPORT_ETA
    seed: Optional[int] = None
    latencies: Mapping[str, float] = field(default_factory=lambda: dict(OPERATION_LATENCY))

    @classmethod
    def from_env(cls) -> "Settings":
        raw_db = os.getenv(_DB_PATH_ENV)
        if raw_db and raw_db != ":memory:":
            db_path: Path | str = Path(raw_db).expanduser()
        elif raw_db:
            db_path = raw_db
        else:
            db_path = DEFAULT_DB_PATH
        return cls(
            db_path=db_path,
            search_failure_rate=_env_float(
                _FAILURE_RATE_ENV, DEFAULT_SEARCH_FAILURE_RATE, clamp_min=0.0, clamp_max=1.0
            ),
            latency_scale=_env_float(_LATENCY_SCALE_ENV, 0.0, clamp_min=0.0),
            report_eta=os.getenv(_REPORT_ETA_ENV) or DEFAULT_REPORT_ETA,
            seed=_env_int(_SEED_ENV),
        )

    def latency_for(self, operation: str) -> float:
        return self.latencies.get(operation, 0.0) * self.latency_scale
