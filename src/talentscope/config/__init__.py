"""Configuration helpers for the service layer."""

from .settings import DEFAULT_REPORT_ETA, OPERATION_LATENCY, Settings

__all__ = [
    "DEFAULT_REPORT_ETA",
    "OPERATION_LATENCY",
    "Settings",
]
