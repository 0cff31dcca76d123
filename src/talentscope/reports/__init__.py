"""Asynchronous report generation pipeline."""

from .pipeline import ReportPipeline, build_report

__all__ = ["ReportPipeline", "build_report"]
