"""Reporting — human-readable summaries of Lorentz transforms."""

from .transform_report import (
    DISPLAY_DIGITS_DEFAULT,
    ReportConfig,
    TransformReport,
    TransformReporter,
    build_report,
    format_report,
)

__all__ = [
    "DISPLAY_DIGITS_DEFAULT",
    "ReportConfig",
    "TransformReport",
    "TransformReporter",
    "build_report",
    "format_report",
]
