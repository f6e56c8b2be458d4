"""
Telemetry and Reporting Package.

Available Components:

- Logger: Static utility for stream and file logging initialization.
- LogStyle: Unified logging style constants.
- Progress functions: Fit setup summary and per-epoch metrics report.
"""

from .logger import Logger
from .progress import format_epoch_metrics, log_epoch_metrics, log_fit_summary
from .styles import LogStyle

__all__ = [
    "Logger",
    "LogStyle",
    "format_epoch_metrics",
    "log_epoch_metrics",
    "log_fit_summary",
]
