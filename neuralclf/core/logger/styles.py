"""
Logging style constants for consistent visual hierarchy.
"""

from __future__ import annotations


class LogStyle:
    """Unified logging style constants."""

    HEADER_WIDTH = 60

    LIGHT = "─" * HEADER_WIDTH

    ARROW = "»"
    INDENT = "  "
