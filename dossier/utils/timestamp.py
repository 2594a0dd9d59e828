"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Compact local timestamp for directory names (e.g., 20251114_123456)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """ISO date for the current day (e.g., 2025-11-14)."""
    return datetime.now().strftime("%Y-%m-%d")

