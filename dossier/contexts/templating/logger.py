"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_binding(template_id: str, kind: str, slots: dict) -> None:
    """Log which template is being bound and the shape of its slots."""
    _log_debug(f"Binding {kind} into {template_id}")
    for key, value in slots.items():
        if isinstance(value, (list, tuple)):
            _log_debug(f"  {key}: {len(value)} items")
        else:
            _log_debug(f"  {key}: {'set' if value else 'empty'}")
