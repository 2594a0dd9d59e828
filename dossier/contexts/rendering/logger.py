"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from dossier.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Optional[Path] = None, verbose: bool = False) -> Optional[Path]:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session (None for console only)
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file, if any

    Example:
        from dossier.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(Path("outs/logs/render_20251114_123456"))
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"PDF engine": "weasyprint", "DOCX engine": "python-docx"},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_request(
    output_format: str,
    kind: str,
    name: str,
    template_id: Optional[str] = None,
    counts: Optional[Dict[str, int]] = None,
) -> None:
    """Log the start of a render request with a summary of its input."""
    _log_info(f"{output_format.upper()} {kind} request: {name}")
    if template_id:
        _log_info(f"  Template ID: {template_id}")
    for label, count in (counts or {}).items():
        _log_debug(f"  {label}: {count}")


def log_render_result(
    name: str,
    filename: str,
    size_bytes: int,
    elapsed_time: float,
    page_count: Optional[int] = None,
) -> None:
    """Log a successful render."""
    pages = f", {page_count} pages" if page_count is not None else ""
    _log_success(f"{name}: {filename} ({size_bytes} bytes{pages}, {elapsed_time:.2f}s)")


def log_render_failure(name: str, output_format: str, error: Exception, elapsed_time: float) -> None:
    """
    Log a failed render with the full error context.

    Uses opt(raw=True) so multi-line error messages keep their formatting.
    """
    _log_error(f"{name}: {output_format.upper()} rendering failed ({elapsed_time:.2f}s)")
    _log_error(f"  {type(error).__name__}: {getattr(error, 'message', error)}")
    logger.opt(raw=True).debug(f"\n{'=' * 80}\n{error}\n{'=' * 80}\n")
