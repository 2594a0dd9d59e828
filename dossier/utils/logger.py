"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import platform
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from dossier import __version__

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {thread.name} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)
BANNER = "-" * 72


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
    console_level: str = "INFO",
) -> Optional[Path]:
    """
    Configure loguru for a context with provenance tracking.

    Sets up a colorized console sink and, when log_dir is given, a DEBUG-level
    file sink. Then logs execution provenance (script, command, working
    directory, Python version) plus any extra context.

    File sinks are enqueued so worker threads can log concurrently.

    Args:
        context_name: Context identifier (e.g., "render", "template")
        log_dir: Directory for this logging session (None for console only)
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})
        console_level: Minimum level shown on stdout

    Returns:
        Path to log file, or None when only console logging is configured

    Example:
        from dossier.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/render_20251114_123456"),
            extra_provenance={"PDF engine": "weasyprint"},
        )
    """
    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        log_file = log_dir / f"{context_name}.log"
        logger.add(log_file, format=FILE_FORMAT, level="DEBUG", enqueue=True)

    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """Write a banner describing this run (entry point, versions, settings)."""
    provenance = {
        "Entry point": Path(sys.argv[0]).name or "<interactive>",
        "Arguments": " ".join(sys.argv[1:]) or "(none)",
        "Working directory": Path.cwd(),
        "dossier": __version__,
        "Python": platform.python_version(),
        **(extra_context or {}),
    }

    width = max(len(key) for key in provenance)
    logger.info(BANNER)
    for key, value in provenance.items():
        logger.info(f"{key:<{width}} : {value}")
    logger.info(BANNER)
