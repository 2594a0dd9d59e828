"""Text processing utilities for names, filenames and display."""

import re
from typing import Iterable, Optional

WHITESPACE_RUN = re.compile(r"\s+")


def filename_stem(name: str) -> str:
    """
    Derive a filename stem from a person's name.

    Surrounding whitespace is dropped and every inner whitespace run becomes
    a single underscore.

    Example:
        >>> filename_stem("Sarah Johnson")
        'Sarah_Johnson'
        >>> filename_stem("  Mary  Ann\\tLee ")
        'Mary_Ann_Lee'
    """
    return WHITESPACE_RUN.sub("_", name.strip())


def is_blank(value: Optional[str]) -> bool:
    """True for None, "" and whitespace-only strings."""
    return value is None or not value.strip()


def join_present(parts: Iterable[Optional[str]], separator: str = " | ") -> str:
    """
    Join the non-blank parts with a separator.

    Example:
        >>> join_present(["a@b.com", None, "Austin, TX"])
        'a@b.com | Austin, TX'
    """
    return separator.join(part for part in parts if not is_blank(part))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."
    """
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
