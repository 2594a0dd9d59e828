"""
Markup Pattern Constants

Regex and literal patterns used to flatten HTML fragments into plain text.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class MarkupRegex:
    """
    Tag patterns for HTML fragments found in free-text fields.

    Applied in declaration order by to_plaintext().
    """
    # <br>, <br/>, <br />, <BR >
    LINE_BREAK: re.Pattern = re.compile(r"<br\s*/?\s*>", re.IGNORECASE)
    LIST_ITEM_CLOSE: re.Pattern = re.compile(r"</li\s*>", re.IGNORECASE)
    PARAGRAPH_CLOSE: re.Pattern = re.compile(r"</p\s*>", re.IGNORECASE)
    ANY_TAG: re.Pattern = re.compile(r"<[^>]+>")
    # Runs of 3+ newlines collapse to a single blank line
    EXCESS_NEWLINES: re.Pattern = re.compile(r"\n{3,}")


@dataclass(frozen=True)
class EntityPatterns:
    """
    Named and numeric character entities decoded by to_plaintext().

    Decoded one after another in table order, so "&amp;lt;" ends up as "<".
    Anything not in this table passes through unchanged.
    """
    ENTITIES: Dict[str, str] = field(
        default_factory=lambda: {
            "&nbsp;": " ",
            "&amp;": "&",
            "&lt;": "<",
            "&gt;": ">",
            "&quot;": '"',
            "&#39;": "'",
        }
    )


@dataclass(frozen=True)
class BulletPatterns:
    """Bullet markers recognized at the start of description lines."""
    BULLET: str = "•"
    MARKERS: Tuple[str, ...] = ("•", "-", "*")
    # Only ASCII markers are rewritten; an existing "•" is kept as is
    ASCII_MARKER: re.Pattern = re.compile(r"^[-*]")
    # Exactly one leading marker and the whitespace after it
    LEADING_MARKER: re.Pattern = re.compile(r"^[•*-]\s*")


@dataclass(frozen=True)
class ControlCharacterPatterns:
    """Characters that cannot appear in OOXML text runs."""
    # Vertical tab, which Word uses for pasted soft line breaks
    SOFT_BREAK: re.Pattern = re.compile(r"\x0b")
    XML_ILLEGAL: re.Pattern = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")
