"""
Markup parsing tools for the plain-text document path.

Free-text fields (summaries, experience descriptions, cover letter paragraphs)
may carry small HTML fragments from rich-text editors. The DOCX builder cannot
consume markup, so these helpers flatten it deterministically.
"""

from typing import List, Optional

from dossier.utils.markup_patterns import (
    BulletPatterns,
    ControlCharacterPatterns,
    EntityPatterns,
    MarkupRegex,
)

_MARKUP = MarkupRegex()
_ENTITIES = EntityPatterns()
_BULLETS = BulletPatterns()
_CONTROL = ControlCharacterPatterns()


def decode_entities(text: str) -> str:
    """
    Decode the fixed entity table, one entity after another in table order.

    "&amp;" is decoded before "&lt;", so "&amp;lt;" becomes "<".

    Args:
        text: Text possibly containing entities

    Returns:
        Text with known entities replaced
    """
    for entity, replacement in _ENTITIES.ENTITIES.items():
        text = text.replace(entity, replacement)
    return text


def to_plaintext(markup: Optional[str]) -> Optional[str]:
    """
    Flatten an HTML fragment to plain text.

    Steps, in order (later steps depend on earlier output):
        1. <br> variants -> newline
        2. </li> -> newline
        3. </p> -> blank line
        4. Strip every remaining tag
        5. Decode &nbsp; &amp; &lt; &gt; &quot; &#39;
        6. Collapse 3+ consecutive newlines to 2
        7. Trim surrounding whitespace

    Never raises on malformed input. None and "" are returned unchanged.

    Args:
        markup: HTML fragment

    Returns:
        Plain text

    Example:
        >>> to_plaintext("<p>Led development.<br>Shipped v2.</p>")
        'Led development.\\nShipped v2.'
    """
    if not markup:
        return markup

    text = _MARKUP.LINE_BREAK.sub("\n", markup)
    text = _MARKUP.LIST_ITEM_CLOSE.sub("\n", text)
    text = _MARKUP.PARAGRAPH_CLOSE.sub("\n\n", text)
    text = _MARKUP.ANY_TAG.sub("", text)
    text = decode_entities(text)
    text = _MARKUP.EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()


def markup_lines(markup: Optional[str]) -> List[str]:
    """
    Flatten markup and split it into non-empty, stripped lines.

    Args:
        markup: HTML fragment (None or "" yields no lines)

    Returns:
        Lines in input order
    """
    text = to_plaintext(markup)
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def to_bullet(line: str) -> str:
    """
    Render a description line as a bullet.

    Lines already starting with "•", "-" or "*" get that marker replaced
    with "•"; every other line gets "• " prepended.

    Example:
        >>> to_bullet("- Led team of 5")
        '• Led team of 5'
        >>> to_bullet("Led team of 5")
        '• Led team of 5'
    """
    if line.startswith(_BULLETS.MARKERS):
        return _BULLETS.ASCII_MARKER.sub(_BULLETS.BULLET, line, count=1)
    return f"{_BULLETS.BULLET} {line}"


def strip_bullet(line: str) -> str:
    """
    Drop one leading bullet marker, for layouts that draw their own bullets.

    Example:
        >>> strip_bullet("- -5% churn")
        '-5% churn'
    """
    return _BULLETS.LEADING_MARKER.sub("", line, count=1)


def xml_safe(text: Optional[str]) -> Optional[str]:
    """
    Make text storable in a DOCX run.

    Vertical tabs (soft line breaks pasted from Word) become newlines; every
    other XML-illegal control character is dropped.
    """
    if not text:
        return text
    text = _CONTROL.SOFT_BREAK.sub("\n", text)
    return _CONTROL.XML_ILLEGAL.sub("", text)
