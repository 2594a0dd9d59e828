"""
Template Catalog

The fixed allow-list of template identifiers and the model kind each one binds.
Caller-supplied identifiers are only ever used as keys into this table.
"""

import re
from types import MappingProxyType
from typing import List, Mapping, Optional

from dossier.contexts.intake.document_data_structures import DocumentKind

COVER_LETTER_PREFIX = "cover_letter_"

# Loose UI identifiers such as "starter_template_001"
TIERED_TEMPLATE_ID = re.compile(r"(starter|professional|expert)_template_(\d{3})")

TEMPLATE_CATALOG: Mapping[str, DocumentKind] = MappingProxyType(
    {
        # Resume layouts
        "profile_template": DocumentKind.PROFILE,
        "modern_profile_template": DocumentKind.PROFILE,
        "minimalist_profile_template": DocumentKind.PROFILE,
        "resume_template_001": DocumentKind.PROFILE,
        "resume_template_002": DocumentKind.PROFILE,
        "resume_template_003": DocumentKind.PROFILE,
        # Cover letter layouts
        "cover_letter_template_001": DocumentKind.COVER_LETTER,
        "cover_letter_template_002": DocumentKind.COVER_LETTER,
        "cover_letter_template_003": DocumentKind.COVER_LETTER,
        "cover_letter_starter_001": DocumentKind.COVER_LETTER,
        "cover_letter_professional_001": DocumentKind.COVER_LETTER,
        "cover_letter_expert_001": DocumentKind.COVER_LETTER,
    }
)


def available_templates(
    kind: Optional[DocumentKind] = None,
    catalog: Mapping[str, DocumentKind] = TEMPLATE_CATALOG,
) -> List[str]:
    """
    List catalog identifiers, optionally restricted to one model kind.

    Args:
        kind: Restrict to this kind (None for all)
        catalog: Catalog to list (default: the packaged templates)

    Returns:
        Sorted template identifiers
    """
    return sorted(
        template_id
        for template_id, template_kind in catalog.items()
        if kind is None or template_kind is kind
    )


def normalize_cover_letter_template_id(template_id: Optional[str]) -> Optional[str]:
    """
    Map a loose cover letter identifier onto a canonical catalog key.

    Rules:
    - None / "" are returned unchanged
    - "cover_letter_*" is already canonical
    - "<tier>_template_NNN" becomes "cover_letter_<tier>_NNN"
    - anything else gets the "cover_letter_" prefix

    Example:
        >>> normalize_cover_letter_template_id("starter_template_001")
        'cover_letter_starter_001'
        >>> normalize_cover_letter_template_id("template_002")
        'cover_letter_template_002'
    """
    if not template_id:
        return template_id

    if template_id.startswith(COVER_LETTER_PREFIX):
        return template_id

    match = TIERED_TEMPLATE_ID.fullmatch(template_id)
    if match:
        tier, number = match.groups()
        return f"{COVER_LETTER_PREFIX}{tier}_{number}"

    return COVER_LETTER_PREFIX + template_id
