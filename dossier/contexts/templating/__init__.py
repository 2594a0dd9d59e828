"""
Templating Context

Responsibilities:
- Owns the catalog of HTML templates (dossier/contexts/templating/templates/)
- Loads, caches and reloads templates on a TTL
- Normalizes loose template identifiers onto catalog keys
- Binds profiles and cover letters into template slots

Owns: Template catalog, template cache, slot binding
Never: Converts markup to document bytes
"""

from dossier.contexts.templating.catalog import (
    TEMPLATE_CATALOG,
    available_templates,
    normalize_cover_letter_template_id,
)
from dossier.contexts.templating.exceptions import TemplateNotFoundError, TemplateRenderError
from dossier.contexts.templating.registries import TemplateRegistry
from dossier.contexts.templating.renderer import (
    TemplateRenderer,
    cover_letter_slots,
    profile_slots,
)

__all__ = [
    # Catalog
    "TEMPLATE_CATALOG",
    "available_templates",
    "normalize_cover_letter_template_id",
    # Registry and rendering
    "TemplateRegistry",
    "TemplateRenderer",
    "cover_letter_slots",
    "profile_slots",
    # Errors
    "TemplateNotFoundError",
    "TemplateRenderError",
]
