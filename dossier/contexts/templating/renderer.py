"""
Template Renderer

Binds profiles and cover letters onto catalog templates to produce HTML.
"""

from typing import Any, Dict, Optional

from jinja2 import TemplateError

from dossier.contexts.intake.defaults import FALLBACK_VALEDICTION
from dossier.contexts.intake.document_data_structures import (
    CandidateProfile,
    CoverLetter,
    Document,
    DocumentKind,
)
from dossier.contexts.templating.exceptions import TemplateRenderError
from dossier.contexts.templating.logger import _log_error, log_binding
from dossier.contexts.templating.registries import TemplateRegistry


def profile_slots(profile: CandidateProfile) -> Dict[str, Any]:
    """
    Named values exposed to resume templates.

    Sequences are plain lists of dicts so templates never see model classes.
    """
    return {
        "name": profile.name,
        "email": profile.email,
        "phone": profile.phone,
        "location": profile.location,
        "summary": profile.summary,
        "skills": list(profile.skills),
        "experience": [
            {
                "title": entry.title,
                "company": entry.company,
                "duration": entry.duration,
                "description": entry.description,
            }
            for entry in profile.experience
        ],
        "education": [
            {"degree": entry.degree, "institution": entry.institution, "year": entry.year}
            for entry in profile.education
        ],
        "certifications": list(profile.certifications),
    }


def cover_letter_slots(letter: CoverLetter) -> Dict[str, Any]:
    """
    Named values exposed to cover letter templates.

    Recipient slots are None when there is no recipient. Without a closing the
    valediction falls back to "Sincerely," and the signature to the header name.
    """
    recipient = letter.recipient
    closing = letter.closing
    return {
        "name": letter.header.name,
        "email": letter.header.email,
        "phone": letter.header.phone,
        "date": letter.header.date,
        "recipientName": recipient.name if recipient else None,
        "companyName": recipient.company if recipient else None,
        "position": recipient.position if recipient else None,
        "salutation": letter.salutation,
        "content": list(letter.content),
        "valediction": closing.valediction if closing else FALLBACK_VALEDICTION,
        "signature": closing.name if closing else letter.header.name,
    }


class TemplateRenderer:
    """Renders documents into HTML using templates from a TemplateRegistry."""

    def __init__(self, registry: Optional[TemplateRegistry] = None):
        self.registry = registry or TemplateRegistry()
        self._renderers = {
            DocumentKind.PROFILE: self.render_profile,
            DocumentKind.COVER_LETTER: self.render_cover_letter,
        }

    def _render(self, template_id: str, kind: DocumentKind, slots: Dict[str, Any]) -> str:
        template = self.registry.get_template(template_id, kind=kind)
        log_binding(template_id, kind.value, slots)

        try:
            return template.render(**slots)
        except TemplateError as e:
            _log_error(f"Rendering {template_id} failed: {e}")
            raise TemplateRenderError(
                f"Failed to render {kind.value} template",
                template_id=template_id,
                template_path=self.registry.get_template_path(template_id),
                original_error=e,
            ) from e

    def render_profile(self, template_id: str, profile: CandidateProfile) -> str:
        """
        Render a candidate profile into HTML.

        Args:
            template_id: Resume template identifier
            profile: Profile to bind

        Returns:
            HTML document text

        Raises:
            TemplateNotFoundError: If template_id is not a resume template
            TemplateRenderError: If the template fails while rendering
        """
        return self._render(template_id, DocumentKind.PROFILE, profile_slots(profile))

    def render_cover_letter(self, template_id: str, letter: CoverLetter) -> str:
        """
        Render a cover letter into HTML.

        The letter should already have had apply_defaults() applied.

        Raises:
            TemplateNotFoundError: If template_id is not a cover letter template
            TemplateRenderError: If the template fails while rendering
        """
        return self._render(template_id, DocumentKind.COVER_LETTER, cover_letter_slots(letter))

    def render(self, template_id: str, document: Document) -> str:
        """Render either variant, dispatching on its kind tag."""
        return self._renderers[document.kind](template_id, document)
