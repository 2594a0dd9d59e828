"""
Document Pipeline

Request-level orchestration for the rendering context. Validates input,
applies cover letter defaults, runs the template -> PDF or model -> DOCX path,
and returns bytes with a suggested filename for the transport layer.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from dossier.contexts.intake.defaults import apply_defaults
from dossier.contexts.intake.document_data_structures import (
    CandidateProfile,
    CoverLetter,
    Document,
    DocumentKind,
)
from dossier.contexts.intake.validator import validate_document
from dossier.contexts.rendering.docx_builder import StructuralDocumentBuilder
from dossier.contexts.rendering.logger import (
    log_render_failure,
    log_render_request,
    log_render_result,
)
from dossier.contexts.rendering.pdf_renderer import render_visual_document
from dossier.contexts.rendering.worker_pool import RenderWorkerPool
from dossier.contexts.templating.catalog import normalize_cover_letter_template_id
from dossier.contexts.templating.renderer import TemplateRenderer
from dossier.utils.text_processing import filename_stem

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

FILENAME_SUFFIXES = {
    DocumentKind.PROFILE: "resume",
    DocumentKind.COVER_LETTER: "cover_letter",
}


@dataclass(frozen=True)
class RenderedDocument:
    """
    Output of one render request.

    Attributes:
        content: Document bytes
        filename: Suggested filename (e.g., "Sarah_Johnson_cover_letter.pdf")
        media_type: MIME type for the transport layer
        page_count: Pages in the PDF (None for DOCX)
    """

    content: bytes
    filename: str
    media_type: str
    page_count: Optional[int] = None


def suggested_filename(document: Document, extension: str) -> str:
    """
    Derive an output filename from the person's name and document kind.

    Example:
        "Sarah Johnson" cover letter as pdf -> "Sarah_Johnson_cover_letter.pdf"
    """
    return f"{filename_stem(document.name)}_{FILENAME_SUFFIXES[document.kind]}.{extension}"


def _request_counts(document: Document) -> dict:
    if document.kind is DocumentKind.PROFILE:
        return {
            "Skills": len(document.skills),
            "Experience": len(document.experience),
            "Education": len(document.education),
            "Certifications": len(document.certifications),
        }
    return {"Content paragraphs": len(document.content)}


class DocumentPipeline:
    """
    Entry point for render requests.

    Holds the shared, read-only collaborators (template renderer with its
    cached registry, DOCX builder). Every call creates its own output buffers,
    so one pipeline serves concurrent requests.
    """

    def __init__(
        self,
        renderer: Optional[TemplateRenderer] = None,
        builder: Optional[StructuralDocumentBuilder] = None,
        pool: Optional[RenderWorkerPool] = None,
    ):
        self.renderer = renderer or TemplateRenderer()
        self.builder = builder or StructuralDocumentBuilder()
        self._pool = pool

    @property
    def pool(self) -> RenderWorkerPool:
        """Worker pool for submit(), created on first use."""
        if self._pool is None:
            self._pool = RenderWorkerPool()
        return self._pool

    def _prepare(self, document: Document) -> Document:
        validate_document(document)
        if document.kind is DocumentKind.COVER_LETTER:
            return apply_defaults(document)
        return document

    def _timed(self, document: Document, output_format: str, produce: Callable[[], RenderedDocument]):
        start_time = time.time()
        try:
            rendered = produce()
        except Exception as e:
            log_render_failure(document.name, output_format, e, time.time() - start_time)
            raise

        log_render_result(
            name=document.name,
            filename=rendered.filename,
            size_bytes=len(rendered.content),
            elapsed_time=time.time() - start_time,
            page_count=rendered.page_count,
        )
        return rendered

    # =========================================================================
    # PDF
    # =========================================================================

    def render_pdf(self, document: Document, template_id: str) -> RenderedDocument:
        """
        Render a profile or cover letter to PDF through a catalog template.

        Cover letter identifiers are normalized first (e.g.,
        "starter_template_001" -> "cover_letter_starter_001").

        Raises:
            ValidationError: If required fields are missing
            TemplateNotFoundError: If the template identifier is unknown
            TemplateRenderError: If the template fails while rendering
            ConversionError: If the HTML cannot be converted
        """
        document = self._prepare(document)
        if document.kind is DocumentKind.COVER_LETTER:
            template_id = normalize_cover_letter_template_id(template_id)

        log_render_request("pdf", document.kind.value, document.name, template_id,
                           _request_counts(document))

        def produce() -> RenderedDocument:
            markup = self.renderer.render(template_id, document)
            visual = render_visual_document(markup)
            return RenderedDocument(
                content=visual.content,
                filename=suggested_filename(document, "pdf"),
                media_type=PDF_MEDIA_TYPE,
                page_count=visual.page_count,
            )

        return self._timed(document, "pdf", produce)

    def render_profile_pdf(self, profile: CandidateProfile, template_id: str) -> RenderedDocument:
        """Render a candidate profile to PDF."""
        return self.render_pdf(profile, template_id)

    def render_cover_letter_pdf(self, letter: CoverLetter, template_id: str) -> RenderedDocument:
        """Render a cover letter to PDF (defaults applied, identifier normalized)."""
        return self.render_pdf(letter, template_id)

    # =========================================================================
    # DOCX
    # =========================================================================

    def render_docx(self, document: Document) -> RenderedDocument:
        """
        Build a profile or cover letter as DOCX.

        Raises:
            ValidationError: If required fields are missing
            DocumentBuildError: If the document cannot be serialized
        """
        document = self._prepare(document)
        log_render_request("docx", document.kind.value, document.name,
                           counts=_request_counts(document))

        def produce() -> RenderedDocument:
            return RenderedDocument(
                content=self.builder.build(document),
                filename=suggested_filename(document, "docx"),
                media_type=DOCX_MEDIA_TYPE,
            )

        return self._timed(document, "docx", produce)

    def render_profile_docx(self, profile: CandidateProfile) -> RenderedDocument:
        """Build a candidate profile as DOCX."""
        return self.render_docx(profile)

    def render_cover_letter_docx(self, letter: CoverLetter) -> RenderedDocument:
        """Build a cover letter as DOCX (defaults applied)."""
        return self.render_docx(letter)

    # =========================================================================
    # CONCURRENCY
    # =========================================================================

    def submit(self, fn: Callable, *args, **kwargs):
        """Run fn on the worker pool; returns a Future."""
        return self.pool.submit(fn, *args, **kwargs)
