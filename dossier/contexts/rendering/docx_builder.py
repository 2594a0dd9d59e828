"""
DOCX Building Module

Builds Word documents paragraph by paragraph with python-docx, walking the
data model directly. Templates are not involved; free-text fields are
flattened with to_plaintext() since runs cannot carry HTML.
"""

import io
from dataclasses import dataclass
from typing import Optional

from docx import Document as new_word_document
from docx.document import Document as WordDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Length, Pt
from docx.text.paragraph import Paragraph

from dossier.contexts.intake.defaults import FALLBACK_VALEDICTION
from dossier.contexts.intake.document_data_structures import (
    CandidateProfile,
    CoverLetter,
    Document,
    DocumentKind,
)
from dossier.contexts.rendering.exceptions import DocumentBuildError
from dossier.contexts.rendering.logger import _log_debug
from dossier.utils.markup_parsing_tools import markup_lines, to_bullet, to_plaintext, xml_safe
from dossier.utils.text_processing import is_blank, join_present

BULLET = "•"
SKILL_SEPARATOR = f" {BULLET} "
CONTACT_SEPARATOR = " | "
ENTRY_SEPARATOR = " - "

# Elements that must follow w:pBdr inside w:pPr (OOXML schema order)
PBDR_SUCCESSORS = (
    "w:shd", "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap",
    "w:overflowPunct", "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN",
    "w:bidi", "w:adjustRightInd", "w:snapToGrid", "w:spacing", "w:ind",
    "w:contextualSpacing", "w:mirrorIndents", "w:suppressOverlap", "w:jc",
    "w:textDirection", "w:textAlignment", "w:textboxTightWrap", "w:outlineLvl",
    "w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange",
)


@dataclass(frozen=True)
class DocxStyle:
    """Fonts, sizes and indents used by the DOCX layouts."""

    FONT: str = "Arial"
    NAME_SIZE: Length = Pt(24)
    LETTER_NAME_SIZE: Length = Pt(14)
    HEADING_SIZE: Length = Pt(14)
    ENTRY_TITLE_SIZE: Length = Pt(12)
    BODY_SIZE: Length = Pt(11)
    META_SIZE: Length = Pt(10)
    SPACER_SIZE: Length = Pt(6)
    DESCRIPTION_INDENT: Length = Inches(0.5)
    CERTIFICATION_INDENT: Length = Inches(0.25)
    # Bottom rule under section headings, in eighths of a point
    RULE_SIZE: str = "6"
    RULE_COLOR: str = "000000"


class StructuralDocumentBuilder:
    """
    Builds resume and cover letter DOCX files.

    Each build call creates its own python-docx Document and output buffer;
    nothing is shared between calls, so one builder can serve many threads.
    """

    def __init__(self, style: DocxStyle = DocxStyle()):
        self.style = style
        self._builders = {
            DocumentKind.PROFILE: self.build_profile,
            DocumentKind.COVER_LETTER: self.build_cover_letter,
        }

    # =========================================================================
    # PARAGRAPH HELPERS
    # =========================================================================

    def _add_run(
        self,
        paragraph: Paragraph,
        text: str,
        size: Length,
        bold: bool = False,
        italic: bool = False,
    ):
        run = paragraph.add_run(xml_safe(text))
        run.bold = bold
        run.italic = italic
        run.font.size = size
        run.font.name = self.style.FONT
        return run

    def _add_paragraph(
        self,
        document: WordDocument,
        text: str,
        size: Optional[Length] = None,
        bold: bool = False,
        italic: bool = False,
        alignment: Optional[WD_ALIGN_PARAGRAPH] = None,
        left_indent: Optional[Length] = None,
    ) -> Paragraph:
        paragraph = document.add_paragraph()
        if alignment is not None:
            paragraph.alignment = alignment
        if left_indent is not None:
            paragraph.paragraph_format.left_indent = left_indent
        self._add_run(paragraph, text, size or self.style.BODY_SIZE, bold=bold, italic=italic)
        return paragraph

    def _add_spacing(self, document: WordDocument) -> Paragraph:
        """Empty paragraph with a small run, used between sections."""
        paragraph = document.add_paragraph()
        paragraph.add_run().font.size = self.style.SPACER_SIZE
        return paragraph

    def _add_bottom_border(self, paragraph: Paragraph) -> None:
        pPr = paragraph._p.get_or_add_pPr()
        pBdr = OxmlElement("w:pBdr")
        bottom = OxmlElement("w:bottom")
        bottom.set(qn("w:val"), "single")
        bottom.set(qn("w:sz"), self.style.RULE_SIZE)
        bottom.set(qn("w:space"), "1")
        bottom.set(qn("w:color"), self.style.RULE_COLOR)
        pBdr.append(bottom)
        pPr.insert_element_before(pBdr, *PBDR_SUCCESSORS)

    def _add_section_heading(self, document: WordDocument, heading: str) -> Paragraph:
        paragraph = self._add_paragraph(document, heading, self.style.HEADING_SIZE, bold=True)
        self._add_bottom_border(paragraph)
        return paragraph

    def _add_line_block(self, document: WordDocument, lines, size: Length, first_bold=False):
        """One paragraph holding several lines separated by line breaks."""
        paragraph = document.add_paragraph()
        for index, line in enumerate(lines):
            run = self._add_run(paragraph, line, size, bold=first_bold and index == 0)
            if index < len(lines) - 1:
                run.add_break()
        return paragraph

    # =========================================================================
    # RESUME
    # =========================================================================

    def _populate_profile(self, document: WordDocument, profile: CandidateProfile) -> None:
        style = self.style

        self._add_paragraph(
            document, profile.name, style.NAME_SIZE, bold=True,
            alignment=WD_ALIGN_PARAGRAPH.CENTER,
        )
        contact = join_present([profile.email, profile.phone, profile.location], CONTACT_SEPARATOR)
        if contact:
            self._add_paragraph(document, contact, alignment=WD_ALIGN_PARAGRAPH.CENTER)
        self._add_spacing(document)

        summary = to_plaintext(profile.summary)
        if not is_blank(summary):
            self._add_section_heading(document, "PROFESSIONAL SUMMARY")
            self._add_paragraph(document, summary)
            self._add_spacing(document)

        if profile.skills:
            self._add_section_heading(document, "SKILLS")
            self._add_paragraph(document, SKILL_SEPARATOR.join(profile.skills))
            self._add_spacing(document)

        if profile.experience:
            self._add_section_heading(document, "PROFESSIONAL EXPERIENCE")
            for entry in profile.experience:
                title = join_present([entry.title, entry.company], ENTRY_SEPARATOR)
                self._add_paragraph(document, title, style.ENTRY_TITLE_SIZE, bold=True)
                if not is_blank(entry.duration):
                    self._add_paragraph(document, entry.duration, style.META_SIZE, italic=True)
                for line in markup_lines(entry.description):
                    self._add_paragraph(
                        document, to_bullet(line), left_indent=style.DESCRIPTION_INDENT
                    )
                self._add_spacing(document)

        if profile.education:
            self._add_section_heading(document, "EDUCATION")
            for entry in profile.education:
                degree = join_present([entry.degree, entry.institution], ENTRY_SEPARATOR)
                self._add_paragraph(document, degree, style.ENTRY_TITLE_SIZE, bold=True)
                if not is_blank(entry.year):
                    self._add_paragraph(document, entry.year, style.META_SIZE, italic=True)
                self._add_spacing(document)

        if profile.certifications:
            self._add_section_heading(document, "CERTIFICATIONS")
            for certification in profile.certifications:
                self._add_paragraph(
                    document, f"{BULLET} {certification}", left_indent=style.CERTIFICATION_INDENT
                )

    # =========================================================================
    # COVER LETTER
    # =========================================================================

    def _populate_cover_letter(self, document: WordDocument, letter: CoverLetter) -> None:
        style = self.style
        header = letter.header

        sender = [line for line in (header.name, header.email, header.phone) if not is_blank(line)]
        block = document.add_paragraph()
        block.alignment = WD_ALIGN_PARAGRAPH.LEFT
        for index, line in enumerate(sender):
            is_name = index == 0
            run = self._add_run(
                block, line, style.LETTER_NAME_SIZE if is_name else style.BODY_SIZE, bold=is_name
            )
            if index < len(sender) - 1:
                run.add_break()
        self._add_spacing(document)

        self._add_paragraph(document, header.date)
        self._add_spacing(document)

        recipient = letter.recipient
        if recipient is not None:
            lines = [
                line
                for line in (recipient.name, recipient.position, recipient.company)
                if not is_blank(line)
            ]
            if lines:
                self._add_line_block(document, lines, style.BODY_SIZE)
                self._add_spacing(document)

        if not is_blank(letter.salutation):
            self._add_paragraph(document, letter.salutation)
            self._add_spacing(document)

        for paragraph in letter.content:
            self._add_paragraph(
                document, to_plaintext(paragraph) or "", alignment=WD_ALIGN_PARAGRAPH.JUSTIFY
            )
            self._add_spacing(document)

        closing = letter.closing
        self._add_paragraph(document, closing.valediction if closing else FALLBACK_VALEDICTION)
        self._add_spacing(document)
        self._add_spacing(document)
        self._add_paragraph(document, closing.name if closing else header.name)

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def _serialize(self, document: WordDocument, name: str) -> bytes:
        try:
            with io.BytesIO() as buffer:
                document.save(buffer)
                content = buffer.getvalue()
        except Exception as e:
            raise DocumentBuildError(
                "Failed to serialize DOCX document", document_name=name, original_error=e
            ) from e

        _log_debug(f"Serialized {len(document.paragraphs)} paragraphs ({len(content)} bytes)")
        return content

    def build_profile(self, profile: CandidateProfile) -> bytes:
        """
        Build a resume DOCX from a candidate profile.

        Sections in order: name, contact line, summary, skills, experience,
        education, certifications. Empty sections are omitted entirely.

        Raises:
            DocumentBuildError: If the document cannot be serialized
        """
        document = new_word_document()
        self._populate_profile(document, profile)
        return self._serialize(document, profile.name)

    def build_cover_letter(self, letter: CoverLetter) -> bytes:
        """
        Build a cover letter DOCX.

        The letter should already have had apply_defaults() applied; without a
        closing the valediction is "Sincerely," signed with the header name.

        Raises:
            DocumentBuildError: If the document cannot be serialized
        """
        document = new_word_document()
        self._populate_cover_letter(document, letter)
        return self._serialize(document, letter.header.name)

    def build(self, document: Document) -> bytes:
        """Build either variant, dispatching on its kind tag."""
        return self._builders[document.kind](document)


def to_structural_document(document: Document) -> bytes:
    """Build DOCX bytes for a profile or cover letter with the default style."""
    return StructuralDocumentBuilder().build(document)
