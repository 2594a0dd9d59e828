"""
Input validation for render requests.

Checks the required fields of each model before it reaches templating or
rendering. All failures for a document are collected and raised together.
"""

from typing import List

from dossier.contexts.intake.document_data_structures import (
    CandidateProfile,
    CoverLetter,
    Document,
    DocumentKind,
)
from dossier.contexts.intake.exceptions import ValidationError
from dossier.utils.text_processing import is_blank

BLANK = "must not be blank"


def profile_errors(profile: CandidateProfile) -> List[str]:
    """List required-field failures for a candidate profile."""
    errors = []
    if is_blank(profile.name):
        errors.append(f"name: {BLANK}")
    return errors


def cover_letter_errors(letter: CoverLetter) -> List[str]:
    """List required-field failures for a cover letter."""
    errors = []

    if letter.header is None:
        errors.append("header: is required")
    else:
        for field_name in ("name", "email", "phone", "date"):
            if is_blank(getattr(letter.header, field_name)):
                errors.append(f"header.{field_name}: {BLANK}")

    if not letter.content:
        errors.append("content: at least one paragraph is required")

    return errors


ERRORS_BY_KIND = {
    DocumentKind.PROFILE: profile_errors,
    DocumentKind.COVER_LETTER: cover_letter_errors,
}


def validate_document(document: Document) -> None:
    """
    Validate a profile or cover letter.

    Args:
        document: Model instance to check

    Raises:
        ValidationError: If any required field is missing or blank
    """
    errors = ERRORS_BY_KIND[document.kind](document)
    if errors:
        raise ValidationError(
            f"Invalid {document.kind.value} input ({len(errors)} field errors)",
            document_kind=document.kind.value,
            field_errors=errors,
        )


def validate_profile(profile: CandidateProfile) -> None:
    """Validate a candidate profile (raises ValidationError)."""
    validate_document(profile)


def validate_cover_letter(letter: CoverLetter) -> None:
    """Validate a cover letter (raises ValidationError)."""
    validate_document(letter)
