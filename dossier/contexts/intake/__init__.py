"""
Intake Context

Responsibilities:
- Represents candidate profiles and cover letters as immutable value objects
- Loads render requests from YAML/JSON
- Validates required fields before rendering
- Derives cover letter defaults (recipient, salutation, closing)

Owns: Document data model, input validation, defaulting rules
Never: Produces markup or document bytes
"""

from dossier.contexts.intake.defaults import apply_defaults
from dossier.contexts.intake.document_data_structures import (
    CandidateProfile,
    CoverLetter,
    CoverLetterClosing,
    CoverLetterHeader,
    CoverLetterRecipient,
    Document,
    DocumentKind,
    Education,
    Experience,
)
from dossier.contexts.intake.exceptions import ValidationError
from dossier.contexts.intake.loader import RenderRequest, load_request, request_from_dict
from dossier.contexts.intake.validator import (
    validate_cover_letter,
    validate_document,
    validate_profile,
)

__all__ = [
    # Data model
    "CandidateProfile",
    "CoverLetter",
    "CoverLetterClosing",
    "CoverLetterHeader",
    "CoverLetterRecipient",
    "Document",
    "DocumentKind",
    "Education",
    "Experience",
    # Loading
    "RenderRequest",
    "load_request",
    "request_from_dict",
    # Validation and defaulting
    "ValidationError",
    "apply_defaults",
    "validate_cover_letter",
    "validate_document",
    "validate_profile",
]
