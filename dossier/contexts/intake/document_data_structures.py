"""
Document Data Structures

Defines the value objects rendered by the pipeline: candidate profiles and
cover letters. Instances are frozen and their sequences are tuples, so a model
never changes after construction.

Every model class carries a `kind` tag. Renderers dispatch on that tag instead
of inspecting types, which keeps one entry point per variant.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Optional, Tuple, Union

from dossier.contexts.intake.exceptions import ValidationError


class DocumentKind(str, Enum):
    """Variants a render request can carry."""

    PROFILE = "profile"
    COVER_LETTER = "cover_letter"


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _string_tuple(values: Optional[Iterable[Any]], field_name: str) -> Tuple[str, ...]:
    """List of strings from plain data; None items are skipped."""
    if values is None:
        return ()
    # A bare string would otherwise be split into characters
    if not isinstance(values, (list, tuple)):
        raise ValidationError(
            "Invalid request data",
            field_errors=[f"{field_name}: must be a list, got {type(values).__name__}"],
        )
    return tuple(str(value) for value in values if value is not None)


@dataclass(frozen=True)
class Experience:
    """
    One work experience entry.

    Attributes:
        title: Job title
        company: Employer
        duration: Free-form label (e.g., "2020-Present")
        description: Free text; may carry simple markup (<br>, </li>, </p>, entities)
    """

    title: Optional[str] = None
    company: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Experience":
        return cls(
            title=_optional_str(data.get("title")),
            company=_optional_str(data.get("company")),
            duration=_optional_str(data.get("duration")),
            description=_optional_str(data.get("description")),
        )


@dataclass(frozen=True)
class Education:
    """One education entry: degree, institution and year, all plain strings."""

    degree: Optional[str] = None
    institution: Optional[str] = None
    year: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Education":
        return cls(
            degree=_optional_str(data.get("degree")),
            institution=_optional_str(data.get("institution")),
            year=_optional_str(data.get("year")),
        )


@dataclass(frozen=True)
class CandidateProfile:
    """
    Candidate profile rendered as a resume.

    Only `name` is required for rendering (it drives output filenames). Every
    other field may be missing or empty and renders as an omitted section.
    """

    kind: ClassVar[DocumentKind] = DocumentKind.PROFILE

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    skills: Tuple[str, ...] = ()
    experience: Tuple[Experience, ...] = ()
    education: Tuple[Education, ...] = ()
    certifications: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CandidateProfile":
        """
        Build a profile from plain data (parsed JSON/YAML).

        Missing keys and None lists are tolerated; validation happens separately.
        """
        return cls(
            name=_optional_str(data.get("name")),
            email=_optional_str(data.get("email")),
            phone=_optional_str(data.get("phone")),
            location=_optional_str(data.get("location")),
            summary=_optional_str(data.get("summary")),
            skills=_string_tuple(data.get("skills"), "skills"),
            experience=tuple(Experience.from_dict(item) for item in data.get("experience") or ()),
            education=tuple(Education.from_dict(item) for item in data.get("education") or ()),
            certifications=_string_tuple(data.get("certifications"), "certifications"),
        )


@dataclass(frozen=True)
class CoverLetterHeader:
    """Candidate details printed at the top of a cover letter. All fields required."""

    name: str
    email: str
    phone: str
    date: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoverLetterHeader":
        return cls(
            name=_optional_str(data.get("name")),
            email=_optional_str(data.get("email")),
            phone=_optional_str(data.get("phone")),
            date=_optional_str(data.get("date")),
        )


@dataclass(frozen=True)
class CoverLetterRecipient:
    """Who the letter is addressed to. Every field is optional."""

    name: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoverLetterRecipient":
        return cls(
            name=_optional_str(data.get("name")),
            company=_optional_str(data.get("company")),
            position=_optional_str(data.get("position")),
        )


@dataclass(frozen=True)
class CoverLetterClosing:
    """Valediction (e.g., "Best regards") and signature name."""

    valediction: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoverLetterClosing":
        return cls(
            valediction=_optional_str(data.get("valediction")),
            name=_optional_str(data.get("name")),
        )


@dataclass(frozen=True)
class CoverLetter:
    """
    Cover letter rendered as a single-page letter.

    Attributes:
        header: Candidate details (required)
        recipient: Addressee (optional, defaulted by apply_defaults)
        salutation: Opening line (optional, derived by apply_defaults)
        content: Body paragraphs in order (required, non-empty)
        closing: Valediction and signature (optional, defaulted by apply_defaults)
    """

    kind: ClassVar[DocumentKind] = DocumentKind.COVER_LETTER

    header: CoverLetterHeader
    content: Tuple[str, ...] = field(default_factory=tuple)
    recipient: Optional[CoverLetterRecipient] = None
    salutation: Optional[str] = None
    closing: Optional[CoverLetterClosing] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoverLetter":
        """Build a cover letter from plain data (parsed JSON/YAML)."""
        recipient = data.get("recipient")
        closing = data.get("closing")
        return cls(
            header=CoverLetterHeader.from_dict(data.get("header") or {}),
            content=_string_tuple(data.get("content"), "content"),
            recipient=CoverLetterRecipient.from_dict(recipient) if recipient is not None else None,
            salutation=_optional_str(data.get("salutation")),
            closing=CoverLetterClosing.from_dict(closing) if closing is not None else None,
        )

    @property
    def name(self) -> str:
        """Candidate name, used for output filenames."""
        return self.header.name


# Tagged variant accepted by the generic render entry points
Document = Union[CandidateProfile, CoverLetter]

MODEL_BY_KIND = {
    DocumentKind.PROFILE: CandidateProfile,
    DocumentKind.COVER_LETTER: CoverLetter,
}
