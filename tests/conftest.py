"""Shared fixtures: request files under tests/fixtures and in-memory models."""

from pathlib import Path

import pytest

from dossier.contexts.intake import (
    CandidateProfile,
    CoverLetter,
    CoverLetterClosing,
    CoverLetterHeader,
    CoverLetterRecipient,
    Experience,
)

FIXTURES_PATH = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def john_doe() -> CandidateProfile:
    """Minimal profile with one experience entry whose description uses <br>."""
    return CandidateProfile(
        name="John Doe",
        email="john.doe@example.com",
        skills=("Java", "AWS"),
        experience=(
            Experience(
                title="Senior Engineer",
                company="Tech Corp",
                duration="2020-Present",
                description="Led development.<br>Shipped v2.",
            ),
        ),
    )


@pytest.fixture
def sarah_header() -> CoverLetterHeader:
    return CoverLetterHeader(
        name="Sarah Johnson",
        email="sarah.johnson@example.com",
        phone="+1 555 0199",
        date="March 07, 2025",
    )


@pytest.fixture
def bare_cover_letter(sarah_header) -> CoverLetter:
    """Cover letter without recipient, salutation or closing."""
    return CoverLetter(
        header=sarah_header,
        content=("I am excited to apply.", "<p>I led a <b>migration</b>.</p>"),
    )


@pytest.fixture
def full_cover_letter(sarah_header) -> CoverLetter:
    return CoverLetter(
        header=sarah_header,
        recipient=CoverLetterRecipient(
            name="Michael Chen", company="Acme Corp", position="Engineering Director"
        ),
        salutation="Dear Mr. Chen:",
        content=("First paragraph.", "Second paragraph."),
        closing=CoverLetterClosing(valediction="Best regards", name="Sarah J."),
    )
