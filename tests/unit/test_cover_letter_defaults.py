"""Unit tests for cover letter defaulting."""

from dataclasses import replace

import pytest

from dossier.contexts.intake import CoverLetterClosing, CoverLetterRecipient, apply_defaults
from dossier.contexts.intake.defaults import default_salutation


@pytest.mark.unit
def test_missing_recipient_and_salutation(bare_cover_letter):
    letter = apply_defaults(bare_cover_letter)

    assert letter.recipient.company == "Hiring Team"
    assert letter.recipient.name is None
    assert letter.salutation == "Dear Hiring Manager,"


@pytest.mark.unit
def test_missing_closing_signed_with_header_name(bare_cover_letter):
    letter = apply_defaults(bare_cover_letter)

    assert letter.closing.valediction == "Sincerely,"
    assert letter.closing.name == "Sarah Johnson"


@pytest.mark.unit
def test_salutation_uses_recipient_name(bare_cover_letter):
    letter = replace(bare_cover_letter, recipient=CoverLetterRecipient(name="Michael Chen"))

    defaulted = apply_defaults(letter)

    assert defaulted.salutation == "Dear Michael Chen,"
    assert defaulted.recipient.company == "Hiring Team"


@pytest.mark.unit
def test_supplied_values_are_kept(full_cover_letter):
    letter = apply_defaults(full_cover_letter)

    assert letter.recipient == full_cover_letter.recipient
    assert letter.salutation == "Dear Mr. Chen:"
    assert letter.closing.valediction == "Best regards,"
    assert letter.closing.name == "Sarah J."


@pytest.mark.unit
def test_blank_closing_fields_are_filled(bare_cover_letter):
    letter = replace(bare_cover_letter, closing=CoverLetterClosing(valediction="  ", name=""))

    defaulted = apply_defaults(letter)

    assert defaulted.closing == CoverLetterClosing(valediction="Sincerely,", name="Sarah Johnson")


@pytest.mark.unit
@pytest.mark.parametrize("letter_fixture", ["bare_cover_letter", "full_cover_letter"])
def test_idempotent(letter_fixture, request):
    letter = request.getfixturevalue(letter_fixture)

    once = apply_defaults(letter)

    assert apply_defaults(once) == once


@pytest.mark.unit
def test_input_is_not_modified(bare_cover_letter):
    before = repr(bare_cover_letter)

    defaulted = apply_defaults(bare_cover_letter)

    assert repr(bare_cover_letter) == before
    assert bare_cover_letter.recipient is None
    assert defaulted is not bare_cover_letter


@pytest.mark.unit
def test_default_salutation_without_name():
    assert default_salutation(CoverLetterRecipient()) == "Dear Hiring Manager"
