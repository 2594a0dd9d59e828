"""
Default values for cover letters.

Applied once before any rendering so the template path and the DOCX path see
the same fully specified letter:
- missing recipient -> recipient addressed to the hiring team
- missing salutation -> derived from the recipient name
- missing closing -> "Sincerely," signed with the header name
"""

from dataclasses import replace

from dossier.contexts.intake.document_data_structures import (
    CoverLetter,
    CoverLetterClosing,
    CoverLetterRecipient,
)
from dossier.utils.text_processing import is_blank

DEFAULT_COMPANY = "Hiring Team"
DEFAULT_ADDRESSEE = "Hiring Manager"
DEFAULT_VALEDICTION = "Sincerely"

SALUTATION_TERMINATORS = (",", ":")
VALEDICTION_TERMINATOR = ","

# Used when a letter reaches rendering without a closing at all
FALLBACK_VALEDICTION = DEFAULT_VALEDICTION + VALEDICTION_TERMINATOR


def default_salutation(recipient: CoverLetterRecipient) -> str:
    """
    Derive a salutation from the recipient.

    Example:
        >>> default_salutation(CoverLetterRecipient(name="Michael Chen"))
        'Dear Michael Chen'
        >>> default_salutation(CoverLetterRecipient())
        'Dear Hiring Manager'
    """
    if not is_blank(recipient.name):
        return f"Dear {recipient.name}"
    return f"Dear {DEFAULT_ADDRESSEE}"


def terminate(text: str, accepted: tuple, suffix: str) -> str:
    """Append suffix unless text already ends with one of the accepted endings."""
    if text.endswith(accepted):
        return text
    return text + suffix


def apply_defaults(letter: CoverLetter) -> CoverLetter:
    """
    Return a fully defaulted copy of a cover letter.

    Pure: the input letter is never modified. Idempotent: a defaulted letter
    passes through unchanged, because a valediction is only given a trailing
    comma when it does not already end in one.

    Args:
        letter: Partially specified cover letter

    Returns:
        New CoverLetter with recipient, salutation and closing filled in
    """
    recipient = letter.recipient or CoverLetterRecipient()
    if is_blank(recipient.company):
        recipient = replace(recipient, company=DEFAULT_COMPANY)

    salutation = letter.salutation
    if is_blank(salutation):
        salutation = default_salutation(recipient)
    salutation = terminate(salutation, SALUTATION_TERMINATORS, SALUTATION_TERMINATORS[0])

    closing = letter.closing or CoverLetterClosing()
    valediction = closing.valediction
    if is_blank(valediction):
        valediction = DEFAULT_VALEDICTION
    valediction = terminate(valediction, (VALEDICTION_TERMINATOR,), VALEDICTION_TERMINATOR)

    signature = closing.name
    if is_blank(signature):
        signature = letter.header.name

    return replace(
        letter,
        recipient=recipient,
        salutation=salutation,
        closing=CoverLetterClosing(valediction=valediction, name=signature),
    )
