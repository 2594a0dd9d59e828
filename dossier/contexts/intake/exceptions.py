"""Custom exceptions for the intake context."""

from typing import List, Optional


class ValidationError(ValueError):
    """
    Exception raised when caller-supplied input is missing required fields.

    Surfaced to callers as a client-side rejection; the same input will
    always fail, so it is never retried.

    Attributes:
        message: Error description
        document_kind: Which model was being validated ("profile", "cover_letter")
        field_errors: One entry per failed field, e.g. "header.email: must not be blank"
    """

    def __init__(
        self,
        message: str,
        document_kind: Optional[str] = None,
        field_errors: Optional[List[str]] = None,
    ):
        self.message = message
        self.document_kind = document_kind
        self.field_errors = list(field_errors or [])

        parts = [message]

        if document_kind:
            parts.append(f"Document: {document_kind}")

        for error in self.field_errors:
            parts.append(f"  - {error}")

        super().__init__("\n".join(parts))
