"""Custom exceptions for the rendering context."""

from typing import Optional

from dossier.utils.text_processing import truncate_display

SNIPPET_LENGTH = 200


class ConversionError(Exception):
    """
    Exception raised when rendered markup cannot be converted to a PDF.

    A server-side failure: the same markup will fail again, so it is never
    retried. No partial PDF is returned.

    Attributes:
        message: Error description
        markup_snippet: Leading part of the markup that failed to convert
        original_error: The underlying converter error
    """

    def __init__(
        self,
        message: str,
        markup_snippet: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.original_error = original_error

        if markup_snippet:
            markup_snippet = truncate_display(markup_snippet, SNIPPET_LENGTH + len("..."))
        self.markup_snippet = markup_snippet

        parts = [message]

        if original_error:
            parts.append(f"\nOriginal error: {type(original_error).__name__}: {original_error}")

        if markup_snippet:
            parts.append(f"\nMarkup:\n{markup_snippet}")

        super().__init__("\n".join(parts))


class DocumentBuildError(Exception):
    """
    Exception raised when a DOCX document cannot be serialized.

    Missing optional fields never cause this; they are omitted from the
    document. This signals an I/O or serialization fault.

    Attributes:
        message: Error description
        document_name: Name of the person the document was built for
        original_error: The underlying serialization error
    """

    def __init__(
        self,
        message: str,
        document_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.document_name = document_name
        self.original_error = original_error

        parts = [message]

        if document_name:
            parts.append(f"Document: {document_name}")

        if original_error:
            parts.append(f"\nOriginal error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
