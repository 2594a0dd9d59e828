"""
PDF Rendering Module

Converts rendered HTML into a paginated PDF using WeasyPrint.
"""

import io
from dataclasses import dataclass

from weasyprint import HTML, default_url_fetcher

from dossier.contexts.rendering.exceptions import ConversionError
from dossier.contexts.rendering.logger import _log_debug, _log_warning

# Only inline resources; rendered markup never triggers network or file access
ALLOWED_URL_SCHEMES = ("data:",)


@dataclass(frozen=True)
class VisualDocument:
    """
    Result of PDF conversion.

    Attributes:
        content: PDF bytes
        page_count: Number of laid-out pages
    """

    content: bytes
    page_count: int


def inline_only_url_fetcher(url: str, *args, **kwargs) -> dict:
    """
    WeasyPrint URL fetcher that refuses everything but data: URLs.

    WeasyPrint logs refused resources and continues laying out the document.
    """
    if not url.startswith(ALLOWED_URL_SCHEMES):
        _log_warning(f"Refusing to fetch external resource: {url}")
        raise ValueError(f"External resources are not allowed: {url}")
    return default_url_fetcher(url, *args, **kwargs)


def render_visual_document(markup: str) -> VisualDocument:
    """
    Convert HTML markup into a PDF.

    The output buffer is created, written and closed inside this call, on
    success and on failure alike.

    Args:
        markup: Complete HTML document (with its <style> rules)

    Returns:
        VisualDocument with PDF bytes and page count

    Raises:
        ConversionError: If the markup is empty or WeasyPrint cannot lay it out
    """
    if markup is None or not markup.strip():
        raise ConversionError("Markup is empty; nothing to convert", markup_snippet=markup)

    try:
        document = HTML(string=markup, url_fetcher=inline_only_url_fetcher).render()
        _log_debug(f"Laid out {len(document.pages)} pages")

        with io.BytesIO() as buffer:
            document.write_pdf(target=buffer)
            content = buffer.getvalue()
    except Exception as e:
        raise ConversionError(
            "Failed to convert markup to PDF", markup_snippet=markup, original_error=e
        ) from e

    if not content or not document.pages:
        raise ConversionError("Converter produced an empty PDF", markup_snippet=markup)

    return VisualDocument(content=content, page_count=len(document.pages))


def to_visual_document(markup: str) -> bytes:
    """
    Convert HTML markup into PDF bytes.

    Raises:
        ConversionError: If the markup cannot be converted
    """
    return render_visual_document(markup).content
