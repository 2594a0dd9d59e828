"""
Rendering Context

Responsibilities:
- Converts rendered HTML into PDF (WeasyPrint)
- Builds DOCX documents directly from the data model (python-docx)
- Orchestrates render requests and names their output
- Runs render requests on a bounded worker pool

Owns: Document bytes, output filenames, render concurrency
Never: Chooses or caches templates
"""

from dossier.contexts.rendering.exceptions import ConversionError, DocumentBuildError

__all__ = [
    "ConversionError",
    "DocumentBuildError",
]
