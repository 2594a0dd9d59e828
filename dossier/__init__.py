"""
dossier - candidate documents rendered to PDF and DOCX

A domain-driven document rendering system that takes structured candidate
profile or cover letter data and produces print-ready PDFs (HTML templates
converted by WeasyPrint) or editable Word documents (built paragraph by
paragraph with python-docx).

Architecture:
- Intake Context: Data model, input loading, validation and defaulting
- Templating Context: HTML template catalog, caching and slot binding
- Rendering Context: PDF conversion, DOCX construction and request orchestration
"""

__version__ = "0.1.0"
