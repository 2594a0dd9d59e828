"""
Shared utilities for dossier.

Common functionality used across contexts:
- Markup flattening for plain-text document paths
- Text helpers (filenames, bullets)
- Logger configuration
- Timestamps
"""

from dossier.utils.markup_parsing_tools import to_plaintext
from dossier.utils.text_processing import filename_stem
from dossier.utils.timestamp import now, today

__all__ = ["filename_stem", "now", "to_plaintext", "today"]
