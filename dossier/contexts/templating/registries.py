"""
Templating Registries

Loads and caches the HTML templates listed in the template catalog.
"""

import math
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    select_autoescape,
)

from dossier.contexts.intake.document_data_structures import DocumentKind
from dossier.contexts.templating.catalog import TEMPLATE_CATALOG, available_templates
from dossier.contexts.templating.exceptions import TemplateNotFoundError
from dossier.contexts.templating.logger import _log_debug, _log_info
from dossier.utils.markup_parsing_tools import markup_lines, strip_bullet, to_plaintext

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("DOSSIER_TEMPLATES_PATH", Path(__file__).resolve().parent / "templates")
)
TEMPLATE_CACHE_TTL_S = float(os.getenv("DOSSIER_TEMPLATE_CACHE_TTL_S", "3600"))

TEMPLATE_FILENAME = "template.html.jinja"


@dataclass(frozen=True)
class TemplateTable:
    """
    Read-only snapshot of compiled templates.

    Never mutated after construction; reloads build a new table and swap the
    registry's reference to it.

    Attributes:
        templates: Template identifier -> compiled template
        loaded_at: Clock reading when the table was built
    """

    templates: Mapping[str, Template] = field(default_factory=lambda: MappingProxyType({}))
    loaded_at: float = -math.inf


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 HTML templates.

    Templates are stored in {templates_path}/{template_id}/template.html.jinja.
    Only identifiers present in the catalog are ever resolved, so caller input
    never reaches the filesystem loader directly.

    Lookups read the current TemplateTable without locking. Once the table is
    older than the TTL the next lookup rebuilds it and swaps the reference;
    concurrent readers keep using whichever table they already hold.
    """

    def __init__(
        self,
        templates_path: Optional[Path] = None,
        ttl_s: Optional[float] = TEMPLATE_CACHE_TTL_S,
        catalog: Mapping[str, DocumentKind] = TEMPLATE_CATALOG,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for template directories. Defaults to
                            DOSSIER_TEMPLATES_PATH or the packaged templates
            ttl_s: Seconds before the table is rebuilt (None never expires)
            catalog: Allowed template identifiers
            clock: Monotonic clock, replaceable in tests
        """
        self.templates_path = Path(templates_path or TEMPLATES_PATH)
        self.ttl_s = ttl_s
        self.catalog = catalog
        self._clock = clock
        self._table = TemplateTable()

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(enabled_extensions=("html", "jinja"), default=True),
            trim_blocks=True,
            lstrip_blocks=True,
            # The registry's table is the only cache
            cache_size=0,
        )
        # Free-text fields are flattened to escaped plain text, never injected as HTML
        self.env.filters["plaintext"] = to_plaintext
        self.env.filters["plain_lines"] = markup_lines
        self.env.filters["bullet_text"] = strip_bullet

    def _is_stale(self, table: TemplateTable) -> bool:
        if not table.templates:
            return True
        if self.ttl_s is None:
            return False
        return self._clock() - table.loaded_at >= self.ttl_s

    def warm_up(self) -> TemplateTable:
        """
        Load every catalog template into a new table and swap it in.

        Returns:
            The newly installed table

        Raises:
            TemplateNotFoundError: If a catalog entry has no template file
            TemplateSyntaxError: If a template has Jinja2 syntax errors
        """
        templates = {}
        for template_id in self.catalog:
            template_path = f"{template_id}/{TEMPLATE_FILENAME}"
            try:
                templates[template_id] = self.env.get_template(template_path)
            except TemplateNotFound as e:
                raise TemplateNotFoundError(
                    f"Template file missing for catalog entry at "
                    f"{self.get_template_path(template_id)}",
                    template_id=template_id,
                ) from e

        table = TemplateTable(templates=MappingProxyType(templates), loaded_at=self._clock())
        self._table = table
        _log_info(f"Loaded {len(templates)} templates from {self.templates_path}")
        return table

    def get_template(self, template_id: str, kind: Optional[DocumentKind] = None) -> Template:
        """
        Resolve a template identifier to a compiled template.

        Args:
            template_id: Catalog identifier (e.g., 'modern_profile_template')
            kind: Model kind the template must bind (None accepts any)

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFoundError: If the identifier is unknown or binds another kind
        """
        registered_kind = self.catalog.get(template_id) if isinstance(template_id, str) else None
        if registered_kind is None or (kind is not None and registered_kind is not kind):
            raise TemplateNotFoundError(
                "Unknown template identifier",
                template_id=template_id,
                available=self.available(kind),
            )

        table = self._table
        if self._is_stale(table):
            _log_debug("Template table is stale, reloading")
            table = self.warm_up()

        return table.templates[template_id]

    def available(self, kind: Optional[DocumentKind] = None) -> List[str]:
        """Identifiers this registry resolves, optionally for one model kind."""
        return available_templates(kind, self.catalog)

    def get_template_path(self, template_id: str) -> Path:
        """Get the file path for a template identifier."""
        return self.templates_path / template_id / TEMPLATE_FILENAME

    def clear_cache(self) -> None:
        """Drop the current table; the next lookup reloads."""
        self._table = TemplateTable()

    def is_cached(self, template_id: str) -> bool:
        """Check if a template is in the current table."""
        return template_id in self._table.templates
