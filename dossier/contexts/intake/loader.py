"""
Render request loading for the Intake context.

Reads YAML or JSON request files with OmegaConf. A request file holds either a
`profile:` or a `cover_letter:` mapping and, for PDF output, a `template_id`:

    template_id: modern_profile_template
    profile:
      name: John Doe
      email: john.doe@example.com
      skills: [Java, AWS]
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from omegaconf import OmegaConf

from dossier.contexts.intake.document_data_structures import (
    MODEL_BY_KIND,
    Document,
    DocumentKind,
)
from dossier.contexts.intake.exceptions import ValidationError
from dossier.contexts.intake.logger import _log_debug, _log_info


@dataclass(frozen=True)
class RenderRequest:
    """
    A parsed render request.

    Attributes:
        document: Profile or cover letter to render
        template_id: Template identifier for PDF output (None when absent)
    """

    document: Document
    template_id: Optional[str] = None


def request_from_dict(data: Dict[str, Any]) -> RenderRequest:
    """
    Build a RenderRequest from plain data.

    Args:
        data: Mapping with exactly one of the keys "profile" / "cover_letter"

    Raises:
        ValidationError: If neither or both document keys are present
    """
    present = [kind for kind in DocumentKind if data.get(kind.value) is not None]
    if len(present) != 1:
        raise ValidationError(
            "Request must contain exactly one of: "
            + ", ".join(kind.value for kind in DocumentKind),
            field_errors=[f"found: {[kind.value for kind in present] or 'none'}"],
        )

    kind = present[0]
    _log_debug(f"Request carries a {kind.value} document")
    document = MODEL_BY_KIND[kind].from_dict(data[kind.value])
    template_id = data.get("template_id")
    return RenderRequest(
        document=document,
        template_id=str(template_id) if template_id is not None else None,
    )


def load_request(path: Path) -> RenderRequest:
    """
    Load a render request from a YAML or JSON file.

    Args:
        path: Request file

    Returns:
        Parsed RenderRequest

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file has no recognizable document
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Request file not found: {path}")

    config = OmegaConf.load(path)
    # "${...}" in free text is content, never an interpolation
    data = OmegaConf.to_container(config, resolve=False)
    if not isinstance(data, dict):
        raise ValidationError(f"Request file must contain a mapping: {path}")

    request = request_from_dict(data)
    _log_info(f"Loaded {request.document.kind.value} request for {request.document.name} from {path}")
    return request
