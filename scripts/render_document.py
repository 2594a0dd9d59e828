#!/usr/bin/env python3
"""
Document Rendering CLI

Renders candidate profiles and cover letters from YAML/JSON request files.

Commands:
    pdf       - Render a request to PDF through an HTML template
    docx      - Build a request as a Word document
    templates - List the available template identifiers

Examples:\n

    render_document.py pdf data/requests/sarah.yaml                         # Template from file

    render_document.py pdf data/requests/sarah.yaml -t starter_template_001  # Override template

    render_document.py docx data/requests/john.yaml --output-dir outs/docx    # Custom output dir

    render_document.py templates --kind cover_letter                         # List templates
"""

import os
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from dossier.contexts.intake import DocumentKind, ValidationError, load_request
from dossier.contexts.rendering import ConversionError, DocumentBuildError
from dossier.contexts.rendering.logger import setup_rendering_logger
from dossier.contexts.rendering.pipeline import DocumentPipeline, RenderedDocument
from dossier.contexts.templating import (
    TemplateNotFoundError,
    TemplateRenderError,
    available_templates,
)
from dossier.utils import now, today

load_dotenv()
LOGS_PATH = Path(os.getenv("DOSSIER_LOGS_PATH", "outs/logs"))
OUTPUT_PATH = Path(os.getenv("DOSSIER_OUTPUT_PATH", "outs/results"))

# Client-side problems: the request itself is wrong
REQUEST_ERRORS = (FileNotFoundError, ValidationError, TemplateNotFoundError)
# Server-side problems: the request was fine but rendering failed
RENDER_ERRORS = (TemplateRenderError, ConversionError, DocumentBuildError)


class KindChoice(str, Enum):
    profile = DocumentKind.PROFILE.value
    cover_letter = DocumentKind.COVER_LETTER.value


app = typer.Typer(
    help="Render candidate profiles and cover letters to PDF or DOCX",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def write_output(rendered: RenderedDocument, output_dir: Optional[Path]) -> Path:
    """Write rendered bytes under output_dir (default: OUTPUT_PATH/<today>)."""
    target_dir = output_dir or OUTPUT_PATH / today()
    target_dir.mkdir(parents=True, exist_ok=True)
    output_path = target_dir / rendered.filename
    output_path.write_bytes(rendered.content)
    return output_path


def run_render(request_file: Path, output_dir: Optional[Path], verbose: bool, render) -> None:
    """Shared body of the pdf and docx commands."""
    log_file = setup_rendering_logger(LOGS_PATH / f"render_{now()}", verbose=verbose)

    try:
        request = load_request(request_file)
        rendered = render(request)
    except REQUEST_ERRORS as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    except RENDER_ERRORS as e:
        typer.secho(f"✗ Rendering failed: {e.message}", fg=typer.colors.RED, bold=True, err=True)
        typer.echo(f"  Log: {log_file}")
        raise typer.Exit(code=1)

    output_path = write_output(rendered, output_dir)

    typer.echo("")
    typer.secho("✓ Rendering succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {output_path}")
    typer.echo(f"  Size: {len(rendered.content)} bytes")
    if rendered.page_count is not None:
        typer.echo(f"  Pages: {rendered.page_count}")
    typer.echo(f"  Log: {log_file}")
    typer.echo("")


@app.command("pdf")
def pdf_command(
    request_file: Annotated[
        Path,
        typer.Argument(help="YAML/JSON request file with a profile or cover_letter"),
    ],
    template_id: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="Template identifier (overrides template_id in the request file)",
        ),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the PDF (default: $DOSSIER_OUTPUT_PATH/<today>)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
):
    """
    Render a request to PDF.

    Cover letter template identifiers are normalized, so "starter_template_001"
    resolves to "cover_letter_starter_001".

    Examples:\n

        $ render_document.py pdf data/requests/sarah.yaml

        $ render_document.py pdf data/requests/john.yaml -t modern_profile_template
    """
    typer.secho(f"\nRendering PDF: {request_file}", fg=typer.colors.BLUE, bold=True)

    def render(request):
        chosen = template_id or request.template_id
        if not chosen:
            raise ValidationError(
                "No template identifier given",
                document_kind=request.document.kind.value,
                field_errors=["template_id: pass --template or set it in the request file"],
            )
        return DocumentPipeline().render_pdf(request.document, chosen)

    run_render(request_file, output_dir, verbose, render)


@app.command("docx")
def docx_command(
    request_file: Annotated[
        Path,
        typer.Argument(help="YAML/JSON request file with a profile or cover_letter"),
    ],
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the DOCX (default: $DOSSIER_OUTPUT_PATH/<today>)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
):
    """
    Build a request as a Word document.

    Templates are not used; any template_id in the request file is ignored.
    """
    typer.secho(f"\nBuilding DOCX: {request_file}", fg=typer.colors.BLUE, bold=True)
    run_render(
        request_file,
        output_dir,
        verbose,
        lambda request: DocumentPipeline().render_docx(request.document),
    )


@app.command("templates")
def templates_command(
    kind: Annotated[
        Optional[KindChoice],
        typer.Option("--kind", "-k", help="Only list templates for this document kind"),
    ] = None,
):
    """List template identifiers, grouped by document kind."""
    kinds = [DocumentKind(kind.value)] if kind else list(DocumentKind)
    for document_kind in kinds:
        typer.secho(f"\n{document_kind.value}:", fg=typer.colors.BLUE, bold=True)
        for template_id in available_templates(document_kind):
            typer.echo(f"  {template_id}")
    typer.echo("")


if __name__ == "__main__":
    app()
