"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
import webbrowser
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from resume_studio.clients.factory import create_ai_provider, get_ai_provider, set_ai_provider
from resume_studio.config import load_config
from resume_studio.errors import AIError, ExportFailure, IngestionFailure
from resume_studio.export.engine import ExportEngine, ExportStatus
from resume_studio.models.resume import EXAMPLE_RESUME, ResumeData
from resume_studio.pipeline.importer import ResumeImporter
from resume_studio.store.resume_store import ResumeStore, create_store
from resume_studio.templates.preview import LivePreview
from resume_studio.templates.registry import default_registry

app = typer.Typer(
    name="resume-studio",
    help="Resume builder with AI import and PDF export",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, rich_tracebacks=True)],
        )


def _load_resume(file: Path | None, example: bool) -> ResumeData:
    if example:
        return EXAMPLE_RESUME.model_copy(deep=True)
    if file is None:
        console.print("[red]Pass a resume JSON file or --example[/red]")
        raise typer.Exit(1)
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)
    try:
        return ResumeData.model_validate_json(file.read_text(encoding="utf-8"))
    except ValidationError as e:
        console.print(f"[red]Not a valid resume document: {file}[/red]\n{e}")
        raise typer.Exit(1)


def _mounted_preview(data: ResumeData, template: str, width_px: int) -> LivePreview:
    registry = default_registry()
    if template not in registry:
        console.print(f"[red]Unknown template: {template}[/red] (available: {', '.join(registry.ids())})")
        raise typer.Exit(1)
    preview = LivePreview(ResumeStore(data), registry, template, width_px=width_px)
    preview.mount()
    return preview


@app.command("import")
def import_resume(
    file: Path = typer.Argument(help="Resume file (PDF/DOC/DOCX/TXT/MD)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output JSON path"),
    provider: str = typer.Option(None, "--provider", "-p", help="anthropic, openai or gemini"),
) -> None:
    """Extract a structured resume from a file with the AI provider."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)

    config = load_config()
    try:
        if provider:
            set_ai_provider(create_ai_provider(replace(config.ai, provider=provider)))
        get_ai_provider(config.ai)
    except (ValueError, AIError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    store = create_store(config.editor)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Reading file...", total=None)

        def on_status(message: str) -> None:
            progress.update(task, description=message)

        importer = ResumeImporter(store, config=config.importer, on_status=on_status)
        try:
            data = asyncio.run(importer.import_file(file))
        except IngestionFailure as e:
            console.print(f"[red]{e.user_message}[/red]")
            console.print(f"[dim]{e}[/dim]")
            raise typer.Exit(1)

    if output is None:
        output = file.with_suffix(".json")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(data.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    console.print(f"[green]Resume imported: {output}[/green]")
    console.print(
        f"  {data.personal_info.full_name or '(no name)'}: "
        f"{len(data.experience)} experience, {len(data.education)} education, "
        f"{len(data.skills)} skills"
    )


@app.command()
def export(
    file: Path = typer.Argument(None, help="Resume JSON file"),
    example: bool = typer.Option(False, "--example", help="Export the built-in example resume"),
    template: str = typer.Option(None, "--template", "-t", help="Template id"),
    strategy: str = typer.Option(None, "--strategy", help="rasterize or print"),
    pagination: str = typer.Option(None, "--pagination", help="tile or fit_one_page"),
    page_format: str = typer.Option(None, "--page-format", help="letter or a4"),
    output: Path = typer.Option(None, "--output", "-o", help="PDF file name or path"),
) -> None:
    """Render a resume and export it as PDF (or hand it to the browser's print dialog)."""
    config = load_config()
    overrides = {
        key: value
        for key, value in (
            ("strategy", strategy),
            ("pagination", pagination),
            ("page_format", page_format),
        )
        if value
    }
    try:
        export_config = replace(config.export, **overrides)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    data = _load_resume(file, example)
    preview = _mounted_preview(
        data, template or config.editor.default_template, export_config.preview_width_px
    )

    def on_status(status: ExportStatus) -> None:
        if status is ExportStatus.STARTED:
            console.print("[dim]Generating...[/dim]")

    engine = ExportEngine(preview, export_config, on_status=on_status)
    filename = output.name if output else None
    output_dir = output.parent if output else Path.cwd()
    try:
        result = asyncio.run(engine.export(filename=filename, output_dir=output_dir))
    except ExportFailure as e:
        console.print(f"[red]{e.user_message}[/red]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(1)

    if result.strategy == "print":
        console.print(f"[green]Opened print view: {result.path}[/green]")
    else:
        console.print(f"[green]PDF saved: {result.path}[/green] ({result.pages} page(s))")


@app.command()
def preview(
    file: Path = typer.Argument(None, help="Resume JSON file"),
    example: bool = typer.Option(False, "--example", help="Preview the built-in example resume"),
    template: str = typer.Option(None, "--template", "-t", help="Template id"),
    output: Path = typer.Option(None, "--output", "-o", help="Output HTML path"),
    open_browser: bool = typer.Option(False, "--open", help="Open the HTML in the browser"),
) -> None:
    """Write the rendered resume as a standalone HTML page."""
    config = load_config()
    data = _load_resume(file, example)
    live = _mounted_preview(
        data, template or config.editor.default_template, config.export.preview_width_px
    )
    snapshot = live.snapshot()

    if output is None:
        output = file.with_suffix(".html") if file else Path("resume-preview.html")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(snapshot.document_html(), encoding="utf-8")
    console.print(f"[green]HTML written: {output}[/green]")
    if open_browser:
        webbrowser.open(output.resolve().as_uri())


@app.command()
def templates() -> None:
    """List the available resume templates."""
    table = Table(title="Templates")
    table.add_column("id", style="bold", no_wrap=True)
    table.add_column("name")
    table.add_column("thumbnail", style="dim", overflow="fold")
    for entry in default_registry():
        table.add_row(entry.id, entry.name, entry.thumbnail)
    console.print(table)


@app.command()
def example(
    output: Path = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
) -> None:
    """Print the built-in example resume as JSON."""
    text = EXAMPLE_RESUME.model_dump_json(by_alias=True, indent=2)
    if output is None:
        console.print_json(text)
        return
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Example written: {output}[/green]")


if __name__ == "__main__":
    app()
