"""
Command-line interface for Resume Extractor AI.

Runs the extraction pipeline once on a PDF/DOCX file or on literal text and
prints the result as JSON.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from resume_extractor_ai.agents.extractor_agent import run_extractor_agent
from resume_extractor_ai.schemas.extraction import ExtractionError, ExtractionRequest

app = typer.Typer(
    name="resume-extractor",
    help="Extract a structured resume record from a document with a single LLM call",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main():
    """Resume Extractor AI."""


@app.command()
def extract(
    file_path: Optional[Path] = typer.Argument(None, help="Resume document (.pdf or .docx)"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="Resume text; takes precedence over FILE"),
    compact: bool = typer.Option(False, "--compact", help="Print single-line JSON"),
):
    """Extract structured data from one resume."""
    request = ExtractionRequest(text=text, file_path=str(file_path) if file_path else None)

    with console.status("Extracting resume...", spinner="dots"):
        result = run_extractor_agent(request)

    payload = json.dumps(result.model_dump(), ensure_ascii=False, indent=None if compact else 2)
    if compact:
        typer.echo(payload)
    else:
        console.print_json(payload)

    if isinstance(result, ExtractionError):
        err_console.print(f"[red]Error:[/red] {result.error}")
        raise typer.Exit(1)
    if result.extraction_status == "failed":
        console.print("[yellow]Model output could not be decoded; see structured_data.error[/yellow]")


if __name__ == "__main__":
    app()
