#!/usr/bin/env python3
"""
Résumé Import CLI

Runs the PDF import pipeline on a file and prints the extracted record,
the same structure the builder uses to pre-fill its form.

Commands:
    parse      - Import a PDF and print or save the extracted record
    vocabulary - List the known-skill vocabulary by category

Examples:\n

    import_resume.py parse resume.pdf                          # Print JSON

    import_resume.py parse resume.pdf --format yaml            # Print YAML

    import_resume.py parse resume.pdf -o out.json --log-dir logs/  # Save and log

    import_resume.py vocabulary                                # Show vocabulary
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from quill.contexts.importing import DocumentLoadError, SkillVocabularyRegistry, import_resume_file
from quill.contexts.importing.logger import setup_importing_logger
from quill.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


app = typer.Typer(
    help="Import résumé PDFs into structured form data",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def render_record(data: dict, output_format: OutputFormat) -> str:
    """Serialize a record dict as JSON or YAML."""
    if output_format == OutputFormat.YAML:
        return OmegaConf.to_yaml(OmegaConf.create(data))
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


@app.command("parse")
def parse_command(
    pdf_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the résumé PDF",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the record to this file instead of stdout",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            case_sensitive=False,
        ),
    ] = OutputFormat.JSON,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Write a detailed session log here (default: no log file)",
        ),
    ] = None,
    log: Annotated[
        bool,
        typer.Option(
            "--log",
            help=f"Write a detailed session log under LOGS_PATH ({LOGS_PATH})",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show DEBUG output (extractor details) on the console when logging",
        ),
    ] = False,
):
    """
    Import a résumé PDF and output the extracted record.

    Examples:\n

        $ import_resume.py parse resume.pdf

        $ import_resume.py parse resume.pdf --format yaml -o resume.yaml
    """
    if log and log_dir is None:
        log_dir = LOGS_PATH / f"import_{now()}"

    if log_dir is not None:
        log_file = setup_importing_logger(
            log_dir,
            source=str(pdf_path),
            console_level="DEBUG" if verbose else "INFO",
        )
        typer.echo(f"Logging to {log_file}", err=True)

    try:
        record = import_resume_file(pdf_path)
    except DocumentLoadError as e:
        typer.secho(f"Import failed: {e.message}", fg=typer.colors.RED, err=True)
        typer.echo(
            "Make sure the PDF is not password-protected and is text-based (not scanned).",
            err=True,
        )
        raise typer.Exit(code=1)

    rendered = render_record(record.to_dict(), output_format)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        typer.secho(f"Wrote {output}", fg=typer.colors.GREEN, err=True)
    else:
        typer.echo(rendered, nl=False)

    if not record.has_minimal_data():
        typer.secho(
            "Limited information extracted; most fields will need to be filled in manually.",
            fg=typer.colors.YELLOW,
            err=True,
        )


@app.command("vocabulary")
def vocabulary_command(
    vocabulary_path: Annotated[
        Optional[Path],
        typer.Option(
            "--path",
            help="Vocabulary YAML (default: QUILL_SKILL_VOCABULARY_PATH or the bundled table)",
        ),
    ] = None,
):
    """List known skill vocabulary terms by category."""
    registry = SkillVocabularyRegistry(vocabulary_path)
    try:
        categories = registry.categories
    except (FileNotFoundError, ValueError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Vocabulary version {registry.version} ({registry.vocabulary_path})")
    for category, terms in categories.items():
        typer.echo(f"\n{category} ({len(terms)}):")
        typer.echo("  " + ", ".join(terms))


if __name__ == "__main__":
    app()
