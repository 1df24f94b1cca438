"""CLI for requireflow requirements analysis."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from requireflow import __version__
from requireflow.config import GlobalConfig, get_config_path, load_global_config, write_global_config
from requireflow.input import InvalidRequestError, parse_request, parse_submission
from requireflow.io import read_json, read_jsonl
from requireflow.log import setup_logging
from requireflow.pipeline import Pipeline, PipelineConfig

SCHEMA_PATH = Path(__file__).parent / "schemas" / "analysis_request.schema.json"

app = typer.Typer(
    name="requireflow",
    help="Rule-based requirements analysis for questionnaire responses.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"requireflow version {__version__}")
        raise typer.Exit()


def _pipeline_from_config(config: GlobalConfig) -> Pipeline:
    return Pipeline(
        PipelineConfig(
            document_version=config.document_version,
            company_name=config.company_name,
        )
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", envvar="REQUIREFLOW_LOG_LEVEL", help="Log level"),
    ] = None,
) -> None:
    """requireflow: Rule-based requirements analysis for questionnaire responses."""
    setup_logging(log_level or load_global_config().log_level)


@app.command()
def init(
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write the default global configuration.

    Creates ~/.config/requireflow/config.yaml (or $REQUIREFLOW_HOME/config.yaml).
    """
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Warning:[/yellow] Config already exists at {config_path}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    write_global_config(GlobalConfig(), config_path)
    console.print(f"[green]✓[/green] Created config at {config_path}")


@app.command()
def run(
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help="Input JSONL file of analysis requests"),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output JSONL file path"),
    ],
    diagnostics: Annotated[
        Path | None,
        typer.Option("--diagnostics", "-d", help="Diagnostics output JSONL path"),
    ] = None,
) -> None:
    """Analyze requests and emit one AnalysisResult per line."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    pipeline = _pipeline_from_config(load_global_config())

    console.print(f"[bold]requireflow[/bold] v{__version__}")
    console.print(f"  Input: {input_path}")
    console.print(f"  Output: {output_path}")
    if diagnostics:
        console.print(f"  Diagnostics: {diagnostics}")

    def report_bad_line(line_num: int, error: json.JSONDecodeError) -> None:
        console.print(f"\n[yellow]Warning:[/yellow] Invalid JSON on line {line_num}: {error}")

    analyses_written = 0
    invalid_count = 0
    requirements_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Analyzing requests...", total=None)

        with open(output_path, "w") as f_out:
            f_diag = open(diagnostics, "w") if diagnostics else None

            try:
                for line_num, payload in read_jsonl(input_path, on_error=report_bad_line):
                    try:
                        request = parse_request(payload)
                    except InvalidRequestError as e:
                        console.print(f"\n[yellow]Warning:[/yellow] Line {line_num}: {e}")
                        invalid_count += 1
                        continue

                    result = pipeline.process(request)

                    f_out.write(result.analysis.model_dump_json(by_alias=True) + "\n")
                    analyses_written += 1
                    requirements_count += len(result.analysis.requirements)

                    if f_diag:
                        f_diag.write(result.diagnostics.model_dump_json() + "\n")

                    progress.update(task, description=f"Analyzed {line_num} requests...")
            finally:
                if f_diag:
                    f_diag.close()

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Analyses written: {analyses_written}")
    console.print(f"  Requirements extracted: {requirements_count}")
    if invalid_count:
        console.print(f"  [red]Invalid requests:[/red] {invalid_count}")


@app.command()
def brd(
    input_path: Annotated[
        Path,
        typer.Option("--in", "-i", help='JSON file with {"form": ..., "sessions": [...]}'),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output Markdown file path"),
    ],
) -> None:
    """Render a Markdown BRD for a form and its client sessions."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] Input file not found: {input_path}")
        raise typer.Exit(1)

    try:
        form, sessions = parse_submission(read_json(input_path))
    except (InvalidRequestError, json.JSONDecodeError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    pipeline = _pipeline_from_config(load_global_config())
    result, document = pipeline.render_brd(form, sessions)

    output_path.write_text(document)

    console.print(f"[green]✓[/green] Wrote {output_path}")
    console.print(f"  Sessions: {len(sessions)}")
    console.print(f"  Requirements: {len(result.analysis.requirements)}")
    if result.diagnostics.warnings:
        console.print(
            f"  [yellow]Skipped responses:[/yellow] {len(result.diagnostics.warnings)}"
        )


@app.command()
def validate(
    request_path: Annotated[
        Path,
        typer.Argument(help="Path to an analysis request JSON file"),
    ],
    schema_path: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="Path to the schema file"),
    ] = None,
) -> None:
    """Validate an analysis request against its schema."""
    import jsonschema

    if not request_path.exists():
        console.print(f"[red]Error:[/red] Request file not found: {request_path}")
        raise typer.Exit(1)

    if schema_path is None:
        schema_path = SCHEMA_PATH

    if not schema_path.exists():
        console.print(f"[red]Error:[/red] Schema file not found: {schema_path}")
        raise typer.Exit(1)

    request = read_json(request_path)
    schema = read_json(schema_path)

    try:
        jsonschema.validate(request, schema)
        console.print(f"[green]Valid:[/green] {request_path}")
    except jsonschema.ValidationError as e:
        console.print(f"[red]Invalid:[/red] {e.message}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
