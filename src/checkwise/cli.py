from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from checkwise.config import ConfigError, get_config, load_config
from checkwise.tester import Tester
from checkwise.verbose import configure_logging

app = typer.Typer(name="checkwise", help="Run checkwise checkers from the command line")


class CliHost:
    """Host that prints the failure to stderr and exits with status 1."""

    def __init__(self) -> None:
        self.failures: list[str] = []

    def report_failure(self, message: str) -> None:
        self.failures.append(message)
        typer.echo(message, err=True)

    def terminate(self) -> NoReturn:
        raise typer.Exit(1)


def _tester(config: str | None) -> Tester:
    settings = get_config()
    if config is not None:
        try:
            settings = load_config(Path(config))
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2)
    configure_logging(settings)
    return Tester(CliHost(), config=settings)


def _read_text(path: str) -> str:
    try:
        return Path(path).read_text()
    except OSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)


@app.command("diff-lines")
def diff_lines(
    expected: str = typer.Argument(help="File with the expected lines"),
    got: str = typer.Argument(help="File with the produced lines"),
    config: str | None = typer.Option(None, help="Path to checkwise YAML config"),
):
    """Compare two files line by line and print an index-aligned diff."""
    tester = _tester(config)
    tester.check_string_slices_equal(_read_text(expected).splitlines(), _read_text(got).splitlines())
    typer.echo("Lines equal")


@app.command("diff-text")
def diff_text(
    expected: str = typer.Argument(help="File with the expected text"),
    got: str = typer.Argument(help="File with the produced text"),
    no_color: bool = typer.Option(False, "--no-color", help="Mark changes with {+ +} and [- -] instead of color"),
    config: str | None = typer.Option(None, help="Path to checkwise YAML config"),
):
    """Compare two text files and print a character-level diff."""
    tester = _tester(config)
    if no_color:
        settings = tester.settings.model_copy(deep=True)
        settings.diff.color = False
        tester = Tester(tester.host, config=settings)
    tester.check_text_equal(_read_text(expected), _read_text(got))
    typer.echo("Text equal")


@app.command("files-equal")
def files_equal(
    file1: str = typer.Argument(help="First file"),
    file2: str = typer.Argument(help="Second file"),
    config: str | None = typer.Option(None, help="Path to checkwise YAML config"),
):
    """Check two files have identical bytes."""
    _tester(config).check_files_equal(file1, file2)
    typer.echo("Files equal")


@app.command("file-exists")
def file_exists(
    path: str = typer.Argument(help="File that must exist"),
    config: str | None = typer.Option(None, help="Path to checkwise YAML config"),
):
    """Check a path names an existing regular file."""
    _tester(config).check_file_exists(path)
    typer.echo(f"{path} exists")


@app.command()
def schema(
    out: str = typer.Option("checkwise.schema.json", help="Output path for the config JSON Schema"),
    doc: str | None = typer.Option(None, help="Optional output path for Markdown docs"),
):
    """Generate JSON Schema (and optionally docs) for the config file."""
    from checkwise.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
    if doc is not None:
        doc_path = Path(doc)
        write_schema_doc(doc_path)
        typer.echo(f"Wrote docs: {doc_path}")
