from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from lintcheck.config import ConfigurationError
from lintcheck.contracts import Annotation, RunInputs, Verdict
from lintcheck.flows import (
    build_verdict,
    collect_findings,
    filter_findings,
    run_pipeline,
    to_annotations,
)
from lintcheck.tools.context import load_run_context
from lintcheck.tools.github_client import GitHubClient
from lintcheck.tools.jsonio import write_json

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _build_inputs(
    config: str, project: Optional[str], pattern: Optional[str], linter: str
) -> RunInputs:
    return RunInputs(config=config, project=project or None, pattern=pattern or None, linter=linter)


def _print_annotations(annotations: List[Annotation]) -> None:
    table = Table(title="Annotations")
    table.add_column("Level")
    table.add_column("Location")
    table.add_column("Message")
    for a in annotations:
        table.add_row(
            escape(a.annotation_level), escape(f"{a.path}:{a.start_line}"), escape(a.message)
        )
    console.print(table)


def _print_verdict(verdict: Verdict) -> None:
    color = "red" if verdict.conclusion == "failure" else "green"
    console.print(f"[{color}]{verdict.conclusion}[/{color}]: {verdict.summary}")


def _print_error(exc: Exception) -> None:
    console.print(f"[red]lintcheck:[/red] {escape(str(exc))}")


async def _run(inputs: RunInputs, token: str) -> Verdict:
    context = load_run_context()
    async with GitHubClient(token) as client:
        return await run_pipeline(inputs, context, client)


@app.command()
def run(
    config: str = typer.Option("pyproject.toml", "--config", envvar="INPUT_CONFIG"),
    project: Optional[str] = typer.Option(None, "--project", envvar="INPUT_PROJECT"),
    pattern: Optional[str] = typer.Option(None, "--pattern", envvar="INPUT_PATTERN"),
    linter: str = typer.Option("ruff", "--linter", envvar="INPUT_LINTER"),
    token: Optional[str] = typer.Option(
        None, "--token", envvar=["INPUT_TOKEN", "GITHUB_TOKEN"], show_envvar=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Lint the workspace and publish the results as a GitHub check run."""
    load_dotenv(find_dotenv(usecwd=True))
    _configure_logging(verbose)
    try:
        inputs = _build_inputs(config, project, pattern, linter)
        if not token:
            raise ConfigurationError("Please set token")
        verdict = asyncio.run(_run(inputs, token))
    except Exception as exc:
        _print_error(exc)
        raise typer.Exit(code=1) from exc
    _print_verdict(verdict)


@app.command()
def scan(
    config: str = typer.Option("pyproject.toml", "--config"),
    project: Optional[str] = typer.Option(None, "--project"),
    pattern: Optional[str] = typer.Option(None, "--pattern"),
    linter: str = typer.Option("ruff", "--linter"),
    changed_file: Optional[List[str]] = typer.Option(
        None, "--changed-file", help="Restrict the report to these files (repeatable)."
    ),
    output: Optional[Path] = typer.Option(None, "--output", help="Write findings as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Lint the workspace and print the annotations locally."""
    load_dotenv(find_dotenv(usecwd=True))
    _configure_logging(verbose)
    try:
        inputs = _build_inputs(config, project, pattern, linter)
        findings = collect_findings(inputs)
    except Exception as exc:
        _print_error(exc)
        raise typer.Exit(code=1) from exc

    relevant = filter_findings(findings, changed_file or None)
    annotations = to_annotations(relevant)
    if output:
        write_json(output, [f.model_dump() for f in relevant])
        console.print(f"Findings written: {output}")
    _print_annotations(annotations)
    _print_verdict(build_verdict(annotations))
