"""Command-line interface for Repo Buddy"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console

from . import __version__
from .config import load_config
from .core import ProgressReporter, ProjectAnalyzer, SilentReporter
from .exceptions import RepoBuddyError
from .formatters import get_formatter
from .logging_config import setup_logging

app = typer.Typer(
    name="repo-buddy",
    help="Repo Buddy - Multi-language repository convention profiler",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(stderr=True)

STDOUT_MARKER = "-"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"repo-buddy {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the repository to analyze",
        exists=False,
        file_okay=False,
        dir_okay=True,
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Report file to write (default: CLAUDE.md, '-' for stdout)",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Report format: markdown (default) or json",
    ),
    with_llm: bool = typer.Option(
        False,
        "--with-llm",
        help="Add a Gemini-written summary (needs GEMINI_API_KEY)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Number of worker threads (default: CPU count, max 8)",
        min=1,
    ),
    deterministic: bool = typer.Option(
        False,
        "--deterministic",
        help="Resolve first-seen conventions by file path instead of arrival order",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
        exists=False,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors and hide progress",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Profile the conventions of a repository and write a guideline report.

    [bold cyan]Examples:[/bold cyan]

      repo-buddy

      repo-buddy ./my-service -o GUIDELINE.md

      repo-buddy ./my-service --format json -o -

      repo-buddy ./my-service --with-llm --deterministic
    """
    load_dotenv(find_dotenv(usecwd=True))
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = load_config(
            config_file=config,
            output=output,
            output_format=fmt,
            with_llm=with_llm or None,
            workers=workers,
            deterministic=deterministic or None,
            verbose=verbose,
            quiet=quiet,
        )

        analyzer = ProjectAnalyzer(path, settings)
        reporter = SilentReporter() if settings.verbosity == "quiet" else ProgressReporter(console)
        result = reporter.run(analyzer.analyze)

        formatter = get_formatter(settings.output_format)
        if settings.output == STDOUT_MARKER:
            formatter.render(result)
            return

        Path(settings.output).write_text(formatter.format(result), encoding="utf-8")
    except RepoBuddyError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot write report: {e}")
        raise typer.Exit(1)

    if settings.verbosity != "quiet":
        parsed = sum(result.language_counts.values())
        console.print(
            f"[green]Report written to {settings.output}[/green] "
            f"({result.stats.files_visited} files visited, {parsed} parsed)"
        )


if __name__ == "__main__":
    app()
