"""
Command-line interface for the eitherkit demo.

Runs the invert pipeline on each given value and prints the outcome, one line
per value. Failures are data here: they are rendered, never raised.
"""

import logging
import sys
from typing import Annotated

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__
from .app.config import FAILURE_STYLE, PANEL_BORDER_STYLE, SUCCESS_STYLE
from .demo import describe, run_examples
from .settings import DemoSettings

console = Console()

app = typer.Typer(
    name="eitherkit",
    help="Chain fallible steps with the Either container",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        rprint(f"[bold blue]eitherkit[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


def _format_validation_errors(validation_error: ValidationError) -> str:
    """Format Pydantic validation errors as one bullet per error."""
    error_lines = []
    for error in validation_error.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        message = error["msg"]
        error_lines.append(f"  • {field}: {message}")

    return "\n".join(error_lines)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(message)s",
        datefmt="[%X]",
    )


@app.command()
def run(
    values: Annotated[
        list[float] | None,
        typer.Argument(
            help="Values to feed through (((1/x) - 2) ^ -1)",
            metavar="VALUES",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every pipeline outcome",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """
    Run the invert pipeline on each value.

    Examples:

        # The two classic examples: 0.25 succeeds, 0.5 divides by zero
        eitherkit run

        eitherkit run 0.25 0.5 4
    """
    try:
        if values:
            settings = DemoSettings(inputs=values, verbose=verbose)
        else:
            settings = DemoSettings(verbose=verbose)
    except ValidationError as e:
        console.print(f"[red]Invalid input:[/red]\n{_format_validation_errors(e)}")
        raise typer.Exit(1) from None

    _configure_logging(settings.verbose)

    for x, result in run_examples(settings.inputs):
        style = result.extract(lambda _: FAILURE_STYLE, lambda _: SUCCESS_STYLE)
        console.print(Text(f"{x}: {describe(result)}", style=style))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]eitherkit[/bold blue]\n\n"
            f"Version: [green]{__version__}[/green]\n"
            f"Python: [yellow]{sys.version.split()[0]}[/yellow]",
            title="About",
            border_style=PANEL_BORDER_STYLE,
        )
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
