"""Command-line interface for iscron.

Commands:
    iscron check: Validate one or more cron expressions
    iscron fields: Show the accepted range of every field
"""

from __future__ import annotations

import functools
import json
import logging
import sys
from enum import Enum
from typing import Annotated, Any, Callable, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from iscron.errors import IsCronError
from iscron.expression import is_cron
from iscron.fields import FIELD_SPECS
from iscron.options import CronOptions

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

app = typer.Typer(
    name="iscron",
    help="Check whether strings are valid cron expressions.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


class ExitCode(Enum):
    """Process exit codes."""

    SUCCESS = 0
    INVALID = 1
    USAGE_ERROR = 2


OUTPUT_FORMATS = ("console", "json")


# =============================================================================
# Error Handling
# =============================================================================


def error_boundary(func: F) -> F:
    """Convert iscron errors raised by a command into a message and exit code."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except IsCronError as e:
            typer.echo(typer.style(f"Error: {e.message}", fg="red"), err=True)
            if e.hint:
                typer.echo(typer.style(f"Hint: {e.hint}", fg="yellow"), err=True)
            raise typer.Exit(ExitCode.USAGE_ERROR.value)

    return wrapper  # type: ignore


# =============================================================================
# Helpers
# =============================================================================


def read_expressions(arguments: list[str]) -> list[str]:
    """Collect expressions from arguments, reading stdin for ``-``.

    Blank stdin lines are skipped.
    """
    expressions: list[str] = []
    for argument in arguments:
        if argument == "-":
            expressions.extend(line.strip() for line in sys.stdin if line.strip())
        else:
            expressions.append(argument)
    if not expressions:
        raise IsCronError("No expressions given", hint="Pass expressions as arguments or pipe them to '-'.")
    return expressions


def display_results_table(results: list[dict[str, Any]]) -> None:
    table = Table(title="Cron Expressions", show_header=True, header_style="bold magenta")

    table.add_column("Expression", style="cyan", no_wrap=True)
    table.add_column("Format", justify="center")
    table.add_column("Valid", justify="center")

    for result in results:
        fmt = "extended" if result["seconds"] else "standard"
        mark = "[green]✓ valid[/green]" if result["valid"] else "[red]✗ invalid[/red]"
        table.add_row(escape(result["expression"]), fmt, mark)

    console.print(table)


# =============================================================================
# Commands
# =============================================================================


@app.command(name="check")
@error_boundary
def check_cmd(
    expressions: Annotated[
        list[str],
        typer.Argument(help="Cron expressions to check (quote each one). Use '-' to read from stdin."),
    ],
    seconds: Annotated[
        bool,
        typer.Option("--seconds", "-s", help="Require the 6-field format with a seconds field"),
    ] = False,
    no_alias: Annotated[
        bool,
        typer.Option("--no-alias", help="Reject JAN-DEC and SUN-SAT aliases"),
    ] = False,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format (console, json)"),
    ] = "console",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print nothing; report through the exit code only"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log why each field is rejected"),
    ] = False,
) -> None:
    """Validate cron expressions.

    Exits with 0 when every expression is valid and 1 otherwise.

    Examples:
        iscron check "*/5 * * * *"
        iscron check --seconds "0 */5 * * * *"
        cat schedules.txt | iscron check -f json -
    """
    if format not in OUTPUT_FORMATS:
        raise IsCronError(f"Unknown format: {format}", hint="Use 'console' or 'json'.")

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = CronOptions(seconds=seconds, alias=not no_alias)
    results = [
        {"expression": expression, "valid": is_cron(expression, options), **options.to_dict()}
        for expression in read_expressions(expressions)
    ]
    all_valid = all(result["valid"] for result in results)
    logger.debug("Checked %d expression(s), all valid: %s", len(results), all_valid)

    if not quiet:
        if format == "json":
            typer.echo(json.dumps(results, indent=2))
        else:
            display_results_table(results)

    if not all_valid:
        raise typer.Exit(ExitCode.INVALID.value)


@app.command(name="fields")
def fields_cmd(
    seconds: Annotated[
        bool,
        typer.Option("--seconds", "-s", help="Include the seconds field"),
    ] = False,
) -> None:
    """Show the accepted values of every cron field."""
    table = Table(title="Cron Fields", show_header=True, header_style="bold")

    table.add_column("Field", style="cyan")
    table.add_column("Range", justify="right")
    table.add_column("?", justify="center")
    table.add_column("Aliases")

    for field in CronOptions(seconds=seconds).field_order:
        spec = FIELD_SPECS[field]
        aliases = f"{spec.aliases[0]}-{spec.aliases[-1]}" if spec.has_aliases else ""
        table.add_row(
            spec.name,
            f"{spec.min_value}-{spec.max_value}",
            "yes" if spec.allow_question_mark else "",
            aliases,
        )

    console.print(table)


def main() -> None:
    """Entry point for the console script."""
    app()
