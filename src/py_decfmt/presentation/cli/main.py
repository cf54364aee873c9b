"""Typer CLI for formatting amounts.

Commands:
- format VALUE...  one formatted amount per line, or a JSON array with --json
- version          package version

Negative amounts go after ``--`` (``py_decfmt format -- -1.005``) so they are
not read as options. Errors are handled by cli(): domain/validation errors and
usage errors exit with 2, anything unexpected with 1. Log lines go to stderr so
stdout carries only the formatted output.
"""
from __future__ import annotations

import sys

import click
import typer
from typer import Argument, Option, Typer

from py_decfmt import __version__
from py_decfmt.application.use_cases.format_amount import FormatAmounts
from py_decfmt.domain.errors import DomainError, ValidationError
from py_decfmt.infrastructure.logging.config import configure_logging
from py_decfmt.sdk.json import to_json

app: Typer = Typer(help="Format exact decimal amounts for display.", add_completion=False)


@app.command("format")
def format_cmd(
    values: list[str] = Argument(..., help="Decimal literals such as 1.005 or 0.0000328103."),
    json_output: bool = Option(False, "--json", help="Output JSON instead of one line per amount."),
    decimal_point: str | None = Option(
        None, "--decimal-point", help="Separator to print instead of '.' (defaults to DECIMAL_POINT)."
    ),
) -> None:
    """Format each VALUE: two decimals from 1 upward, two significant digits below 1.

    Errors:
        InvalidLiteral on the first malformed VALUE (nothing is printed).
    """
    dtos = FormatAmounts(decimal_point=decimal_point)(values)
    if json_output:
        typer.echo(to_json(dtos))
        return
    for dto in dtos:
        typer.echo(dto.text)


@app.command("version")
def version_cmd() -> None:
    """Print package version."""
    typer.echo(__version__)


def cli(argv: list[str] | None = None) -> int:
    """Run the Typer application with top-level error handling.

    Returns process-style exit code integer.
    """
    args = argv if argv is not None else sys.argv[1:]
    try:
        configure_logging(stream=sys.stderr)
        result = app(args=args, prog_name="py_decfmt", standalone_mode=False)
        return result if isinstance(result, int) else 0
    except (ValidationError, DomainError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    except click.exceptions.ClickException as exc:
        print(f"[ERROR] {exc.format_message()}", file=sys.stderr)
        return exc.exit_code
    except click.exceptions.Abort:
        print("[ERROR] aborted", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"[ERROR] unexpected: {exc}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Console-script entry point."""
    return cli(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
