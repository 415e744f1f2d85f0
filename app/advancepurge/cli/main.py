"""Main CLI application entry point.

Defines the Typer application, reads the configuration and runs the
purge of every category.

Exit codes:
    0: Purge completed (individual deletion failures are reported only).
    2: The config file could not be opened.
    3: The config file could not be parsed.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from advancepurge import __version__
from advancepurge.core.config import ConfigError, ConfigParseError, load_config
from advancepurge.purge.models import CategoryReport
from advancepurge.purge.operator import PurgeOperator
from advancepurge.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)

EXIT_CONFIG_OPEN = 2
EXIT_CONFIG_PARSE = 3

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "-?", "--help"],
    # Unrecognized flags are ignored rather than rejected
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}

app = typer.Typer(
    name="advancepurge",
    help="Purge unneeded locales, manual pages, help files and documentation.",
    no_args_is_help=False,
    add_completion=False,
    rich_markup_mode="rich",
    context_settings=CONTEXT_SETTINGS,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"advancepurge version {__version__}")
        raise typer.Exit()


@app.command(context_settings=CONTEXT_SETTINGS)
def main(
    ctx: typer.Context,
    local: Annotated[
        bool,
        typer.Option(
            "--local",
            "-l",
            help="Purge the /usr/local/share directories.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print every setting read and every directory deleted.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to read (default: /etc/advancepurge.conf).",
            dir_okay=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be deleted.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """advancepurge - Reclaim disk space from unneeded installed data.

    Deletes translations, manual pages, print system templates, help
    files and documentation, keeping the locales listed in the config.
    """
    if ctx.args:
        logger.debug("Ignoring unrecognized arguments: %s", ctx.args)

    try:
        config = load_config(config_path, verbose=verbose)
    except ConfigParseError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_PARSE) from e
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_OPEN) from e

    operator = PurgeOperator(config, local=local, verbose=verbose, dry_run=dry_run)
    reports = operator.run()

    if verbose or dry_run:
        _print_reports(reports, dry_run)
    _print_summary(reports, dry_run)


# === Private helper functions ===


def _print_reports(reports: list[CategoryReport], dry_run: bool) -> None:
    """Display one row per category."""
    title = "Purge Results (dry-run)" if dry_run else "Purge Results"
    table = Table(title=title, show_lines=False, header_style="bold_header", border_style="border")
    table.add_column("Category", style="bold")
    table.add_column("Mode", width=8)
    table.add_column("Deleted", justify="right", width=8)
    table.add_column("Failed", justify="right", width=8)
    table.add_column("Details", style="dim")

    for report in reports:
        if report.skipped:
            details = "[kept]disabled[/]"
        elif report.errors:
            details = escape(report.errors[0])
        else:
            details = escape(", ".join(report.targets))
        failed = report.failed_count + len(report.errors)
        table.add_row(
            report.category.value,
            report.mode.value,
            f"[deleted]{report.deleted_count}[/]" if report.deleted_count else "0",
            f"[error]{failed}[/]" if failed else "0",
            details,
        )

    console.print(table)


def _print_summary(reports: list[CategoryReport], dry_run: bool) -> None:
    """Display a one-line outcome of the whole run."""
    deleted = sum(r.deleted_count for r in reports)
    failed = sum(r.failed_count + len(r.errors) for r in reports)

    if dry_run:
        print_info(f"Dry-run: {deleted} directory tree(s) would be deleted.")
    elif failed:
        print_warning(f"{deleted} directory tree(s) deleted, {failed} failure(s)")
    else:
        print_success(f"Purge complete: {deleted} directory tree(s) deleted.")


if __name__ == "__main__":
    app()
