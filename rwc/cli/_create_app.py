"""Create the main Typer CLI app."""

import logging
from typing import Annotated

import click
import typer

from ..api.config.RwcConfig import RwcConfig
from ..api.count.CountError import CountError
from ..api.count.CountOptions import CountOptions
from ..api.count.run import run
from ..api.display.OutputFormat import OutputFormat, parse_format
from ..api.display.render_csv import render_csv
from ..api.display.render_table import render_table
from ..logging_config import setup_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="rwc",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Print counts of various things in FILES.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def count(
        files: Annotated[
            list[str] | None,
            typer.Argument(help="Files to read. If no paths are provided then read standard input."),
        ] = None,
        bytes_: Annotated[bool, typer.Option("--bytes", "-b", help="Print byte counts.")] = False,
        chars: Annotated[bool, typer.Option("--chars", "-c", help="Print utf-8 character counts.")] = False,
        words: Annotated[
            bool,
            typer.Option(
                "--words",
                "-w",
                help=(
                    "Print word counts. A word is a non-zero-length sequence of "
                    "non-whitespace characters delimited by ascii whitespace."
                ),
            ),
        ] = False,
        lines: Annotated[bool, typer.Option("--lines", "-l", help="Print newline counts.")] = False,
        show_totals: Annotated[
            bool, typer.Option("--show-totals", help="Include an extra row showing count totals.")
        ] = False,
        output_format: Annotated[
            str | None,
            typer.Option("--format", help="Output format: table or csv (default from config, else table)."),
        ] = None,
        files0_from: Annotated[
            str | None,
            typer.Option(
                "--files0-from",
                help=(
                    "Read input from the files specified by null separated paths in FILE. "
                    "If FILE is - then read null or newline separated paths from standard input."
                ),
                metavar="FILE",
            ),
        ] = None,
        verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Log debug details to stderr.")] = False,
    ) -> None:
        """Print counts of bytes, characters, words and lines in FILES."""
        try:
            config = RwcConfig.load()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None

        setup_logging(logging.DEBUG if verbose else config.log_level)

        try:
            fmt = parse_format(output_format or config.format)
            options = CountOptions(
                bytes=bytes_,
                chars=chars,
                words=words,
                lines=lines,
                show_totals=show_totals,
            )
            report = run(
                options,
                files0_from=files0_from,
                files=files or [],
                stdin=click.get_binary_stream("stdin"),
                max_workers=config.max_workers,
                buffer_size=config.buffer_size,
            )
        except CountError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(1) from None

        if fmt is OutputFormat.CSV:
            typer.echo(render_csv(report.results, report.options))
        else:
            render_table(report.results, report.options)

    return app
