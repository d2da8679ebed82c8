"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import click

from graphql_type_prefixer.prefix_transformation import (
    TransformationError,
    TransformRequest,
    execute_prefix_transformation,
)

_PACKAGE_LOGGER = logging.getLogger("graphql_type_prefixer")
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


class _StderrEchoHandler(logging.Handler):
    """Write log records to click's current error stream."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-except
            self.handleError(record)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="graphql-type-prefixer")
@click.option(
    "--prefix",
    "prefix",
    required=False,
    type=str,
    help="Prefix added to every user-defined type name (required unless set in --config)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON file with prefix and reserved type names",
)
@click.option(
    "--input",
    "input_stream",
    default="-",
    show_default=True,
    type=click.File("r", encoding="utf-8"),
    help="GraphQL SDL file to read ('-' reads standard input)",
)
@click.option(
    "--output",
    "output_stream",
    default="-",
    show_default=True,
    type=click.File("w", encoding="utf-8", lazy=True),
    help="Destination for the prefixed schema ('-' writes standard output)",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Log every assigned type rename to standard error.",
)
def cli(
    prefix: str | None,
    config_path: str | None,
    input_stream: TextIO,
    output_stream: TextIO,
    verbose: bool,
) -> None:
    """Prefix user-defined type names in a GraphQL schema.

    Example: cat schema.graphql | graphql-type-prefixer --prefix Shopify
    """
    _configure_logging(verbose)
    try:
        outcome = execute_prefix_transformation(
            TransformRequest(prefix=prefix, config_path=config_path),
            input_stream,
        )
    except TransformationError as exc:
        raise CliError(str(exc)) from exc
    try:
        click.echo(outcome.schema_text, file=output_stream)
    except OSError as exc:
        raise CliError(f"Failed to write schema: {exc}") from exc


def _configure_logging(verbose: bool) -> None:
    for handler in list(_PACKAGE_LOGGER.handlers):
        if isinstance(handler, _StderrEchoHandler):
            _PACKAGE_LOGGER.removeHandler(handler)
    handler = _StderrEchoHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    _PACKAGE_LOGGER.addHandler(handler)
    _PACKAGE_LOGGER.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(f"Error: {exc}", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
