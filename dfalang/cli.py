"""Command-line interface for dfalang."""

import logging
import sys

import click

from .graph.builder import build_graph
from .output.formatter import format_graph, format_validation_result
from .output.serializer import dump_automaton, write_automaton
from .schema.errors import AutomatonValidationError, DfaLoadError, DfaSyntaxError
from .validators.runner import load_automaton, validate_dfa_file

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _load_or_exit(dfa_file: str):
    """Load an automaton, reporting failures the way every command does."""
    try:
        return load_automaton(dfa_file)
    except DfaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except DfaSyntaxError as e:
        click.echo(f"Syntax error: {e}", err=True)
        sys.exit(2)
    except AutomatonValidationError as e:
        click.echo(f"Invalid automaton: {e}", err=True)
        for line in e.report.splitlines():
            click.echo(f"  - {line}", err=True)
        sys.exit(1)


@click.group()
@click.version_option()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="DFALANG_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity (defaults to DFALANG_LOG_LEVEL env var)",
)
def main(log_level: str):
    """dfalang: parse, check and export DFA descriptions."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@main.command()
@click.argument("dfa_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(dfa_file: str, output_format: str, strict: bool):
    """Validate a DFA description file.

    DFA_FILE is the path to a DFA description.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or syntax error
    """
    try:
        result = validate_dfa_file(dfa_file)
    except DfaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except DfaSyntaxError as e:
        click.echo(f"Syntax error: {e}", err=True)
        sys.exit(2)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command("fmt")
@click.argument("dfa_file", type=click.Path(exists=True))
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the canonical form to this file instead of stdout",
)
def fmt_cmd(dfa_file: str, output_path: str | None):
    """Print a DFA description in canonical form.

    DFA_FILE is the path to a DFA description.

    Exit codes:
      0 - Success
      1 - The automaton is invalid
      2 - File or syntax error
    """
    automaton = _load_or_exit(dfa_file)

    if output_path is None:
        click.echo(dump_automaton(automaton), nl=False)
    else:
        write_automaton(automaton, output_path)
        click.echo(f"Wrote: {output_path}")
    sys.exit(0)


@main.command("graph")
@click.argument("dfa_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def graph_cmd(dfa_file: str, output_format: str):
    """Print the graph projection of a DFA description.

    DFA_FILE is the path to a DFA description.

    Edges group every symbol leading from one state to another. The JSON
    form is meant for rendering tools.
    """
    automaton = _load_or_exit(dfa_file)
    graph = build_graph(automaton)
    click.echo(format_graph(graph, output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
