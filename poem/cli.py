"""
Command line interface for the Poem compiler.

Commands:
    - tokens: Tokenize a source file and print the token stream
"""

import json
import logging
import sys

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __version__
from .lexer import Lexer, LexerConfig, LexerError, SkipPolicy, EscapeMode, read_source
from .lexer.tokens import Token

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _token_row(token: Token) -> dict:
    location = token.location
    return {
        "type": token.type.name,
        "value": token.value,
        "line": location.line if location else None,
        "column": location.column if location else None,
    }


def _render_table(tokens, title: str) -> Table:
    table = Table(title=Text(title))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Value")
    table.add_column("Position", style="dim")

    for index, token in enumerate(tokens):
        value = "" if token.value is None else repr(token.value)
        location = token.location
        position = f"{location.line}:{location.column}" if location else ""
        table.add_row(str(index), token.type.name, Text(value), position)

    return table


@click.group(name="poemc")
@click.version_option(__version__, prog_name="poemc")
def cli():
    """Poem compiler tools."""


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Fail on the first unrecognized input")
@click.option("--diagnostics", is_flag=True, help="Report skipped input as warnings")
@click.option("--decode-escapes", is_flag=True, help="Decode backslash escapes in strings")
@click.option("--json", "json_output", is_flag=True, help="Output tokens as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def tokens(path, strict, diagnostics, decode_escapes, json_output, verbose):
    """Tokenize PATH and print the token stream."""
    _configure_logging(verbose)

    if strict and diagnostics:
        raise click.UsageError("--strict and --diagnostics cannot be used together")

    if strict:
        policy = SkipPolicy.STRICT
    elif diagnostics:
        policy = SkipPolicy.COLLECT
    else:
        policy = SkipPolicy.SILENT
    config = LexerConfig(
        skip_policy=policy,
        escape_mode=EscapeMode.DECODE if decode_escapes else EscapeMode.RAW,
    )
    logger.debug("Tokenizing %s (%s, %s)", path, policy.name, config.escape_mode.name)

    source = read_source(path)
    lexer = Lexer(source, path, config)
    try:
        result = lexer.tokenize()
    except LexerError as e:
        err_console.print(str(e), markup=False, highlight=False)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps([_token_row(token) for token in result], indent=2))
    else:
        console.print(_render_table(result, title=f"{path} ({len(result)} tokens)"))

    for warning in lexer.warnings:
        err_console.print(str(warning), markup=False, highlight=False)


def main():
    cli()


if __name__ == "__main__":
    main()
