"""CLI entry point for nndot."""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from nndot.config import ParseConfig
from nndot.ir.graph import GraphIR
from nndot.parsers import DotSyntaxError, parse
from nndot.syntax.ast import Graph
from nndot.syntax.printer import format_graph, format_tokens
from nndot.syntax.tokenizer import tokenize

logger = logging.getLogger("nndot.cli")


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        log_time_format="[%H:%M:%S]",
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(name)s] %(message)s",
        handlers=[handler],
        force=True,
    )


def _summary(graph: Graph) -> str:
    gir = GraphIR.from_ast(graph)
    kind = "digraph" if graph.directed else "graph"
    lines = [
        f"kind: {'strict ' if graph.strict else ''}{kind}",
        f"nodes: {gir.node_count()}",
        f"edges: {gir.edge_count()}",
    ]
    for key, value in gir.attrs.items():
        lines.append(f"attr: {key} = {value}")
    return "\n".join(lines) + "\n"


def _write(text: str, output: str | None) -> None:
    if output:
        try:
            with open(output, "w") as f:
                f.write(text)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(text, nl=False)


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--tokens", "-t", "show_tokens", is_flag=True, help="Print the token stream instead of parsing")
@click.option("--summary", "-s", "show_summary", is_flag=True, help="Print node/edge counts and attributes")
@click.option("--allow-trailing", is_flag=True, help="Ignore tokens after the closing brace")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    input: str | None,
    output: str | None,
    show_tokens: bool,
    show_summary: bool,
    allow_trailing: bool,
    verbose: bool,
) -> None:
    """Parse a DOT graph description and print it in canonical form."""
    setup_logging(verbose)

    if input:
        logger.info("input file: %s", input)
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    if show_tokens:
        _write(format_tokens(tokenize(text)), output)
        return

    try:
        graph = parse(text, ParseConfig(allow_trailing=allow_trailing))
    except DotSyntaxError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    _write(_summary(graph) if show_summary else format_graph(graph), output)


if __name__ == "__main__":
    main()
