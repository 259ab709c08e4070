"""nndot: DOT-like graph description tokenizer and parser."""

from nndot.config import ParseConfig
from nndot.parsers import DotSyntaxError, parse
from nndot.parsers.dot import parse_graph
from nndot.syntax.ast import Graph
from nndot.syntax.errors import ParseFailure
from nndot.syntax.tokenizer import tokenize


def parse_dsl(src: str, allow_trailing: bool = False) -> Graph:
    """Parse a DOT-like graph string into an AST Graph.

    Args:
        src: Graph source text.
        allow_trailing: Accept (and ignore) tokens after the closing brace.

    Returns:
        The root Graph node.

    Raises:
        DotSyntaxError: If the input cannot be parsed. This is a ValueError.
    """
    return parse(src, ParseConfig(allow_trailing=allow_trailing))


__all__ = [
    "DotSyntaxError",
    "Graph",
    "ParseConfig",
    "ParseFailure",
    "parse",
    "parse_dsl",
    "parse_graph",
    "tokenize",
]
