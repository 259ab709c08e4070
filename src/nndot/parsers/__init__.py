"""Parser front door — tokenize, parse, and enforce whole-input parsing."""

from __future__ import annotations

import logging

from nndot.config import ParseConfig
from nndot.parsers.base import Parser
from nndot.parsers.dot import parse_graph
from nndot.syntax.ast import Graph
from nndot.syntax.errors import DotSyntaxError, ParseFailure
from nndot.syntax.tokenizer import tokenize
from nndot.types import FailureKind

logger = logging.getLogger(__name__)


class DotParser:
    """DOT-like graph parser."""

    def __init__(self, config: ParseConfig | None = None) -> None:
        self.config = config or ParseConfig()

    def parse(self, src: str) -> Graph:
        tokens = tokenize(src)
        logger.debug("tokenized %d characters into %d tokens", len(src), len(tokens))

        result = parse_graph(tokens)
        if isinstance(result, ParseFailure):
            logger.debug("parse failed: %s", result.kind.name)
            raise DotSyntaxError(result)
        graph, rest = result

        if rest:
            if not self.config.allow_trailing:
                raise DotSyntaxError(ParseFailure.at(FailureKind.TrailingTokens, rest))
            logger.warning("ignoring %d trailing token(s) after graph", len(rest))

        logger.debug(
            "parsed %s%s with %d statement(s)",
            "strict " if graph.strict else "",
            "digraph" if graph.directed else "graph",
            len(graph.stmts),
        )
        return graph


def parse(src: str, config: ParseConfig | None = None) -> Graph:
    """Tokenize and parse src into an AST Graph.

    Raises:
        DotSyntaxError: If the source is not a valid graph, or has trailing
            tokens while config.allow_trailing is false.
    """
    parser: Parser = DotParser(config)
    return parser.parse(src)


__all__ = ["DotParser", "DotSyntaxError", "Parser", "parse"]
