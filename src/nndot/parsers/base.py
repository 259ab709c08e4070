"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from nndot.syntax.ast import Graph


@runtime_checkable
class Parser(Protocol):
    """Protocol that all graph-source parsers must implement."""

    def parse(self, src: str) -> Graph:
        """Parse source text into an AST Graph."""
        ...
