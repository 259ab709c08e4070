"""Shared type definitions for nndot.

Enums and small constants used across the tokenizer, parser, IR, and printer.
"""

from __future__ import annotations

from enum import Enum, auto

Token = str

RESERVED_WORDS: frozenset[str] = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})


class EdgeOp(Enum):
    Directed = auto()  # ->
    Undirected = auto()  # --

    @property
    def token(self) -> str:
        return "->" if self is EdgeOp.Directed else "--"

    @classmethod
    def from_token(cls, token: str) -> EdgeOp | None:
        if token == "->":
            return cls.Directed
        if token == "--":
            return cls.Undirected
        return None


class FailureKind(Enum):
    EmptyInput = auto()
    InvalidIdentifier = auto()
    ExpectedEquals = auto()
    ExpectedEdgeOperator = auto()
    ExpectedGraphKeyword = auto()
    ExpectedOpenBrace = auto()
    ExpectedCloseBrace = auto()
    ExpectedStatement = auto()
    TrailingTokens = auto()
