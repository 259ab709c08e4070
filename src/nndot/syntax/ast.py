"""AST data structures for the DOT-like graph language.

These types represent the parsed form of the input source: identifiers,
attribute assignments, edge chains, statement lists, and the root Graph.
Every node is a frozen dataclass built bottom-up by the parser. Chains
(edge continuations, statement lists) are right-recursive optional links.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from nndot.types import RESERVED_WORDS, EdgeOp


def valid_as_id(token: str) -> bool:
    """True if token is alphanumeric, starts with a letter, and is not reserved."""
    if not token or not token[0].isalpha():
        return False
    if not all(c.isalnum() for c in token):
        return False
    return token.lower() not in RESERVED_WORDS


@dataclass(frozen=True)
class ID:
    name: str


@dataclass(frozen=True)
class AttrAssignStmt:
    left: ID
    right: ID


@dataclass(frozen=True)
class NodeIdEndpoint:
    id: ID


# Future endpoint variants (subgraphs) join this union.
EdgeEndpoint = Union[NodeIdEndpoint]


@dataclass(frozen=True)
class EdgeContinuation:
    op: EdgeOp
    endpoint: EdgeEndpoint
    next: EdgeContinuation | None = None

    def segments(self) -> Iterator[tuple[EdgeOp, EdgeEndpoint]]:
        """Yield (op, endpoint) pairs from this link to the end of the chain."""
        link: EdgeContinuation | None = self
        while link is not None:
            yield link.op, link.endpoint
            link = link.next

    @classmethod
    def chain(cls, segments: list[tuple[EdgeOp, EdgeEndpoint]]) -> EdgeContinuation:
        """Fold a non-empty segment list into a right-recursive chain."""
        if not segments:
            raise ValueError("an edge continuation needs at least one segment")
        tail: EdgeContinuation | None = None
        for op, endpoint in reversed(segments):
            tail = cls(op=op, endpoint=endpoint, next=tail)
        assert tail is not None
        return tail


@dataclass(frozen=True)
class EdgeStmt:
    endpoint: EdgeEndpoint
    continuation: EdgeContinuation | None = None

    def endpoints(self) -> list[EdgeEndpoint]:
        """All endpoints of the chain in source order."""
        result = [self.endpoint]
        if self.continuation is not None:
            result.extend(endpoint for _, endpoint in self.continuation.segments())
        return result

    def ops(self) -> list[EdgeOp]:
        if self.continuation is None:
            return []
        return [op for op, _ in self.continuation.segments()]


# Future statement variants (node, attr list, subgraph) join this union.
Stmt = Union[AttrAssignStmt, EdgeStmt]


@dataclass(frozen=True)
class StmtList:
    stmt: Stmt
    next: StmtList | None = None

    def __iter__(self) -> Iterator[Stmt]:
        link: StmtList | None = self
        while link is not None:
            yield link.stmt
            link = link.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    @classmethod
    def chain(cls, stmts: list[Stmt]) -> StmtList:
        """Fold a non-empty statement list into a right-recursive chain."""
        if not stmts:
            raise ValueError("a statement list needs at least one statement")
        tail: StmtList | None = None
        for stmt in reversed(stmts):
            tail = cls(stmt=stmt, next=tail)
        assert tail is not None
        return tail


@dataclass(frozen=True)
class Graph:
    strict: bool
    directed: bool
    stmts: StmtList
