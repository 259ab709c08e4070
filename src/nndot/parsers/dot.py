"""DOT graph parser — hand-rolled recursive descent over a token sequence.

One public function per grammar production. Each takes the remaining tokens
and returns either ``(node, rest)`` with ``rest`` a fresh tuple of the
unconsumed suffix, or a ParseFailure. Optional parts are tried speculatively:
a failed attempt is discarded and the simpler shape already parsed is
returned.

Internally every production works on the whole token tuple plus a position
and returns the position after what it consumed, so a parse is linear in the
number of tokens. The public functions slice once on the way out.

Grammar::

    graph        = ["strict"] ("graph" | "digraph") "{" stmt_list "}"
    stmt_list    = stmt [";"] [stmt_list]
    stmt         = attr_assign | edge_stmt
    attr_assign  = id "=" id
    edge_stmt    = endpoint [edge_cont]
    edge_cont    = edge_op endpoint [edge_cont]
    endpoint     = id
    edge_op      = "--" | "->"
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from nndot.syntax.ast import (
    ID,
    AttrAssignStmt,
    EdgeContinuation,
    EdgeEndpoint,
    EdgeStmt,
    Graph,
    NodeIdEndpoint,
    Stmt,
    StmtList,
    valid_as_id,
)
from nndot.syntax.errors import ParseFailure
from nndot.types import EdgeOp, FailureKind, Token

Tokens = tuple[Token, ...]

T = TypeVar("T")

_STRICT = "strict"
_GRAPH = "graph"
_DIGRAPH = "digraph"


def _run(
    production: Callable[[Tokens, int], tuple[T, int] | ParseFailure],
    tokens: Sequence[Token],
) -> tuple[T, Tokens] | ParseFailure:
    """Run an internal production from the start of tokens and slice the rest once."""
    tokens = tuple(tokens)
    result = production(tokens, 0)
    if isinstance(result, ParseFailure):
        return result
    node, pos = result
    return node, tokens[pos:]


def _expect(tokens: Tokens, pos: int, literal: str, kind: FailureKind) -> int | ParseFailure:
    """Consume one exact literal token, or fail with kind (EmptyInput if none left)."""
    if pos >= len(tokens):
        return ParseFailure.at(FailureKind.EmptyInput, tokens, pos)
    if tokens[pos] != literal:
        return ParseFailure.at(kind, tokens, pos)
    return pos + 1


# ─── Identifiers ─────────────────────────────────────────────────────────────


def _id(tokens: Tokens, pos: int) -> tuple[ID, int] | ParseFailure:
    if pos >= len(tokens):
        return ParseFailure.at(FailureKind.EmptyInput, tokens, pos)
    if not valid_as_id(tokens[pos]):
        return ParseFailure.at(FailureKind.InvalidIdentifier, tokens, pos)
    return ID(name=tokens[pos]), pos + 1


def parse_id(tokens: Sequence[Token]) -> tuple[ID, Tokens] | ParseFailure:
    return _run(_id, tokens)


# ─── Attribute assignment ────────────────────────────────────────────────────


def _attr_assign_stmt(tokens: Tokens, pos: int) -> tuple[AttrAssignStmt, int] | ParseFailure:
    result = _id(tokens, pos)
    if isinstance(result, ParseFailure):
        return result
    left, pos = result

    if pos >= len(tokens) or tokens[pos] != "=":
        return ParseFailure.at(FailureKind.ExpectedEquals, tokens, pos)

    result = _id(tokens, pos + 1)
    if isinstance(result, ParseFailure):
        return result
    right, pos = result
    return AttrAssignStmt(left=left, right=right), pos


def parse_attr_assign_stmt(tokens: Sequence[Token]) -> tuple[AttrAssignStmt, Tokens] | ParseFailure:
    return _run(_attr_assign_stmt, tokens)


# ─── Edges ───────────────────────────────────────────────────────────────────


def _edge_endpoint(tokens: Tokens, pos: int) -> tuple[EdgeEndpoint, int] | ParseFailure:
    # A subgraph endpoint would be tried here as an alternative.
    result = _id(tokens, pos)
    if isinstance(result, ParseFailure):
        return result
    node_id, pos = result
    return NodeIdEndpoint(id=node_id), pos


def parse_edge_endpoint(tokens: Sequence[Token]) -> tuple[EdgeEndpoint, Tokens] | ParseFailure:
    return _run(_edge_endpoint, tokens)


def _edge_operator(tokens: Tokens, pos: int) -> tuple[EdgeOp, int] | ParseFailure:
    op = EdgeOp.from_token(tokens[pos]) if pos < len(tokens) else None
    if op is None:
        return ParseFailure.at(FailureKind.ExpectedEdgeOperator, tokens, pos)
    return op, pos + 1


def parse_edge_operator(tokens: Sequence[Token]) -> tuple[EdgeOp, Tokens] | ParseFailure:
    return _run(_edge_operator, tokens)


def _edge_segment(tokens: Tokens, pos: int) -> tuple[tuple[EdgeOp, EdgeEndpoint], int] | ParseFailure:
    result = _edge_operator(tokens, pos)
    if isinstance(result, ParseFailure):
        return result
    op, pos = result

    endpoint_result = _edge_endpoint(tokens, pos)
    if isinstance(endpoint_result, ParseFailure):
        return endpoint_result
    endpoint, pos = endpoint_result
    return (op, endpoint), pos


def _edge_continuation(tokens: Tokens, pos: int) -> tuple[EdgeContinuation, int] | ParseFailure:
    result = _edge_segment(tokens, pos)
    if isinstance(result, ParseFailure):
        return result
    segment, pos = result

    segments = [segment]
    while True:
        attempt = _edge_segment(tokens, pos)
        if isinstance(attempt, ParseFailure):
            break
        segment, pos = attempt
        segments.append(segment)
    return EdgeContinuation.chain(segments), pos


def parse_edge_continuation(tokens: Sequence[Token]) -> tuple[EdgeContinuation, Tokens] | ParseFailure:
    """Parse ``op endpoint`` followed by as many further segments as match.

    The first segment must parse. Later segments are speculative: the first
    one that fails ends the chain, and the tokens it looked at stay unconsumed.
    """
    return _run(_edge_continuation, tokens)


def _edge_stmt(tokens: Tokens, pos: int) -> tuple[EdgeStmt, int] | ParseFailure:
    result = _edge_endpoint(tokens, pos)
    if isinstance(result, ParseFailure):
        return result
    endpoint, pos = result

    attempt = _edge_continuation(tokens, pos)
    if isinstance(attempt, ParseFailure):
        return EdgeStmt(endpoint=endpoint), pos
    continuation, pos = attempt
    return EdgeStmt(endpoint=endpoint, continuation=continuation), pos


def parse_edge_stmt(tokens: Sequence[Token]) -> tuple[EdgeStmt, Tokens] | ParseFailure:
    return _run(_edge_stmt, tokens)


# ─── Statements ──────────────────────────────────────────────────────────────


def _stmt(tokens: Tokens, pos: int) -> tuple[Stmt, int] | ParseFailure:
    # Attribute assignment first: keeps error messages stable.
    attr = _attr_assign_stmt(tokens, pos)
    if not isinstance(attr, ParseFailure):
        return attr

    edge = _edge_stmt(tokens, pos)
    if not isinstance(edge, ParseFailure):
        return edge

    return ParseFailure.at(FailureKind.ExpectedStatement, tokens, pos, (attr, edge))


def parse_stmt(tokens: Sequence[Token]) -> tuple[Stmt, Tokens] | ParseFailure:
    return _run(_stmt, tokens)


def _skip_terminator(tokens: Tokens, pos: int) -> int:
    if pos < len(tokens) and tokens[pos] == ";":
        return pos + 1
    return pos


def _stmt_list(tokens: Tokens, pos: int) -> tuple[StmtList, int] | ParseFailure:
    result = _stmt(tokens, pos)
    if isinstance(result, ParseFailure):
        return result
    stmt, pos = result
    pos = _skip_terminator(tokens, pos)

    stmts = [stmt]
    while True:
        attempt = _stmt(tokens, pos)
        if isinstance(attempt, ParseFailure):
            break
        stmt, pos = attempt
        pos = _skip_terminator(tokens, pos)
        stmts.append(stmt)
    return StmtList.chain(stmts), pos


def parse_stmt_list(tokens: Sequence[Token]) -> tuple[StmtList, Tokens] | ParseFailure:
    """Parse one statement, then as many more as match.

    Stops at the first token no statement alternative accepts (normally the
    closing brace) without consuming it. A ';' after a statement belongs to
    that statement.
    """
    return _run(_stmt_list, tokens)


# ─── Graph ───────────────────────────────────────────────────────────────────


def _graph(tokens: Tokens, pos: int) -> tuple[Graph, int] | ParseFailure:
    strict = False
    if pos < len(tokens) and tokens[pos].lower() == _STRICT:
        strict = True
        pos += 1

    if pos >= len(tokens):
        return ParseFailure.at(FailureKind.EmptyInput, tokens, pos)
    keyword = tokens[pos].lower()
    if keyword not in (_GRAPH, _DIGRAPH):
        return ParseFailure.at(FailureKind.ExpectedGraphKeyword, tokens, pos)
    directed = keyword == _DIGRAPH
    pos += 1

    opened = _expect(tokens, pos, "{", FailureKind.ExpectedOpenBrace)
    if isinstance(opened, ParseFailure):
        return opened
    pos = opened

    if pos >= len(tokens):
        return ParseFailure.at(FailureKind.EmptyInput, tokens, pos)
    result = _stmt_list(tokens, pos)
    if isinstance(result, ParseFailure):
        return result
    stmts, pos = result

    closed = _expect(tokens, pos, "}", FailureKind.ExpectedCloseBrace)
    if isinstance(closed, ParseFailure):
        if closed.kind is FailureKind.ExpectedCloseBrace:
            # Report why the statement list stopped here.
            reason = _stmt(tokens, pos)
            if isinstance(reason, ParseFailure):
                closed = ParseFailure.at(FailureKind.ExpectedCloseBrace, tokens, pos, (reason,))
        return closed
    pos = closed

    return Graph(strict=strict, directed=directed, stmts=stmts), pos


def parse_graph(tokens: Sequence[Token]) -> tuple[Graph, Tokens] | ParseFailure:
    return _run(_graph, tokens)
