"""Tests for nndot.syntax.ast module.

Verifies construction, immutability, chain helpers, and identifier validation.
"""

import dataclasses

import pytest

from nndot.syntax.ast import (
    ID,
    AttrAssignStmt,
    EdgeContinuation,
    EdgeStmt,
    Graph,
    NodeIdEndpoint,
    StmtList,
    valid_as_id,
)
from nndot.types import RESERVED_WORDS, EdgeOp

# ─── Identifiers ─────────────────────────────────────────────────────────────


@pytest.mark.parametrize("token", ["a", "abc", "A1", "x9y", "Ünïcode"])
def test_valid_as_id(token):
    assert valid_as_id(token)


@pytest.mark.parametrize("token", ["", "1", "9a", "a b", "a_b", "a.b", '"a"', "=", "--", "->"])
def test_invalid_as_id(token):
    assert not valid_as_id(token)


def test_reserved_words_any_case():
    for word in RESERVED_WORDS:
        assert not valid_as_id(word)
        assert not valid_as_id(word.upper())
        assert not valid_as_id(word.capitalize())


def test_reserved_word_prefix_is_fine():
    assert valid_as_id("nodes")
    assert valid_as_id("graph2")


# ─── EdgeOp ──────────────────────────────────────────────────────────────────


def test_edge_op_tokens():
    assert EdgeOp.Directed.token == "->"
    assert EdgeOp.Undirected.token == "--"
    assert EdgeOp.from_token("->") == EdgeOp.Directed
    assert EdgeOp.from_token("--") == EdgeOp.Undirected
    assert EdgeOp.from_token("=") is None
    assert len(EdgeOp) == 2


# ─── Immutability ────────────────────────────────────────────────────────────


def test_nodes_are_frozen():
    node_id = ID("a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node_id.name = "b"  # type: ignore[misc]

    stmt = AttrAssignStmt(left=ID("a"), right=ID("b"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        stmt.left = ID("c")  # type: ignore[misc]


def test_structural_equality():
    assert NodeIdEndpoint(ID("a")) == NodeIdEndpoint(ID("a"))
    assert EdgeStmt(NodeIdEndpoint(ID("a"))) != EdgeStmt(NodeIdEndpoint(ID("b")))


# ─── EdgeContinuation ────────────────────────────────────────────────────────


def test_edge_continuation_chain_and_segments():
    b = NodeIdEndpoint(ID("b"))
    c = NodeIdEndpoint(ID("c"))
    cont = EdgeContinuation.chain([(EdgeOp.Undirected, b), (EdgeOp.Directed, c)])
    assert cont.op == EdgeOp.Undirected
    assert cont.endpoint == b
    assert cont.next == EdgeContinuation(op=EdgeOp.Directed, endpoint=c)
    assert list(cont.segments()) == [(EdgeOp.Undirected, b), (EdgeOp.Directed, c)]


def test_edge_continuation_chain_rejects_empty():
    with pytest.raises(ValueError):
        EdgeContinuation.chain([])


def test_edge_stmt_endpoints_and_ops():
    a, b, c = (NodeIdEndpoint(ID(n)) for n in "abc")
    stmt = EdgeStmt(
        endpoint=a,
        continuation=EdgeContinuation.chain([(EdgeOp.Directed, b), (EdgeOp.Directed, c)]),
    )
    assert stmt.endpoints() == [a, b, c]
    assert stmt.ops() == [EdgeOp.Directed, EdgeOp.Directed]


def test_single_endpoint_edge_stmt():
    stmt = EdgeStmt(endpoint=NodeIdEndpoint(ID("lonely")))
    assert stmt.continuation is None
    assert stmt.endpoints() == [NodeIdEndpoint(ID("lonely"))]
    assert stmt.ops() == []


# ─── StmtList / Graph ────────────────────────────────────────────────────────


def test_stmt_list_iterates_in_order():
    s1 = AttrAssignStmt(left=ID("k"), right=ID("v"))
    s2 = EdgeStmt(endpoint=NodeIdEndpoint(ID("a")))
    stmts = StmtList.chain([s1, s2])
    assert stmts.stmt == s1
    assert stmts.next == StmtList(stmt=s2)
    assert list(stmts) == [s1, s2]
    assert len(stmts) == 2


def test_stmt_list_chain_rejects_empty():
    with pytest.raises(ValueError):
        StmtList.chain([])


def test_graph_construction():
    stmts = StmtList(stmt=EdgeStmt(endpoint=NodeIdEndpoint(ID("a"))))
    graph = Graph(strict=True, directed=False, stmts=stmts)
    assert graph.strict is True
    assert graph.directed is False
    assert list(graph.stmts) == [stmts.stmt]
