"""Graph IR — converts an AST Graph into a networkx graph for analysis.

Edge chains are flattened into one edge per consecutive endpoint pair and
attribute assignments are collected into a flat mapping. Strict graphs
collapse duplicate edges; non-strict graphs keep them as multi-edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import networkx as nx

from nndot.syntax import ast
from nndot.types import EdgeOp

logger = logging.getLogger(__name__)


@dataclass
class NodeData:
    id: str


@dataclass
class EdgeData:
    op: EdgeOp


class GraphIR:
    """The graph intermediate representation built from an AST Graph.

    Wraps a networkx graph and exposes helpers for topology queries.
    """

    def __init__(self, nxgraph: nx.Graph, strict: bool, directed: bool, attrs: dict[str, str]) -> None:
        self.nxgraph = nxgraph
        self.strict = strict
        self.directed = directed
        self.attrs = attrs

    @classmethod
    def from_ast(cls, ast_graph: ast.Graph) -> GraphIR:
        """Build a GraphIR from an AST Graph."""
        nxgraph = _empty_graph(strict=ast_graph.strict, directed=ast_graph.directed)
        attrs: dict[str, str] = {}

        for stmt in ast_graph.stmts:
            if isinstance(stmt, ast.AttrAssignStmt):
                attrs[stmt.left.name] = stmt.right.name
            elif isinstance(stmt, ast.EdgeStmt):
                _add_edge_stmt(nxgraph, stmt, directed=ast_graph.directed)

        return cls(nxgraph=nxgraph, strict=ast_graph.strict, directed=ast_graph.directed, attrs=attrs)

    def node_count(self) -> int:
        return self.nxgraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.nxgraph.number_of_edges()

    def nodes(self) -> list[str]:
        return list(self.nxgraph.nodes)

    def edges(self) -> list[tuple[str, str]]:
        return [(u, v) for u, v, *_ in self.nxgraph.edges]

    def neighbors(self, node_id: str) -> list[str]:
        if node_id not in self.nxgraph:
            return []
        return sorted(set(self.nxgraph.neighbors(node_id)))

    def is_dag(self) -> bool:
        if not self.directed:
            return False
        return nx.is_directed_acyclic_graph(self.nxgraph)


def _empty_graph(strict: bool, directed: bool) -> nx.Graph:
    if strict:
        return nx.DiGraph() if directed else nx.Graph()
    return nx.MultiDiGraph() if directed else nx.MultiGraph()


def _endpoint_id(endpoint: ast.EdgeEndpoint) -> str:
    return endpoint.id.name


def _ensure_node(nxgraph: nx.Graph, node_id: str) -> None:
    if node_id not in nxgraph:
        nxgraph.add_node(node_id, data=NodeData(id=node_id))


def _add_edge_stmt(nxgraph: nx.Graph, stmt: ast.EdgeStmt, directed: bool) -> None:
    prev_id = _endpoint_id(stmt.endpoint)
    _ensure_node(nxgraph, prev_id)
    if stmt.continuation is None:
        return
    for op, endpoint in stmt.continuation.segments():
        node_id = _endpoint_id(endpoint)
        _ensure_node(nxgraph, node_id)
        if (op is EdgeOp.Directed) != directed:
            logger.warning(
                "edge %s %s %s does not match %s graph",
                prev_id,
                op.token,
                node_id,
                "directed" if directed else "undirected",
            )
        nxgraph.add_edge(prev_id, node_id, data=EdgeData(op=op))
        prev_id = node_id
