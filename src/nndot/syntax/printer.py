"""Canonical text output for ASTs and token streams."""

from __future__ import annotations

from nndot.syntax import ast
from nndot.types import Token


def format_stmt(stmt: ast.Stmt) -> str:
    if isinstance(stmt, ast.AttrAssignStmt):
        return f"{stmt.left.name} = {stmt.right.name}"
    parts = [stmt.endpoint.id.name]
    if stmt.continuation is not None:
        for op, endpoint in stmt.continuation.segments():
            parts.append(op.token)
            parts.append(endpoint.id.name)
    return " ".join(parts)


def format_graph(graph: ast.Graph, indent: int = 4) -> str:
    """Render graph as canonical DOT, one statement per line.

    Tokenizing and parsing the result gives back an equal AST.
    """
    header = "digraph" if graph.directed else "graph"
    if graph.strict:
        header = "strict " + header
    pad = " " * indent
    lines = [header + " {"]
    lines.extend(pad + format_stmt(stmt) for stmt in graph.stmts)
    lines.append("}")
    return "\n".join(lines) + "\n"


def format_tokens(tokens: list[Token]) -> str:
    return "".join(f"{token!r}\n" for token in tokens)
