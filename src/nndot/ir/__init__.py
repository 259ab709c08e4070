"""Intermediate representation: networkx view of the AST."""

from nndot.ir.graph import EdgeData, GraphIR, NodeData

__all__ = [
    "EdgeData",
    "GraphIR",
    "NodeData",
]
