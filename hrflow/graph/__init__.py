"""Graph layer for representing workflows as networkx graphs."""

from .workflow_graph import WorkflowGraph
from .builder import build_graph

__all__ = [
    "WorkflowGraph",
    "build_graph",
]
