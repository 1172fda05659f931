"""WorkflowGraph wrapper around networkx for workflow models."""

import networkx as nx

from ..schema.models import Edge, Node
from ..schema.node_types import NodeType


class WorkflowGraph:
    """A directed graph view of a workflow.

    Wraps a networkx DiGraph keyed by node id. Workflow nodes carry the
    ``node`` attribute; ids that only appear as an edge endpoint are kept as
    bare placeholder nodes so dangling edges still count towards connectivity.
    Nodes sharing an id share one graph vertex, but every node is still
    listed by ``get_nodes`` so counting rules see all of them.

    Successors are returned in edge declaration order, which the execution
    order relies on for branch tie-breaks.
    """

    def __init__(self):
        """Initialize an empty workflow graph."""
        self._graph = nx.DiGraph()
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> str:
        """Add a workflow node. Lookups by id return the first node added.

        Returns:
            The node ID.
        """
        self._nodes.append(node)
        if not self.is_node(node.id):
            self._graph.add_node(node.id, node=node, node_type=node.type)
        return node.id

    def add_edge(self, edge: Edge) -> None:
        """Add an edge, creating placeholder endpoints if needed."""
        self._edges.append(edge)
        if self._graph.has_edge(edge.source, edge.target):
            self._graph.edges[edge.source, edge.target]["edge_ids"].append(edge.id)
        else:
            self._graph.add_edge(edge.source, edge.target, edge_ids=[edge.id])

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_node(self, node_id: str) -> bool:
        """Check whether an id belongs to a workflow node (not a placeholder)."""
        return self._graph.has_node(node_id) and "node" in self._graph.nodes[node_id]

    def get_node(self, node_id: str) -> Node | None:
        if self.is_node(node_id):
            return self._graph.nodes[node_id]["node"]
        return None

    def get_nodes(self) -> list[Node]:
        """Get every workflow node in insertion order, duplicate ids included."""
        return list(self._nodes)

    def get_nodes_of_type(self, node_type: NodeType) -> list[Node]:
        return [n for n in self.get_nodes() if n.type == node_type.value]

    def get_start_nodes(self) -> list[Node]:
        return self.get_nodes_of_type(NodeType.START)

    def get_end_nodes(self) -> list[Node]:
        return self.get_nodes_of_type(NodeType.END)

    def has_incoming(self, node_id: str) -> bool:
        """Check if any edge targets the node."""
        return self._graph.has_node(node_id) and self._graph.in_degree(node_id) > 0

    def has_outgoing(self, node_id: str) -> bool:
        """Check if any edge leaves the node."""
        return self._graph.has_node(node_id) and self._graph.out_degree(node_id) > 0

    def get_successors(self, node_id: str) -> list[str]:
        """Get the ids an edge leads to from a node, in edge declaration order."""
        if not self._graph.has_node(node_id):
            return []
        return list(self._graph.successors(node_id))

    def get_dangling_edges(self) -> list[Edge]:
        """Get edges whose source or target is not a workflow node."""
        return [
            edge
            for edge in self._edges
            if not self.is_node(edge.source) or not self.is_node(edge.target)
        ]

    def find_cycle_from(self, node_id: str) -> list[tuple[str, str]] | None:
        """Find a directed cycle reachable from a node.

        Args:
            node_id: The node to start the search from.

        Returns:
            The cycle as a list of (source, target) pairs, or None.
        """
        if not self._graph.has_node(node_id):
            return None
        try:
            cycle = nx.find_cycle(self._graph, source=node_id)
        except nx.NetworkXNoCycle:
            return None
        return [(u, v) for u, v, *_ in cycle]
