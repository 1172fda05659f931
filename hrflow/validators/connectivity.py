"""Node connectivity validators."""

from ..graph.workflow_graph import WorkflowGraph
from .base import ValidationResult


def check_node_connections(graph: WorkflowGraph) -> ValidationResult:
    """Check that every node is wired into the flow.

    A start node needs an outgoing edge, an end node needs an incoming edge,
    and every other node needs both. A node with no edges at all is reported
    for each side it is missing.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with errors for unconnected nodes.
    """
    result = ValidationResult()

    for node in graph.get_nodes():
        has_incoming = graph.has_incoming(node.id)
        has_outgoing = graph.has_outgoing(node.id)
        name = node.label or node.id

        if node.is_start:
            if not has_outgoing:
                result.add_error(
                    code="START_NO_OUTGOING",
                    message=f'Start node "{name}" has no outgoing connections',
                    node_id=node.id,
                )
        elif node.is_end:
            if not has_incoming:
                result.add_error(
                    code="END_NO_INCOMING",
                    message=f'End node "{name}" has no incoming connections',
                    node_id=node.id,
                )
        else:
            if not has_incoming:
                result.add_error(
                    code="NODE_NO_INCOMING",
                    message=f'Node "{name}" has no incoming connections',
                    node_id=node.id,
                )
            if not has_outgoing:
                result.add_error(
                    code="NODE_NO_OUTGOING",
                    message=f'Node "{name}" has no outgoing connections',
                    node_id=node.id,
                )

    return result


def check_dangling_edges(graph: WorkflowGraph) -> ValidationResult:
    """Check for edges that point at nodes which do not exist.

    These show up transiently while a node is being deleted on the canvas,
    so they are warnings rather than errors.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with warnings for dangling edges.
    """
    result = ValidationResult()

    for edge in graph.get_dangling_edges():
        missing = [
            endpoint
            for endpoint in (edge.source, edge.target)
            if not graph.is_node(endpoint)
        ]
        result.add_warning(
            code="DANGLING_EDGE",
            message=(
                f'Connection "{edge.id}" references missing node(s): '
                + ", ".join(f'"{m}"' for m in missing)
            ),
            edge_id=edge.id,
            missing_nodes=missing,
        )

    return result
