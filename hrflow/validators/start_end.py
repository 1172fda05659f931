"""Start and end node validators."""

from ..graph.workflow_graph import WorkflowGraph
from .base import ValidationResult


def check_start_nodes(graph: WorkflowGraph) -> ValidationResult:
    """Check that the workflow has exactly one start node with nothing before it.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with errors for a missing, duplicated or
        preceded start node.
    """
    result = ValidationResult()
    start_nodes = graph.get_start_nodes()

    if not start_nodes:
        result.add_error(
            code="NO_START_NODE",
            message="Workflow must have at least one Start node",
        )
    elif len(start_nodes) > 1:
        result.add_error(
            code="MULTIPLE_START_NODES",
            message="Workflow should have only one Start node",
            node_ids=[n.id for n in start_nodes],
        )
    elif graph.has_incoming(start_nodes[0].id):
        result.add_error(
            code="START_HAS_INCOMING",
            message="Start node must be the first node (cannot have incoming connections)",
            node_id=start_nodes[0].id,
        )

    return result


def check_end_nodes(graph: WorkflowGraph) -> ValidationResult:
    """Check that the workflow has at least one end node.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with an error if no end node exists.
    """
    result = ValidationResult()

    if not graph.get_end_nodes():
        result.add_error(
            code="NO_END_NODE",
            message="Workflow must have at least one End node",
        )

    return result
