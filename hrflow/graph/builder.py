"""Builder for converting a Workflow to a WorkflowGraph."""

from ..schema.models import Workflow
from .workflow_graph import WorkflowGraph


def build_graph(workflow: Workflow) -> WorkflowGraph:
    """Build a WorkflowGraph from a Workflow.

    Args:
        workflow: The workflow model.

    Returns:
        A WorkflowGraph representing the workflow.
    """
    graph = WorkflowGraph()

    # Nodes first, so edge endpoints resolve to workflow nodes
    for node in workflow.nodes:
        graph.add_node(node)

    for edge in workflow.edges:
        graph.add_edge(edge)

    return graph
