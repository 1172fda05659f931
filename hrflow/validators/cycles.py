"""Cycle detection validator."""

from ..graph.workflow_graph import WorkflowGraph
from .base import ValidationResult


def check_cycles(graph: WorkflowGraph) -> ValidationResult:
    """Check for a directed cycle reachable from the start node.

    The search runs from the first start node only. With several start
    nodes the workflow is already invalid, so cycles reachable only from
    the others are not looked for.

    Args:
        graph: The workflow graph to check.

    Returns:
        ValidationResult with a single error if a cycle is found.
    """
    result = ValidationResult()

    start_nodes = graph.get_start_nodes()
    if not start_nodes:
        return result

    cycle = graph.find_cycle_from(start_nodes[0].id)
    if cycle:
        result.add_error(
            code="CYCLE_DETECTED",
            message="Workflow contains a cycle (circular dependency)",
            cycle=[source for source, _ in cycle],
        )

    return result
